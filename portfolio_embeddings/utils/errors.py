"""Custom exception hierarchy for portfolio-embeddings.

All application exceptions inherit from :class:`PortfolioEmbeddingsError`,
which carries an optional ``provider_name`` so error handlers can identify
which external service (e.g. "gemini_embedding") caused the failure.

The hierarchy follows the three ways an embedding run can fail:

    PortfolioEmbeddingsError  (base -- catch-all for any error raised here)
    +-- ConfigurationError    (startup: missing credential, bad chunk file)
    +-- ProviderError         (embedding call failed or returned no vector)
    +-- PersistenceError      (vector-database.json could not be written/read)

None of these are retried automatically.  The CLI is the only layer that
turns them into exit codes; everything below it propagates.
"""


class PortfolioEmbeddingsError(Exception):
    """Base exception for all portfolio-embeddings errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which external service triggered the
    error.  The ``__str__`` method prefixes the provider name in brackets
    for log output, e.g. ``[gemini_embedding] HTTP 429``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Startup errors
# ---------------------------------------------------------------------------

class ConfigurationError(PortfolioEmbeddingsError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# External service errors
# ---------------------------------------------------------------------------

class ProviderError(PortfolioEmbeddingsError):
    """Raised when the embedding provider fails for a single text.

    Covers network failures, timeouts, error status codes, unparseable
    bodies and responses without a usable vector.  The pipeline re-raises
    it with ``chunk_id`` set so the operator knows which chunk aborted the
    run.
    """

    def __init__(
        self,
        message: str = "Embedding provider call failed",
        provider_name: str | None = None,
        chunk_id: str | None = None,
    ) -> None:
        self._chunk_id = chunk_id
        super().__init__(message=message, provider_name=provider_name)

    @property
    def chunk_id(self) -> str | None:
        return self._chunk_id


# ---------------------------------------------------------------------------
# Artifact errors
# ---------------------------------------------------------------------------

class PersistenceError(PortfolioEmbeddingsError):
    """Raised when the vector database artifact cannot be written or read."""

    def __init__(
        self,
        message: str = "Vector database persistence failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
