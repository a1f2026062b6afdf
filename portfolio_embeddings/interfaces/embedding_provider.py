"""Abstract base class for text-embedding service providers.

Defines the contract the embedding pipeline uses to turn a chunk of text
into a vector.  The pipeline only ever talks to this interface, so a test
double or another backend can be injected without touching the driver.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# Concrete implementations:
#   GeminiEmbeddingProvider - Google Gemini ``text-embedding-004`` over REST
# Located in: portfolio_embeddings/providers/embedding/
class IEmbeddingProvider(ABC):
    """Contract for text-embedding services used by the embedding pipeline."""

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text string.

        Exactly one outbound call is made per invocation; implementations
        must not cache or batch.

        Parameters
        ----------
        text:
            The text to embed.  Empty text is passed through to the
            provider unchanged.

        Returns
        -------
        list[float]
            A non-empty vector.  Its length is whatever the provider
            returns; callers do not assume a fixed dimensionality.

        Raises
        ------
        portfolio_embeddings.utils.errors.ProviderError
            If the call fails, times out, or the response carries no
            usable vector.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider, e.g. ``"gemini_embedding"``."""

    @abstractmethod
    def get_model_name(self) -> str:
        """Return the embedding model name, e.g. ``"text-embedding-004"``."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the provider is configured with credentials.

        Must not make a network call.
        """

    async def aclose(self) -> None:
        """Release any network resources held by the provider."""
