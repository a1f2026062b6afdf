"""Google Gemini embedding provider adapter.

Calls the Generative Language REST API (``models/{model}:embedContent``)
with ``httpx`` to implement :class:`IEmbeddingProvider`.  One request per
text; no batching, caching or retries.  Every transport or payload problem
is translated into :class:`ProviderError`.
"""

from __future__ import annotations

import httpx
import structlog

from portfolio_embeddings.config.settings import Settings
from portfolio_embeddings.interfaces.embedding_provider import IEmbeddingProvider
from portfolio_embeddings.providers.embedding.response_adapter import EmbeddingResponseAdapter
from portfolio_embeddings.utils.errors import ConfigurationError, ProviderError

logger = structlog.get_logger(logger_name=__name__)

_PROVIDER_NAME = "gemini_embedding"


class GeminiEmbeddingProvider(IEmbeddingProvider):
    """Embedding provider backed by Gemini ``text-embedding-004`` (768 dims).

    The API key travels in the ``x-goog-api-key`` header rather than the
    query string so it never shows up in httpx request logs.  An
    ``http_client`` may be injected (tests pass one built on
    ``httpx.MockTransport``); otherwise the provider owns its client and
    closes it in :meth:`aclose`.
    """

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
        response_adapter: EmbeddingResponseAdapter | None = None,
    ) -> None:
        if not settings.has_embedding_credentials():
            raise ConfigurationError(
                message="Missing API key. Set GEMINI_API_KEY in your environment or .env file.",
                provider_name=_PROVIDER_NAME,
            )
        self._api_key = settings.gemini_api_key.strip()
        self._model = settings.gemini_embedding_model
        self._endpoint = (
            f"{settings.gemini_base_url.rstrip('/')}/models/{self._model}:embedContent"
        )
        self._adapter = response_adapter or EmbeddingResponseAdapter()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.embedding_request_timeout),
        )

    # ------------------------------------------------------------------
    # IEmbeddingProvider implementation
    # ------------------------------------------------------------------

    async def embed(self, text: str) -> list[float]:
        """Embed *text* with a single ``embedContent`` call."""
        body = {
            "model": f"models/{self._model}",
            "content": {"parts": [{"text": text}]},
        }
        try:
            response = await self._client.post(
                self._endpoint,
                json=body,
                headers={"x-goog-api-key": self._api_key},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as exc:
            raise ProviderError(
                message=f"Embedding request timed out: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                message=(
                    f"HTTP {exc.response.status_code} from embedding API: "
                    f"{_error_detail(exc.response)}"
                ),
                provider_name=_PROVIDER_NAME,
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(
                message=f"HTTP error calling embedding API: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc
        except ValueError as exc:
            raise ProviderError(
                message=f"Embedding API returned a non-JSON body: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

        vector = self._adapter.extract(payload)
        if vector is None:
            raise ProviderError(
                message=(
                    "No embedding returned (expected one of "
                    f"{', '.join(self._adapter.vector_fields)})"
                ),
                provider_name=_PROVIDER_NAME,
            )

        logger.debug("gemini_embedding_call", model=self._model, dims=len(vector))
        return vector

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    def get_model_name(self) -> str:
        return self._model

    def is_available(self) -> bool:
        """Return ``True`` if an API key is configured."""
        return bool(self._api_key)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _error_detail(response: httpx.Response) -> str:
    """Pull the API's error message out of an error response, if it has one."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        return str(data["error"].get("message", response.reason_phrase))
    return response.reason_phrase
