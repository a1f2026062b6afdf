"""Shared pytest fixtures for the portfolio-embeddings test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import structlog

from portfolio_embeddings.config.settings import Settings
from portfolio_embeddings.interfaces.embedding_provider import IEmbeddingProvider
from portfolio_embeddings.models.knowledge import KnowledgeChunk
from portfolio_embeddings.providers.embedding.gemini_embedding_provider import (
    GeminiEmbeddingProvider,
)
from portfolio_embeddings.utils.errors import ProviderError


def make_settings(**overrides: Any) -> Settings:
    """Build a Settings instance that ignores any local .env file."""
    defaults: dict[str, Any] = {
        "gemini_api_key": "test-key",
        "gemini_base_url": "https://embed.test/v1beta",
        "gemini_embedding_model": "text-embedding-004",
        "embedding_request_timeout": 5.0,
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


class FakeEmbeddingProvider(IEmbeddingProvider):
    """Deterministic in-memory provider.

    Vectors are derived from the text so repeated runs are identical.
    ``fail_on`` makes the call for that exact text raise ProviderError;
    ``vectors`` overrides the vector for specific texts.
    """

    def __init__(
        self,
        fail_on: str | None = None,
        vectors: dict[str, list[float]] | None = None,
        available: bool = True,
    ) -> None:
        self.calls: list[str] = []
        self._fail_on = fail_on
        self._vectors = vectors or {}
        self._available = available
        self.closed = False

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if text == self._fail_on:
            raise ProviderError(message="upstream exploded", provider_name="fake")
        if text in self._vectors:
            return self._vectors[text]
        return [round(len(text) / 100, 2), round(sum(map(ord, text)) % 97 / 97, 6), 0.5]

    def get_provider_name(self) -> str:
        return "fake"

    def get_model_name(self) -> str:
        return "fake-model"

    def is_available(self) -> bool:
        return self._available

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Drop any structlog configuration a test (or the CLI) installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    return make_settings


@pytest.fixture
def fake_provider_factory() -> type[FakeEmbeddingProvider]:
    return FakeEmbeddingProvider


@pytest.fixture
def sample_chunks() -> list[KnowledgeChunk]:
    return [
        KnowledgeChunk(id="chunk-1", text="Hello"),
        KnowledgeChunk(id="chunk-2", text="Skills: HTML, CSS, JavaScript, Python"),
        KnowledgeChunk(id="chunk-3", text="Project - Selcouth: uncommon aesthetics"),
    ]


@pytest.fixture
def fake_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def gemini_factory(settings: Settings) -> Callable[..., GeminiEmbeddingProvider]:
    """Build a GeminiEmbeddingProvider whose HTTP traffic goes to *handler*.

    *handler* may be a callable ``(httpx.Request) -> httpx.Response`` or a
    plain JSON-serialisable payload returned with status 200 for every call.
    """

    def _factory(handler: Any, **setting_overrides: Any) -> GeminiEmbeddingProvider:
        if not callable(handler):
            payload = handler

            def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
                return httpx.Response(200, content=json.dumps(payload).encode("utf-8"))

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        provider_settings = make_settings(**setting_overrides) if setting_overrides else settings
        return GeminiEmbeddingProvider(provider_settings, http_client=client)

    return _factory
