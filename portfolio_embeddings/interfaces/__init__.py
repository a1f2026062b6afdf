"""Public interface definitions for external service providers.

The embedding pipeline reaches the remote embedding API only through
:class:`IEmbeddingProvider`.  Concrete adapters live in
``portfolio_embeddings/providers/`` and are constructed by the CLI.

    Interface            →  Concrete implementations
    ──────────────────────────────────────────────────
    IEmbeddingProvider   →  GeminiEmbeddingProvider
"""

from portfolio_embeddings.interfaces.embedding_provider import IEmbeddingProvider

__all__ = ["IEmbeddingProvider"]
