"""Embedding provider implementations.

Embeddings convert text into numeric vectors that capture semantic meaning.
The portfolio chat backend runs similarity search over the vectors written
to ``vector-database.json``.

    GeminiEmbeddingProvider  - Gemini text-embedding-004 over REST (httpx).
    EmbeddingResponseAdapter - normalises the response shapes providers use
                               for the vector field.
"""

from portfolio_embeddings.providers.embedding.gemini_embedding_provider import (
    GeminiEmbeddingProvider,
)
from portfolio_embeddings.providers.embedding.response_adapter import EmbeddingResponseAdapter

__all__ = ["EmbeddingResponseAdapter", "GeminiEmbeddingProvider"]
