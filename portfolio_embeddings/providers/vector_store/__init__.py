"""Vector database persistence (flat JSON artifact)."""

from portfolio_embeddings.providers.vector_store.json_vector_database import (
    JSONVectorDatabase,
    serialize_records,
)

__all__ = ["JSONVectorDatabase", "serialize_records"]
