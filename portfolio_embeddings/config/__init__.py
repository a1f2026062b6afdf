"""Configuration module - exports Settings and the built-in knowledge store."""

from portfolio_embeddings.config.knowledge_base import KNOWLEDGE_CHUNKS
from portfolio_embeddings.config.settings import Settings

__all__ = ["KNOWLEDGE_CHUNKS", "Settings"]
