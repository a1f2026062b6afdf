"""Pydantic models shared across the embedding pipeline."""

from portfolio_embeddings.models.knowledge import (
    EmbeddingRecord,
    EmbeddingRunSummary,
    KnowledgeChunk,
    PipelineStage,
)

__all__ = [
    "EmbeddingRecord",
    "EmbeddingRunSummary",
    "KnowledgeChunk",
    "PipelineStage",
]
