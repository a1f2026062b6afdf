"""Embedding run orchestration."""

from portfolio_embeddings.pipeline.embedding_pipeline import EmbeddingPipeline, ProgressCallback

__all__ = ["EmbeddingPipeline", "ProgressCallback"]
