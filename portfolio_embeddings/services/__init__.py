"""Services that prepare input for the embedding pipeline."""

from portfolio_embeddings.services.knowledge_loader import load_knowledge_chunks, validate_chunks

__all__ = ["load_knowledge_chunks", "validate_chunks"]
