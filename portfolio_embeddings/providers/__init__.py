"""Concrete adapters for the embedding API and the vector database artifact."""
