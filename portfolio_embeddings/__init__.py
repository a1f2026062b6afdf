"""portfolio-embeddings: builds the vector database behind the portfolio chat widget."""

__version__ = "0.1.0"
