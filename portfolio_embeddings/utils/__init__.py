"""Utility modules for portfolio-embeddings.

- **errors** -- Exception hierarchy rooted at PortfolioEmbeddingsError;
  configuration, provider and persistence failures each get their own
  subclass so the CLI can report them without broad ``except Exception``.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

from portfolio_embeddings.utils.errors import (
    ConfigurationError,
    PersistenceError,
    PortfolioEmbeddingsError,
    ProviderError,
)
from portfolio_embeddings.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "PersistenceError",
    "PortfolioEmbeddingsError",
    "ProviderError",
    "configure_logging",
    "get_logger",
]
