"""Resolves the knowledge store for a run.

By default the run embeds the built-in chunks from
:mod:`portfolio_embeddings.config.knowledge_base`.  An operator can instead
supply a JSON file holding an array of ``{"id": ..., "text": ...}`` objects.
Either way the result is validated before any provider call: ids must be
unique and text non-empty.  A bad file is a :class:`ConfigurationError`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

import structlog
from pydantic import ValidationError

from portfolio_embeddings.config.knowledge_base import KNOWLEDGE_CHUNKS
from portfolio_embeddings.models.knowledge import KnowledgeChunk
from portfolio_embeddings.utils.errors import ConfigurationError

logger = structlog.get_logger(logger_name=__name__)


def load_knowledge_chunks(path: str | Path | None = None) -> tuple[KnowledgeChunk, ...]:
    """Return the chunks to embed, in processing order.

    Parameters
    ----------
    path:
        Optional JSON file to read instead of the built-in store.  ``None``
        or an empty string selects the built-in chunks.
    """
    if not path:
        return validate_chunks(KNOWLEDGE_CHUNKS)

    chunk_file = Path(path)
    try:
        raw = json.loads(chunk_file.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(message=f"Knowledge chunk file not found: {chunk_file}") from exc
    except (OSError, ValueError) as exc:
        raise ConfigurationError(
            message=f"Could not read knowledge chunk file {chunk_file}: {exc}"
        ) from exc

    if not isinstance(raw, list):
        raise ConfigurationError(
            message=f"Knowledge chunk file {chunk_file} must contain a JSON array"
        )

    chunks: list[KnowledgeChunk] = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ConfigurationError(
                message=f"Knowledge chunk #{position} in {chunk_file} is not an object"
            )
        try:
            chunks.append(KnowledgeChunk(id=item.get("id"), text=item.get("text")))
        except ValidationError as exc:
            raise ConfigurationError(
                message=f"Knowledge chunk #{position} in {chunk_file} is invalid: {exc}"
            ) from exc

    logger.info("knowledge_chunks_loaded", path=str(chunk_file), count=len(chunks))
    return validate_chunks(chunks)


def validate_chunks(chunks: Iterable[KnowledgeChunk]) -> tuple[KnowledgeChunk, ...]:
    """Check id uniqueness and return the chunks as an immutable tuple."""
    result = tuple(chunks)
    seen: set[str] = set()
    for chunk in result:
        if chunk.id in seen:
            raise ConfigurationError(message=f"Duplicate knowledge chunk id: {chunk.id}")
        seen.add(chunk.id)
    return result
