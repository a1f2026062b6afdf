"""Flat-file vector database: ``vector-database.json``.

The artifact is a JSON array of ``{"id", "text", "embedding"}`` objects,
indented with two spaces, non-ASCII text written as-is.  It is rewritten
wholesale on every successful run.

Writes go to a temporary file in the same directory which is then renamed
over the target, so readers see either the previous artifact or the new
one, never a truncated file.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

import structlog
from pydantic import ValidationError

from portfolio_embeddings.models.knowledge import EmbeddingRecord
from portfolio_embeddings.utils.errors import PersistenceError

logger = structlog.get_logger(logger_name=__name__)


def serialize_records(records: Sequence[EmbeddingRecord]) -> str:
    """Render *records* exactly as they are stored on disk.

    Raises ``ValueError`` if a vector holds NaN or Infinity, which strict
    JSON parsers reject.
    """
    return json.dumps(
        [record.model_dump(mode="json") for record in records],
        indent=2,
        ensure_ascii=False,
        allow_nan=False,
    )


class JSONVectorDatabase:
    """Reads and writes the vector database artifact at a fixed path.

    The default location lives in ``Settings.vector_database_path``.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def save(self, records: Sequence[EmbeddingRecord]) -> Path:
        """Replace the artifact with *records*.  Returns the written path."""
        try:
            data = serialize_records(records)
        except ValueError as exc:
            raise PersistenceError(
                message=f"Refusing to write vector database {self._path}: {exc}",
            ) from exc
        directory = self._path.parent
        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(data)
            # NamedTemporaryFile creates 0600; the artifact is served as a static file.
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(
                message=f"Could not write vector database to {self._path}: {exc}",
            ) from exc

        logger.info(
            "vector_database_written",
            path=str(self._path),
            records=len(records),
            bytes=len(data.encode("utf-8")),
        )
        return self._path

    def load(self) -> list[EmbeddingRecord]:
        """Read the artifact back into records."""
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise PersistenceError(
                message=f"Vector database not found: {self._path}",
            ) from exc
        except (OSError, ValueError) as exc:
            raise PersistenceError(
                message=f"Could not read vector database {self._path}: {exc}",
            ) from exc

        if not isinstance(raw, list):
            raise PersistenceError(
                message=f"Vector database {self._path} is not a JSON array",
            )
        try:
            return [EmbeddingRecord(**item) for item in raw]
        except (TypeError, ValidationError) as exc:
            raise PersistenceError(
                message=f"Vector database {self._path} has a malformed record: {exc}",
            ) from exc
