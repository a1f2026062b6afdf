"""Normalises embedding API responses into a plain vector.

Providers are not consistent about where they put the vector.  Gemini's
``embedContent`` returns ``{"embedding": {"values": [...]}}`` while some
client versions and proxies expose the singular ``{"embedding": {"value":
[...]}}``.  :class:`EmbeddingResponseAdapter` owns that knowledge so the
provider and the pipeline never inspect response shapes themselves.  To
support another shape, construct the adapter with different field names.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

DEFAULT_CONTAINER_FIELD = "embedding"
DEFAULT_VECTOR_FIELDS: tuple[str, ...] = ("values", "value")


class EmbeddingResponseAdapter:
    """Extracts the embedding vector from a decoded JSON response.

    The vector fields are tried in order; the first one holding a non-empty
    list of numbers wins.  Anything else (missing container, missing
    fields, empty list, non-numeric or non-finite entries) yields ``None``.
    """

    def __init__(
        self,
        container_field: str = DEFAULT_CONTAINER_FIELD,
        vector_fields: Sequence[str] = DEFAULT_VECTOR_FIELDS,
    ) -> None:
        if not vector_fields:
            raise ValueError("At least one vector field name is required")
        self._container_field = container_field
        self._vector_fields = tuple(vector_fields)

    @property
    def vector_fields(self) -> tuple[str, ...]:
        return self._vector_fields

    def extract(self, payload: Any) -> list[float] | None:
        """Return the vector found in *payload*, or ``None`` if there is none."""
        if not isinstance(payload, Mapping):
            return None
        container = payload.get(self._container_field)
        if not isinstance(container, Mapping):
            return None

        for field in self._vector_fields:
            vector = _as_vector(container.get(field))
            if vector is not None:
                return vector
        return None


def _as_vector(candidate: Any) -> list[float] | None:
    if not isinstance(candidate, list) or not candidate:
        return None
    # bool is a Real subclass; a list of flags is not a vector.
    if any(isinstance(v, bool) or not isinstance(v, Real) for v in candidate):
        return None
    # NaN and Infinity decode fine but cannot be written back as JSON.
    if not all(math.isfinite(v) for v in candidate):
        return None
    return list(candidate)
