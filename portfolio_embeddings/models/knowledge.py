"""Data models for the portfolio knowledge base and its embedding artifact.

Defines Pydantic v2 models for the three shapes that flow through an
embedding run:

    KnowledgeChunk   -- one fact about the site owner, as written by hand
    EmbeddingRecord  -- the same fact plus the vector returned by the provider
    EmbeddingRunSummary -- what a successful run reports back to the CLI

``KnowledgeChunk`` and ``EmbeddingRecord`` are frozen: chunks are fixed at
process start and records are never edited after the provider returns.
The field order of ``EmbeddingRecord`` (id, text, embedding) is the key
order of every object in ``vector-database.json``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


# ---------------------------------------------------------------------------
# KnowledgeChunk - the unit of text that gets embedded.
# ---------------------------------------------------------------------------
class KnowledgeChunk(BaseModel):
    """A single, stable piece of text about the site owner.

    The ``id`` doubles as the record id in the artifact, so it must stay
    stable between runs for downstream consumers that cache by id.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique, stable chunk identifier.")
    text: str = Field(min_length=1, description="The text to embed.")


# ---------------------------------------------------------------------------
# EmbeddingRecord - one entry of the vector database.
# ---------------------------------------------------------------------------
class EmbeddingRecord(BaseModel):
    """A chunk together with its embedding vector."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    text: str
    # Any non-empty numeric sequence is accepted; the provider decides the
    # dimensionality.  Strict types keep bools and numeric strings out.
    embedding: list[StrictFloat | StrictInt] = Field(min_length=1)

    @classmethod
    def from_chunk(cls, chunk: KnowledgeChunk, embedding: list[float]) -> EmbeddingRecord:
        return cls(id=chunk.id, text=chunk.text, embedding=embedding)

    @property
    def dimensions(self) -> int:
        return len(self.embedding)


# ---------------------------------------------------------------------------
# PipelineStage - the linear state machine of an embedding run.
# ---------------------------------------------------------------------------
class PipelineStage(str, Enum):
    """Stages of an embedding run, in order.

    INIT → PROCESSING → FINALIZE → TERMINAL.  A failed run jumps straight
    to TERMINAL without passing through FINALIZE.
    """

    INIT = "INIT"
    PROCESSING = "PROCESSING"
    FINALIZE = "FINALIZE"
    TERMINAL = "TERMINAL"


class EmbeddingRunSummary(BaseModel):
    """Outcome of a successful embedding run."""

    model_config = ConfigDict(frozen=True)

    output_path: str
    record_count: int = Field(ge=0)
    provider_name: str
    model_name: str
    # Distinct vector lengths seen during the run, ascending.  More than one
    # entry means the provider returned inconsistent dimensionality.
    dimensions: list[int] = Field(default_factory=list)
    elapsed_seconds: float = Field(default=0.0, ge=0.0)
