"""Driver for a full embedding run over the knowledge store.

ARCHITECTURE NOTE:
    The run is a linear state machine (see :class:`PipelineStage`):

        INIT        → check the provider has credentials
        PROCESSING  → embed each chunk in source order, one call at a time
        FINALIZE    → write every record to the vector database in one go
        TERMINAL    → return a summary (or re-raise the failure)

    Records are accumulated in a list local to :meth:`EmbeddingPipeline.run`.
    If any chunk fails the list is dropped and the database is never
    touched, so ``vector-database.json`` is either a complete rebuild or the
    previous file.  Nothing is retried; re-running the command is the retry.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from portfolio_embeddings.models.knowledge import (
    EmbeddingRecord,
    EmbeddingRunSummary,
    KnowledgeChunk,
    PipelineStage,
)
from portfolio_embeddings.utils.errors import ConfigurationError, ProviderError

if TYPE_CHECKING:
    from portfolio_embeddings.interfaces.embedding_provider import IEmbeddingProvider
    from portfolio_embeddings.providers.vector_store.json_vector_database import (
        JSONVectorDatabase,
    )

logger = structlog.get_logger(logger_name=__name__)

# Called after each chunk with (record, position, total); position is 1-based.
ProgressCallback = Callable[[EmbeddingRecord, int, int], None]


class EmbeddingPipeline:
    """Embeds every knowledge chunk and persists the result once.

    All collaborators are injected so tests can substitute a stub provider
    and a temporary database path.
    """

    def __init__(
        self,
        provider: IEmbeddingProvider,
        database: JSONVectorDatabase,
        chunks: Sequence[KnowledgeChunk],
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self._provider = provider
        self._database = database
        self._chunks = tuple(chunks)
        self._on_progress = on_progress
        self._stage = PipelineStage.INIT

    @property
    def stage(self) -> PipelineStage:
        return self._stage

    async def run(self) -> EmbeddingRunSummary:
        """Execute one full pass.

        Raises
        ------
        ConfigurationError
            The provider has no credentials; no chunk is processed.
        ProviderError
            A chunk could not be embedded.  ``chunk_id`` names it and no
            file is written.
        PersistenceError
            The vector database could not be written.
        """
        self._stage = PipelineStage.INIT
        started = time.perf_counter()

        if not self._provider.is_available():
            self._stage = PipelineStage.TERMINAL
            raise ConfigurationError(
                message="Embedding provider has no API key configured",
                provider_name=self._provider.get_provider_name(),
            )

        logger.info(
            "embedding_pipeline_started",
            provider=self._provider.get_provider_name(),
            model=self._provider.get_model_name(),
            chunks=len(self._chunks),
        )

        self._stage = PipelineStage.PROCESSING
        try:
            records = await self._embed_all()
            self._stage = PipelineStage.FINALIZE
            output_path = self._database.save(records)
        except Exception as exc:
            logger.error(
                "embedding_pipeline_failed",
                stage=self._stage.value,
                error=str(exc),
            )
            raise
        finally:
            self._stage = PipelineStage.TERMINAL

        summary = EmbeddingRunSummary(
            output_path=str(output_path),
            record_count=len(records),
            provider_name=self._provider.get_provider_name(),
            model_name=self._provider.get_model_name(),
            dimensions=sorted({record.dimensions for record in records}),
            elapsed_seconds=round(time.perf_counter() - started, 3),
        )
        logger.info(
            "embedding_pipeline_complete",
            output_path=summary.output_path,
            records=summary.record_count,
            dimensions=summary.dimensions,
            elapsed_seconds=summary.elapsed_seconds,
        )
        return summary

    async def _embed_all(self) -> list[EmbeddingRecord]:
        records: list[EmbeddingRecord] = []
        total = len(self._chunks)
        expected_dims: int | None = None

        for position, chunk in enumerate(self._chunks, start=1):
            try:
                vector = await self._provider.embed(chunk.text)
            except ProviderError as exc:
                raise ProviderError(
                    message=f"No embedding for {chunk.id}: {exc.message}",
                    provider_name=exc.provider_name,
                    chunk_id=chunk.id,
                ) from exc

            try:
                record = EmbeddingRecord.from_chunk(chunk, vector)
            except ValidationError as exc:
                raise ProviderError(
                    message=(
                        f"Invalid embedding for {chunk.id}: "
                        "expected a non-empty list of finite numbers"
                    ),
                    provider_name=self._provider.get_provider_name(),
                    chunk_id=chunk.id,
                ) from exc

            if expected_dims is None:
                expected_dims = record.dimensions
            elif record.dimensions != expected_dims:
                logger.warning(
                    "embedding_dimension_mismatch",
                    chunk_id=chunk.id,
                    dims=record.dimensions,
                    expected_dims=expected_dims,
                )

            records.append(record)
            logger.info("chunk_embedded", chunk_id=chunk.id, dims=record.dimensions)
            if self._on_progress is not None:
                self._on_progress(record, position, total)

        return records
