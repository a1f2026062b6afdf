# =============================================================================
# portfolio_embeddings/cli/create_embeddings.py - Vector Database Builder
# =============================================================================
#
# Offline tool that rebuilds vector-database.json, the file the portfolio
# chat backend searches when answering visitor questions.
#
# Supported subcommands:
#
#   build  - Embed every knowledge chunk and write the vector database
#   stats  - Summarise an existing vector database file
#   chunks - List the knowledge chunks that a build would embed
#
# A build is all-or-nothing: if any chunk fails to embed, the previous
# vector-database.json is left exactly as it was.
#
# Usage examples:
#   create-embeddings build
#   create-embeddings build --output public/vector-database.json
#   create-embeddings build --chunks my-chunks.json
#   create-embeddings stats --path public/vector-database.json
#   create-embeddings chunks
# =============================================================================

"""Standalone CLI for building the portfolio vector database.

Usage::

    python -m portfolio_embeddings.cli build [--output PATH] [--chunks FILE]
    python -m portfolio_embeddings.cli stats [--path PATH]
    python -m portfolio_embeddings.cli chunks [--chunks FILE]

Requires ``GEMINI_API_KEY`` (environment or ``.env``) for ``build``.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from portfolio_embeddings.config.settings import Settings
from portfolio_embeddings.utils.errors import (
    ConfigurationError,
    PersistenceError,
    PortfolioEmbeddingsError,
)
from portfolio_embeddings.utils.logging import configure_logging


def _build_embedding_provider(app_settings: Settings):  # noqa: ANN202
    """Construct the Gemini embedding provider.

    Raises :class:`ConfigurationError` when ``GEMINI_API_KEY`` is missing, so
    a build stops before any chunk is processed.
    """
    from portfolio_embeddings.providers.embedding.gemini_embedding_provider import (
        GeminiEmbeddingProvider,
    )

    return GeminiEmbeddingProvider(settings=app_settings)


def _print_progress(record, position: int, total: int) -> None:  # noqa: ANN001
    print(
        f"  [{position}/{total}] Created embedding for chunk: {record.id} "
        f"(dims: {record.dimensions})"
    )


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


async def _handle_build(args: argparse.Namespace, app_settings: Settings) -> int:
    """Run the embedding pipeline and write the vector database."""
    from portfolio_embeddings.pipeline.embedding_pipeline import EmbeddingPipeline
    from portfolio_embeddings.providers.vector_store.json_vector_database import (
        JSONVectorDatabase,
    )
    from portfolio_embeddings.services.knowledge_loader import load_knowledge_chunks

    output_path = args.output or app_settings.vector_database_path
    chunks_path = args.chunks or app_settings.knowledge_chunks_path

    try:
        chunks = load_knowledge_chunks(chunks_path)
        provider = _build_embedding_provider(app_settings)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Starting to generate embeddings...")
    print(f"  Model:  {provider.get_model_name()}")
    print(f"  Chunks: {len(chunks)}")
    print()

    pipeline = EmbeddingPipeline(
        provider=provider,
        database=JSONVectorDatabase(output_path),
        chunks=chunks,
        on_progress=_print_progress,
    )
    try:
        summary = await pipeline.run()
    except PortfolioEmbeddingsError as exc:
        print(f"\nError creating embeddings: {exc}", file=sys.stderr)
        print("No vector database was written.", file=sys.stderr)
        return 1
    finally:
        await provider.aclose()

    print("\nEmbedding generation complete.")
    print(f"  Records:    {summary.record_count}")
    print(f"  Dimensions: {', '.join(str(d) for d in summary.dimensions) or '-'}")
    print(f"  Time:       {summary.elapsed_seconds:.2f}s")
    print(f"Your vector database is saved to '{summary.output_path}'")
    return 0


def _handle_stats(args: argparse.Namespace, app_settings: Settings) -> int:
    """Print a summary of an existing vector database file."""
    from portfolio_embeddings.providers.vector_store.json_vector_database import (
        JSONVectorDatabase,
    )

    database = JSONVectorDatabase(args.path or app_settings.vector_database_path)
    try:
        records = database.load()
    except PersistenceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    dimensions = sorted({record.dimensions for record in records})
    print("Vector Database Statistics")
    print("=" * 40)
    print(f"  File:        {database.path}")
    print(f"  Records:     {len(records)}")
    print(f"  Dimensions:  {', '.join(str(d) for d in dimensions) or '-'}")
    if len(dimensions) > 1:
        print("  Warning: records have inconsistent dimensionality")
    if records:
        print("\n  Records:")
        for record in records:
            print(f"    {record.id:<15} {record.dimensions:>5} dims  {len(record.text):>5} chars")
    return 0


def _handle_chunks(args: argparse.Namespace, app_settings: Settings) -> int:
    """List the knowledge chunks without calling the provider."""
    from portfolio_embeddings.services.knowledge_loader import load_knowledge_chunks

    try:
        chunks = load_knowledge_chunks(args.chunks or app_settings.knowledge_chunks_path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Knowledge chunks: {len(chunks)}")
    for chunk in chunks:
        print(f"  {chunk.id:<15} {len(chunk.text):>5} chars")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the embeddings CLI."""
    parser = argparse.ArgumentParser(
        prog="create-embeddings",
        description="Build the portfolio chat vector database.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # -- build --
    build_parser = subparsers.add_parser("build", help="Embed all chunks and write the database")
    build_parser.add_argument(
        "--output",
        default=None,
        help="Output path (default: VECTOR_DATABASE_PATH or vector-database.json)",
    )
    build_parser.add_argument(
        "--chunks",
        default=None,
        help="JSON file of {id, text} objects to embed instead of the built-in chunks",
    )

    # -- stats --
    stats_parser = subparsers.add_parser("stats", help="Summarise an existing vector database")
    stats_parser.add_argument("--path", default=None, help="Vector database file to inspect")

    # -- chunks --
    chunks_parser = subparsers.add_parser("chunks", help="List the knowledge chunks")
    chunks_parser.add_argument("--chunks", default=None, help="JSON file of {id, text} objects")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parses the subcommand, loads Settings from the environment / .env file,
    configures logging and dispatches to the handler.  Exits with the
    handler's status code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    app_settings = Settings()
    configure_logging(
        log_level=app_settings.log_level,
        json_output=app_settings.app_env == "production",
    )

    if args.command == "build":
        exit_code = asyncio.run(_handle_build(args, app_settings))
    elif args.command == "stats":
        exit_code = _handle_stats(args, app_settings)
    elif args.command == "chunks":
        exit_code = _handle_chunks(args, app_settings)
    else:
        parser.print_help()
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
