"""Unit tests for the create-embeddings CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from portfolio_embeddings.cli import create_embeddings as cli
from portfolio_embeddings.config.knowledge_base import KNOWLEDGE_CHUNKS
from portfolio_embeddings.models.knowledge import EmbeddingRecord
from portfolio_embeddings.providers.vector_store.json_vector_database import JSONVectorDatabase
from portfolio_embeddings.utils.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run every CLI test in an empty directory with no credentials or logging setup."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "GEMINI_API_KEY",
        "VECTOR_DATABASE_PATH",
        "KNOWLEDGE_CHUNKS_PATH",
        "APP_ENV",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    with patch.object(cli, "configure_logging"):
        yield


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    return exc_info.value.code


# ======================================================================
# Parser
# ======================================================================


class TestParser:
    def test_build_defaults(self) -> None:
        args = cli._build_parser().parse_args(["build"])
        assert args.command == "build"
        assert args.output is None
        assert args.chunks is None

    def test_build_options(self) -> None:
        args = cli._build_parser().parse_args(
            ["build", "--output", "public/db.json", "--chunks", "chunks.json"]
        )
        assert args.output == "public/db.json"
        assert args.chunks == "chunks.json"

    def test_stats_path(self) -> None:
        args = cli._build_parser().parse_args(["stats", "--path", "db.json"])
        assert args.command == "stats"
        assert args.path == "db.json"

    def test_no_subcommand_exits_1(self, capsys) -> None:
        assert _run([]) == 1
        assert "usage" in capsys.readouterr().out.lower()


# ======================================================================
# build
# ======================================================================


class TestBuild:
    def test_missing_api_key(self, tmp_path: Path, capsys) -> None:
        assert _run(["build"]) == 1
        captured = capsys.readouterr()
        assert "GEMINI_API_KEY" in captured.err
        assert not (tmp_path / "vector-database.json").exists()

    def test_success(self, tmp_path: Path, capsys, fake_provider) -> None:
        with patch.object(cli, "_build_embedding_provider", return_value=fake_provider):
            assert _run(["build"]) == 0

        out = capsys.readouterr().out
        assert "Model:  fake-model" in out
        assert "Chunks: 14" in out
        assert "Created embedding for chunk: chunk-1 (dims: 3)" in out
        assert "[14/14]" in out
        assert "vector-database.json" in out
        assert len(JSONVectorDatabase(tmp_path / "vector-database.json").load()) == 14
        assert fake_provider.closed is True

    def test_output_and_chunks_flags(self, tmp_path: Path, fake_provider) -> None:
        chunk_file = tmp_path / "chunks.json"
        chunk_file.write_text(json.dumps([{"id": "only", "text": "Hello"}]), encoding="utf-8")

        with patch.object(cli, "_build_embedding_provider", return_value=fake_provider):
            code = _run(["build", "--output", "public/db.json", "--chunks", str(chunk_file)])

        assert code == 0
        records = JSONVectorDatabase(tmp_path / "public" / "db.json").load()
        assert [r.id for r in records] == ["only"]

    def test_settings_paths(self, tmp_path: Path, monkeypatch, fake_provider) -> None:
        monkeypatch.setenv("VECTOR_DATABASE_PATH", "from-env.json")
        with patch.object(cli, "_build_embedding_provider", return_value=fake_provider):
            assert _run(["build"]) == 0
        assert (tmp_path / "from-env.json").exists()

    def test_provider_failure(self, tmp_path: Path, capsys, fake_provider_factory) -> None:
        provider = fake_provider_factory(fail_on=KNOWLEDGE_CHUNKS[5].text)
        existing = tmp_path / "vector-database.json"
        existing.write_text("[]", encoding="utf-8")

        with patch.object(cli, "_build_embedding_provider", return_value=provider):
            assert _run(["build"]) == 1

        err = capsys.readouterr().err
        assert "chunk-6" in err
        assert "No vector database was written." in err
        assert existing.read_text(encoding="utf-8") == "[]"
        assert provider.closed is True

    def test_bad_chunk_file(self, tmp_path: Path, capsys) -> None:
        assert _run(["build", "--chunks", str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_configuration_error_from_factory(self, capsys) -> None:
        with patch.object(
            cli, "_build_embedding_provider", side_effect=ConfigurationError(message="no key")
        ):
            assert _run(["build"]) == 1
        assert "no key" in capsys.readouterr().err


class TestBuildEmbeddingProvider:
    def test_returns_gemini_provider(self, settings) -> None:
        from portfolio_embeddings.providers.embedding.gemini_embedding_provider import (
            GeminiEmbeddingProvider,
        )

        provider = cli._build_embedding_provider(settings)
        assert isinstance(provider, GeminiEmbeddingProvider)

    def test_missing_key(self, settings_factory) -> None:
        with pytest.raises(ConfigurationError):
            cli._build_embedding_provider(settings_factory(gemini_api_key=""))


# ======================================================================
# stats / chunks
# ======================================================================


class TestStats:
    def test_stats(self, tmp_path: Path, capsys) -> None:
        JSONVectorDatabase(tmp_path / "vector-database.json").save(
            [
                EmbeddingRecord(id="chunk-1", text="Hello", embedding=[0.1, 0.2]),
                EmbeddingRecord(id="chunk-2", text="World", embedding=[0.3, 0.4]),
            ]
        )
        assert _run(["stats"]) == 0
        out = capsys.readouterr().out
        assert "Records:     2" in out
        assert "Dimensions:  2" in out
        assert "chunk-2" in out
        assert "inconsistent" not in out

    def test_stats_inconsistent_dimensions(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "db.json"
        JSONVectorDatabase(path).save(
            [
                EmbeddingRecord(id="a", text="x", embedding=[0.1]),
                EmbeddingRecord(id="b", text="y", embedding=[0.1, 0.2]),
            ]
        )
        assert _run(["stats", "--path", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Dimensions:  1, 2" in out
        assert "inconsistent" in out

    def test_stats_missing_file(self, capsys) -> None:
        assert _run(["stats"]) == 1
        assert "not found" in capsys.readouterr().err


class TestChunks:
    def test_lists_built_in_chunks(self, capsys) -> None:
        assert _run(["chunks"]) == 0
        out = capsys.readouterr().out
        assert "Knowledge chunks: 14" in out
        assert "chunk-14" in out

    def test_invalid_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "chunks.json"
        path.write_text("{}", encoding="utf-8")
        assert _run(["chunks", "--chunks", str(path)]) == 1
        assert "JSON array" in capsys.readouterr().err


# ======================================================================
# Logging setup
# ======================================================================


class TestLoggingSetup:
    def test_development_by_default(self) -> None:
        with patch.object(cli, "configure_logging") as configure:
            assert _run(["chunks"]) == 0
        configure.assert_called_once_with(log_level="INFO", json_output=False)

    def test_production_from_dotenv(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("APP_ENV=production\nLOG_LEVEL=DEBUG\n", encoding="utf-8")
        with patch.object(cli, "configure_logging") as configure:
            assert _run(["chunks"]) == 0
        configure.assert_called_once_with(log_level="DEBUG", json_output=True)
