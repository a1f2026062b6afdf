"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# Settings are read from TWO sources (in priority order):
#
#   1. **Environment variables** - e.g. GEMINI_API_KEY=AIza...
#      (highest priority - always wins)
#   2. **.env file** - key=value lines in the project root .env file
#      (lower priority - used for local runs)
#
# Field name `gemini_api_key` maps to env var `GEMINI_API_KEY`.
# Defaults apply when neither source sets a field.
#
# SECURITY: .env is never committed.  Copy .env.example instead.
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """portfolio-embeddings settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Embedding provider ===
    # Empty string = "not configured"; the CLI refuses to start a build.
    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_embedding_model: str = "text-embedding-004"
    embedding_request_timeout: float = 30.0

    # === Artifact / knowledge store ===
    vector_database_path: str = "vector-database.json"
    # Empty = use the built-in knowledge chunks.
    knowledge_chunks_path: str = ""

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    def has_embedding_credentials(self) -> bool:
        """Return ``True`` if an embedding API key is configured."""
        return bool(self.gemini_api_key.strip())
