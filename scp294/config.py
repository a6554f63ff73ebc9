"""Centralised backend configuration loaded from environment / .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings — values are sourced from env vars or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Mistral API ──────────────────────────────────────────────────────
    mistral_api_key: str = Field(default="", description="Mistral La Plateforme API key")

    # Model identifiers
    generation_model: str = "mistral-small-latest"
    moderation_model: str = "mistral-moderation-latest"

    generation_temperature: float = 0.7
    generation_max_tokens: int = 400

    # ── Pipeline ─────────────────────────────────────────────────────────
    moderation_enabled: bool = True
    moderation_timeout_s: float = 2.0
    generation_timeout_s: float = 6.5
    # Only these moderation categories block a request.
    moderation_categories: list[str] = Field(
        default_factory=lambda: [
            "sexual",
            "hate_and_discrimination",
            "violence_and_threats",
            "dangerous_and_criminal_content",
            "selfharm",
        ]
    )

    max_query_length: int = 50
    effect_catalog_version: int = Field(default=2, ge=1, le=3)
    denylist_extra: list[str] = Field(default_factory=list)

    # ── Rate limiting ────────────────────────────────────────────────────
    rate_limit: str = "20/2 minutes"
    rate_limit_enabled: bool = True

    # ── Server ───────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    max_body_bytes: int = 512 * 1024
    debug: bool = False

    def require_api_key(self) -> None:
        """Refuse to boot without a provider credential."""
        if not self.mistral_api_key.strip():
            raise RuntimeError("Missing MISTRAL_API_KEY in environment or .env")


settings = Settings()
