from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "symptom-info-api"
    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Runtime environment: development|production.",
    )

    # LLM integration (xAI Grok)
    # IMPORTANT (healthcare safety): presence of the key is the only switch between
    # canned (mock) answers and live LLM answers. Never log it.
    grok_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GROK_API_KEY", "grok_api_key"),
        description="xAI API key. When unset, /api/analyze-symptoms serves canned answers.",
    )

    @property
    def is_development(self) -> bool:
        return str(self.app_env).strip().lower() == "development"

    @property
    def live_mode(self) -> bool:
        return bool(self.grok_api_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
