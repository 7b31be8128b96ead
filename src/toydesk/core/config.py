"""Application configuration via environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "TOYDESK_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    # API key has no prefix so it matches the provider convention
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")

    # Chat completion endpoint
    model: str = "gpt-3.5-turbo"
    base_url: str = "https://api.openai.com"
    request_timeout: float | None = None  # None = wait indefinitely

    # Paths
    data_dir: Path = Path("./data")

    # Inventory backend: "sqlite" or "json"
    toy_backend: str = "sqlite"

    # Logging
    log_level: str = "INFO"

    @property
    def chat_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/v1/chat/completions"

    @property
    def toys_json_path(self) -> Path:
        return self.data_dir / "toys.json"

    @property
    def toys_db_path(self) -> Path:
        return self.data_dir / "db" / "toys.db"

    @property
    def app_log_path(self) -> Path:
        return self.data_dir / "logs" / "app.log"

    @property
    def prompt_history_path(self) -> Path:
        return self.data_dir / "prompt_history"


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
