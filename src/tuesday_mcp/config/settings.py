"""Application settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "tuesday-mcp"
    app_version: str = "1.0.0"
    api_key: str = ""
    base_url: str = "https://api.tuesday.so/api/v1"
    log_level: str = "INFO"
    http_host: str = "127.0.0.1"
    http_port: int = Field(default=8765, ge=1, le=65535)

    model_config = SettingsConfigDict(
        env_prefix="TUESDAY_",
        extra="ignore",
        env_file=(PROJECT_ROOT / ".env", PROJECT_ROOT / ".env.local"),
        env_file_encoding="utf-8",
    )

    def resolved_api_key(self) -> str:
        return self.api_key.strip()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
