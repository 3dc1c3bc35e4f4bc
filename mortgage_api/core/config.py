# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Lending rules are not env-driven; see ``core/rules.py``.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "bc-mortgage-calculator"
    DEBUG: bool = False

    # -- Server --
    HOST: str = "127.0.0.1"
    PORT: int = Field(
        default=3000,
        description="Port the form client posts to (http://localhost:3000).",
    )

    # -- CORS --
    ALLOWED_HOSTS: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API. The form client is served separately.",
    )


settings = Settings()
