# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables (or a ``.env`` file in the
working directory) with sensible local dev defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "credit-quote"
    DEBUG: bool = False
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root logging level (DEBUG, INFO, WARNING, ...).",
    )

    # -- Server --
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000, description="HTTP listen port.")

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["*"]

    # -- Store (Supabase) --
    SUPABASE_URL: str = Field(
        default="http://localhost:54321",
        description="Supabase project URL.",
    )
    SUPABASE_KEY: str = Field(
        default="",
        description="Supabase API key (anon or service role).",
    )


settings = Settings()
