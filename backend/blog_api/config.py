"""
Blog API Backend - Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the composition root (main.py) and the test suite.
When:  Loaded once at module import time; validated before app starts.

Delete Bounds:
    The reference service rejected DELETE /blogs/{id} when id <= 0 or
    id > len(store), one off from the GET/PUT bounds at both ends.
    - strict (default): DELETE uses the same [0, len) bounds as GET/PUT
    - legacy: the reference rule is kept verbatim for behavioral parity
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_title: str = Field(default="Blog API")

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Store ─────────────────────────────────────────────────────────────
    # What: Load the two reference records ("First", "Second") at startup
    seed_store: bool = Field(default=True)

    # What: Bounds rule applied by DELETE /blogs/{id} (see module docstring)
    delete_bounds: Literal["strict", "legacy"] = Field(default="strict")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # LOG_LEVEL and log_level both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
