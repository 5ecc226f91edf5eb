"""
QuickNotes — Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, server.py and the middleware.
When:  Loaded once at module import time.

Environment variables (case-insensitive):
    APP_NAME, HOST, PORT, LOG_LEVEL, TEMPLATES_DIR
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Templates ship inside the package next to this module
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running locally; nothing is
    required to start the server.
    """

    app_name: str = Field(default="QuickNotes")

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1024, le=65535)

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

    # ── Templates ─────────────────────────────────────────────────────────
    # Directory holding index.html, list.html, view.html, edit.html, error.html
    templates_dir: Path = Field(default=DEFAULT_TEMPLATES_DIR)

    @property
    def listen_address(self) -> str:
        return f"{self.host}:{self.port}"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance; create_app() accepts an override for tests
settings = Settings()
