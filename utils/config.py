"""Configuration management for the restaurant catalog API.

Provides:
- Config: base class with a dict conversion helper
- AppConfig: application settings loaded from environment variables
"""

import logging
import os as _os
from pathlib import Path
from typing import Any, Dict


def _log_level(name: str) -> str:
    """Return the upper-cased level name, or INFO if logging does not know it."""
    level = name.strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


class Config:
    """Base configuration class for organizing application settings."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Dictionary of all public config attributes
        """
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}


class AppConfig(Config):
    """Application-level configuration loaded from environment variables.

    All env vars have sensible defaults so the application works out of the
    box without any configuration.

    Environment variables:
        APP_PORT: API server port (default: 3010)
        APP_HOST: API server bind address (default: 127.0.0.1)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_LOG_LEVEL: Root log level name; unknown names fall back to INFO
            (default: INFO)
        APP_CORS_ORIGINS: Comma-separated allowed origins (default: *)
        APP_STATIC_DIR: Front-end asset directory served at / (default: static)
        APP_PAGES_DIR: Directory holding index.html (default: pages)
    """

    def __init__(self) -> None:
        super().__init__()
        self.api_port = int(_os.getenv("APP_PORT", "3010"))
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        self.log_level = _log_level(_os.getenv("APP_LOG_LEVEL", "INFO"))
        raw_origins = _os.getenv("APP_CORS_ORIGINS", "*")
        self.cors_origins: list[str] = (
            ["*"] if raw_origins == "*"
            else [o.strip() for o in raw_origins.split(",") if o.strip()]
        )
        self.static_dir = Path(_os.getenv("APP_STATIC_DIR", "static"))
        self.pages_dir = Path(_os.getenv("APP_PAGES_DIR", "pages"))

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()
