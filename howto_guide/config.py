"""Configuration values for the how-to guide."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .errors import ConfigError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_str(name: str, default: str) -> str:
    """Read a string environment variable with a non-empty fallback."""
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _env_float(name: str, default: float) -> float:
    """Read a float environment variable with safe fallback."""
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _api_key_from_env() -> str:
    # API_KEY is the name the hosted page used.
    return _env_str("GEMINI_API_KEY", "") or _env_str("API_KEY", "")


@dataclass
class Settings:
    """Runtime settings loaded from environment variables."""

    # Use default_factory so values are read when Settings() is instantiated,
    # not at module import time. This ensures load_dotenv() values are honored.
    gemini_api_key: str = field(default_factory=_api_key_from_env)
    gemini_model_name: str = field(default_factory=lambda: _env_str("GEMINI_MODEL", "gemini-2.5-flash"))
    loading_quote_interval_seconds: float = field(
        default_factory=lambda: _env_float("LOADING_QUOTE_INTERVAL", 4.0)
    )
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "WARNING").upper())

    def require_api_key(self) -> str:
        """Return the Gemini API key or fail startup."""
        if not self.gemini_api_key:
            raise ConfigError("GEMINI_API_KEY environment variable not set")
        return self.gemini_api_key


def configure_logging(level: str = "WARNING") -> None:
    """Install the process-wide log format; unknown level names fall back to WARNING."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
