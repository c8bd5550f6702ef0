"""Error types surfaced by the how-to guide."""
from __future__ import annotations


class HowToError(Exception):
    """Base class for application errors."""


class ConfigError(HowToError):
    """Required configuration is missing. Raised at startup and not recoverable."""


class ServiceError(HowToError):
    """The answer service call failed (transport, API status, or malformed payload)."""
