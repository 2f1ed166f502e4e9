"""Centralized environment configuration for treediff.

All environment variables are read through this module using the TREEDIFF_
prefix for consistency.

Usage:
    from treediff.settings import settings

    timeout = settings.command_timeout()
"""

from __future__ import annotations

import os


def _get(name: str, default: str = "") -> str:
    """Get an environment variable value."""
    return os.environ.get(name, "").strip() or default


def _get_int(name: str, default: int = 0) -> int:
    """Get an integer environment variable."""
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


class Settings:
    """Centralized settings for treediff.

    Environment variables use the TREEDIFF_ prefix. Values are read on every
    call so tests and long-running callers can change them at runtime.
    """

    # -------------------------------------------------------------------------
    # Git Settings
    # -------------------------------------------------------------------------

    @staticmethod
    def git_binary() -> str:
        """Name or path of the git executable.

        Env: TREEDIFF_GIT_BINARY (default: git)
        """
        return _get("TREEDIFF_GIT_BINARY", default="git")

    @staticmethod
    def command_timeout() -> int:
        """Seconds a single git invocation may run. 0 disables the limit.

        Env: TREEDIFF_COMMAND_TIMEOUT (default: 0)
        """
        return max(_get_int("TREEDIFF_COMMAND_TIMEOUT", default=0), 0)

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------

    @staticmethod
    def log_level() -> str:
        """Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

        Env: TREEDIFF_LOG_LEVEL (default: INFO)
        """
        return _get("TREEDIFF_LOG_LEVEL", default="INFO").upper()

    @staticmethod
    def log_format() -> str:
        """Log format: "console" for dev-friendly, "json" for structured.

        Env: TREEDIFF_LOG_FORMAT (default: console)
        """
        return _get("TREEDIFF_LOG_FORMAT", default="console").lower()


settings = Settings()
