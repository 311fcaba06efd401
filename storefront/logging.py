"""
Centralized logging configuration for the storefront.

Usage:
    from storefront.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Item added")
    logger.error("Failed operation", exc_info=True)
"""

import logging
import os
import sys
from functools import cache
from pathlib import Path

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"

_handler: logging.Handler | None = None


def load_env_file(env_path: Path = ENV_PATH) -> None:
    """Load ``.env`` into os.environ; variables already set win."""
    if env_path.exists():
        load_dotenv(env_path)


def _level_from_name(level_name: str) -> int:
    level = getattr(logging, level_name.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _get_log_level() -> int:
    """Get log level from environment or default to INFO."""
    return _level_from_name(os.environ.get("LOG_LEVEL", "INFO"))


def set_log_level(level_name: str) -> None:
    """Apply a level name (e.g. ``DEBUG``) to the root logger and the stdout handler."""
    level = _level_from_name(level_name)
    logging.getLogger().setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)


def _configure_root_logger() -> None:
    """Attach a stdout handler to the root logger unless one is already set."""
    global _handler
    root = logging.getLogger()

    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _handler = handler

    # uvicorn/httpx are chatty at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# .env must be read before the level is picked
load_env_file()
_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Escape newlines and other control characters (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_string_for_logging(value: object | None, max_length: int = 50) -> str:
    """
    Sanitize a user-supplied value for safe logging.

    Control characters are escaped and the result is truncated to
    ``max_length`` characters.

    Args:
        value: Value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if None/empty
    """
    if value is None or value == "":
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "get_logger",
    "load_env_file",
    "set_log_level",
    "sanitize_string_for_logging",
]
