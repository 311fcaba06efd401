"""
Storefront Settings

Loaded from environment variables; a ``.env`` file at the project root is
read first when present (existing variables win).
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from storefront.cart.models import CartMode
from storefront.errors import ERROR_UNKNOWN_CART_MODE
from storefront.logging import ENV_PATH, load_env_file, set_log_level


@dataclass(frozen=True)
class Settings:
    cart_mode: CartMode
    currency: str
    log_level: str


def _get_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def parse_cart_mode(value: str) -> CartMode:
    """Map a ``CART_MODE`` value onto :class:`CartMode` (case-insensitive)."""
    try:
        return CartMode(value.strip().lower())
    except ValueError:
        raise ValueError(ERROR_UNKNOWN_CART_MODE.format(mode=value)) from None


def load_settings(env_path: Path = ENV_PATH) -> Settings:
    """Read settings from the environment (after loading ``.env``)."""
    load_env_file(env_path)

    return Settings(
        cart_mode=parse_cart_mode(_get_env("CART_MODE", CartMode.EMPTY.value)),
        currency=_get_env("CURRENCY", "USD").upper(),
        log_level=_get_env("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings (call ``get_settings.cache_clear()`` to reload).

    Loading also applies ``LOG_LEVEL`` to the root logger.
    """
    settings = load_settings()
    set_log_level(settings.log_level)
    return settings
