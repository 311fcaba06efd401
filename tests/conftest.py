"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables
os.environ.setdefault("CART_MODE", "empty")
os.environ.setdefault("CURRENCY", "USD")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from storefront.catalog import Catalog, default_catalog
from storefront.cart import CartEngine, CartMode
from storefront.config import get_settings
from storefront.notifications import NotificationCollector


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start every test fresh"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_catalog() -> Catalog:
    """Premium Widget / Basic Gadget / Deluxe Package"""
    return default_catalog()


@pytest.fixture
def two_item_catalog() -> Catalog:
    return Catalog.from_dicts([
        {"id": 1, "name": "Premium Widget", "unit_price": "99.99"},
        {"id": 2, "name": "Basic Gadget", "unit_price": "49.99"},
    ])


@pytest.fixture
def collector() -> NotificationCollector:
    return NotificationCollector()


@pytest.fixture
def engine(two_item_catalog, collector) -> CartEngine:
    """Empty-mode engine over the two-item catalog"""
    return CartEngine(two_item_catalog, mode=CartMode.EMPTY, notifier=collector)


@pytest.fixture
def prepopulated_engine(sample_catalog, collector) -> CartEngine:
    return CartEngine(sample_catalog, mode=CartMode.PREPOPULATED, notifier=collector)
