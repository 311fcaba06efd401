"""
Shared Dependencies for Routers

Lazy-loaded singletons; tests swap them through
``app.dependency_overrides``.
"""
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.cart import CartEngine
    from storefront.notifications import NotificationCollector


_cart_engine: Optional["CartEngine"] = None
_notification_collector: Optional["NotificationCollector"] = None


def get_notification_collector() -> "NotificationCollector":
    """Get or create the collector that buffers toasts between requests"""
    global _notification_collector
    if _notification_collector is None:
        from storefront.notifications import NotificationCollector
        _notification_collector = NotificationCollector()
    return _notification_collector


def get_cart_engine() -> "CartEngine":
    """Get or create the CartEngine singleton (wired to the collector)"""
    global _cart_engine
    if _cart_engine is None:
        from storefront.cart import create_cart_engine
        _cart_engine = create_cart_engine(notifier=get_notification_collector())
    return _cart_engine
