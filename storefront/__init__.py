"""
Storefront Core Module

- catalog: static catalog entries supplied as configuration
- cart: cart snapshots and the CartEngine
- money: Decimal helpers and currency formatting
- notifications: toast callbacks emitted by the engine
- config / logging / errors: ambient settings, loggers, message texts
"""

__all__ = ["CartEngine", "Catalog", "default_catalog"]


def __getattr__(name):
    """Lazy attribute access so ``import storefront`` stays cheap."""
    if name == "CartEngine":
        from storefront.cart import CartEngine
        return CartEngine
    elif name == "Catalog":
        from storefront.catalog import Catalog
        return Catalog
    elif name == "default_catalog":
        from storefront.catalog import default_catalog
        return default_catalog
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
