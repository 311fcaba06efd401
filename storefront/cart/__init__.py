"""Cart package: snapshot models, transitions, and the engine facade."""
from .models import CartLine, Cart, CartMode, append_line, set_quantity, cart_total
from .service import (
    AddItemResult,
    AddItemStatus,
    CartEngine,
    CheckoutResult,
    CheckoutStatus,
    create_cart_engine,
)

__all__ = [
    "CartLine",
    "Cart",
    "CartMode",
    "append_line",
    "set_quantity",
    "cart_total",
    "AddItemResult",
    "AddItemStatus",
    "CartEngine",
    "CheckoutResult",
    "CheckoutStatus",
    "create_cart_engine",
]
