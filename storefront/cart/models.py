"""Cart models with Decimal-based pricing.

Carts are immutable snapshots: every transition returns a new ``Cart`` and
leaves the previous one untouched, so a presentation layer can keep the
old snapshot around and re-render from either.
"""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from storefront.catalog import Catalog, CatalogEntry
from storefront.errors import (
    ERROR_DUPLICATE_LINE_ID,
    ERROR_INVALID_QUANTITY,
    ERROR_NEGATIVE_QUANTITY,
)
from storefront.money import to_decimal, multiply, sum_money


class CartMode(str, Enum):
    """How a fresh cart is initialised."""
    EMPTY = "empty"
    PREPOPULATED = "prepopulated"  # one zero-quantity line per catalog entry


def _is_quantity(value) -> bool:
    """Plain ints only; bool is an int subclass but not a quantity."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CartLine:
    """Catalog item selected by the user, with its quantity."""
    id: int
    name: str
    unit_price: Decimal
    quantity: int = 0

    def __post_init__(self):
        if not _is_quantity(self.quantity):
            raise ValueError(ERROR_INVALID_QUANTITY.format(id=self.id, quantity=self.quantity))
        if self.quantity < 0:
            raise ValueError(ERROR_NEGATIVE_QUANTITY.format(id=self.id, quantity=self.quantity))
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "unit_price", to_decimal(self.unit_price))

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "CartLine":
        """Copy name and price from the catalog at add time."""
        return cls(id=entry.id, name=entry.name, unit_price=entry.unit_price, quantity=0)

    @property
    def subtotal(self) -> Decimal:
        """Price for all units of this line."""
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "unit_price": str(self.unit_price),
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            unit_price=to_decimal(data["unit_price"]),
            quantity=int(data.get("quantity", 0)),
        )


@dataclass(frozen=True)
class Cart:
    """Ordered collection of cart lines; each id appears at most once."""
    lines: Tuple[CartLine, ...] = field(default_factory=tuple)

    def __post_init__(self):
        lines = tuple(self.lines)
        seen = set()
        for line in lines:
            if line.id in seen:
                raise ValueError(ERROR_DUPLICATE_LINE_ID.format(id=line.id))
            seen.add(line.id)
        object.__setattr__(self, "lines", lines)

    @classmethod
    def empty(cls) -> "Cart":
        return cls(lines=())

    @classmethod
    def prepopulated(cls, catalog: Catalog) -> "Cart":
        """One zero-quantity line per catalog entry, in catalog order."""
        return cls(lines=tuple(CartLine.from_entry(entry) for entry in catalog))

    @classmethod
    def for_mode(cls, mode: CartMode, catalog: Catalog) -> "Cart":
        if mode is CartMode.PREPOPULATED:
            return cls.prepopulated(catalog)
        return cls.empty()

    def get_line(self, line_id: int) -> Optional[CartLine]:
        return next((line for line in self.lines if line.id == line_id), None)

    def has_line(self, line_id: int) -> bool:
        return self.get_line(line_id) is not None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_items(self) -> int:
        """Total number of units across all lines."""
        return sum(line.quantity for line in self.lines)

    @property
    def total(self) -> Decimal:
        return cart_total(self)

    def __len__(self) -> int:
        return len(self.lines)

    def to_dict(self) -> dict:
        return {"lines": [line.to_dict() for line in self.lines]}

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        return cls(lines=tuple(CartLine.from_dict(line) for line in data.get("lines", [])))


# ==================== TRANSITIONS ====================

def append_line(cart: Cart, entry: CatalogEntry) -> Cart:
    """Return a cart with ``entry`` appended at quantity 0.

    Callers check for duplicates first; appending an id that is already
    present returns ``cart`` unchanged.
    """
    if cart.has_line(entry.id):
        return cart
    return Cart(lines=cart.lines + (CartLine.from_entry(entry),))


def set_quantity(cart: Cart, line_id: int, quantity: int) -> Cart:
    """Return a cart where line ``line_id`` has ``quantity``.

    Non-integer or negative quantities and unknown ids leave the cart as it is.
    """
    if not _is_quantity(quantity) or quantity < 0 or not cart.has_line(line_id):
        return cart
    return Cart(lines=tuple(
        replace(line, quantity=quantity) if line.id == line_id else line
        for line in cart.lines
    ))


def cart_total(cart: Cart) -> Decimal:
    """Exact sum of unit_price * quantity over all lines."""
    return sum_money(line.subtotal for line in cart.lines)
