"""Cart engine: owns the current cart snapshot for one UI session."""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from storefront.catalog import Catalog
from storefront.errors import (
    ERROR_EMPTY_SELECTION,
    ERROR_PRODUCT_NOT_FOUND,
    MSG_ITEM_ADDED,
    MSG_ITEM_DUPLICATE,
    MSG_ORDER_TOTAL,
    TITLE_ADDED,
    TITLE_DUPLICATE,
    TITLE_ERROR,
    TITLE_ORDER_PLACED,
)
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.money import format_amount, format_money, is_positive
from storefront.notifications import Notification, NotificationVariant, Notifier
from .models import Cart, CartMode, append_line, cart_total, set_quantity

logger = get_logger(__name__)


class AddItemStatus(str, Enum):
    SUCCESS = "success"
    DUPLICATE = "duplicate"
    NOT_FOUND = "notFound"


class CheckoutStatus(str, Enum):
    SUCCESS = "success"
    VALIDATION_FAILURE = "validationFailure"


@dataclass(frozen=True)
class AddItemResult:
    status: AddItemStatus
    title: str
    message: str
    cart: Cart

    @property
    def ok(self) -> bool:
        return self.status is AddItemStatus.SUCCESS

    def to_dict(self) -> dict:
        return {"status": self.status.value, "title": self.title, "message": self.message}


@dataclass(frozen=True)
class CheckoutResult:
    status: CheckoutStatus
    title: str
    message: str
    total: Decimal

    @property
    def ok(self) -> bool:
        return self.status is CheckoutStatus.SUCCESS

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "title": self.title,
            "message": self.message,
            "total": format_amount(self.total),
        }


class CartEngine:
    """
    Cart state for a single session.

    - ``empty`` mode starts with no lines; entries arrive via ``add_item``
    - ``prepopulated`` mode starts with every catalog entry at quantity 0

    Every operation replaces ``self.cart`` with a new snapshot. User-facing
    outcomes go to the optional ``notifier`` callback.
    """

    def __init__(
        self,
        catalog: Catalog,
        mode: CartMode = CartMode.EMPTY,
        notifier: Optional[Notifier] = None,
        currency: str = "USD",
    ):
        self._catalog = catalog
        self._mode = CartMode(mode)
        self._notifier = notifier
        self._currency = currency
        self._cart = Cart.for_mode(self._mode, catalog)

    @property
    def cart(self) -> Cart:
        """Current snapshot (immutable)."""
        return self._cart

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def mode(self) -> CartMode:
        return self._mode

    @property
    def currency(self) -> str:
        return self._currency

    def _notify(self, title: str, description: str, destructive: bool = False) -> None:
        if self._notifier is None:
            return
        variant = NotificationVariant.DESTRUCTIVE if destructive else NotificationVariant.DEFAULT
        self._notifier(Notification(title=title, description=description, variant=variant))

    def add_item(self, catalog_id: int) -> AddItemResult:
        """Append the catalog entry at quantity 0 unless unknown or already present."""
        entry = self._catalog.get(catalog_id)
        if entry is None:
            logger.debug(f"Ignoring add of unknown catalog id {sanitize_string_for_logging(catalog_id)}")
            return AddItemResult(
                status=AddItemStatus.NOT_FOUND,
                title=TITLE_ERROR,
                message=ERROR_PRODUCT_NOT_FOUND,
                cart=self._cart,
            )

        if self._cart.has_line(entry.id):
            message = MSG_ITEM_DUPLICATE.format(name=entry.name)
            logger.info(f"Duplicate add for catalog id {entry.id}")
            self._notify(TITLE_DUPLICATE, message, destructive=True)
            return AddItemResult(
                status=AddItemStatus.DUPLICATE,
                title=TITLE_DUPLICATE,
                message=message,
                cart=self._cart,
            )

        self._cart = append_line(self._cart, entry)
        message = MSG_ITEM_ADDED.format(name=entry.name)
        logger.info(f"Added catalog id {entry.id} to cart ({len(self._cart)} lines)")
        self._notify(TITLE_ADDED, message)
        return AddItemResult(
            status=AddItemStatus.SUCCESS,
            title=TITLE_ADDED,
            message=message,
            cart=self._cart,
        )

    def update_quantity(self, line_id: int, quantity: int) -> Cart:
        """Set a line's quantity; negative values and unknown ids are ignored."""
        updated = set_quantity(self._cart, line_id, quantity)
        if updated is self._cart:
            logger.debug(
                f"Ignoring quantity update id={sanitize_string_for_logging(line_id)} "
                f"quantity={sanitize_string_for_logging(quantity)}"
            )
        self._cart = updated
        return self._cart

    def increment(self, line_id: int) -> Cart:
        line = self._cart.get_line(line_id)
        if line is None:
            return self._cart
        return self.update_quantity(line_id, line.quantity + 1)

    def decrement(self, line_id: int) -> Cart:
        """Lower a line by one; at zero this is a no-op."""
        line = self._cart.get_line(line_id)
        if line is None:
            return self._cart
        return self.update_quantity(line_id, line.quantity - 1)

    def compute_total(self) -> Decimal:
        return cart_total(self._cart)

    def checkout(self) -> CheckoutResult:
        """Report the order total, or a validation failure when nothing is selected."""
        total = self.compute_total()

        if is_positive(total):
            message = MSG_ORDER_TOTAL.format(total=format_money(total, self._currency))
            logger.info(f"Checkout succeeded: {format_amount(total)} {self._currency}")
            self._notify(TITLE_ORDER_PLACED, message)
            return CheckoutResult(
                status=CheckoutStatus.SUCCESS,
                title=TITLE_ORDER_PLACED,
                message=message,
                total=total,
            )

        logger.info("Checkout rejected: nothing selected")
        self._notify(TITLE_ERROR, ERROR_EMPTY_SELECTION, destructive=True)
        return CheckoutResult(
            status=CheckoutStatus.VALIDATION_FAILURE,
            title=TITLE_ERROR,
            message=ERROR_EMPTY_SELECTION,
            total=total,
        )

    def reset(self) -> Cart:
        """Go back to the initial snapshot for this engine's mode."""
        self._cart = Cart.for_mode(self._mode, self._catalog)
        return self._cart

    def summary(self) -> dict:
        """Presentation-ready view of the current cart."""
        cart = self._cart
        total = cart_total(cart)
        return {
            "mode": self._mode.value,
            "currency": self._currency,
            "is_empty": cart.is_empty,
            "total_items": cart.total_items,
            "lines": [
                {
                    "id": line.id,
                    "name": line.name,
                    "quantity": line.quantity,
                    "unit_price": format_amount(line.unit_price),
                    "subtotal": format_amount(line.subtotal),
                    "unit_price_display": format_money(line.unit_price, self._currency),
                    "subtotal_display": format_money(line.subtotal, self._currency),
                }
                for line in cart.lines
            ],
            "total": format_amount(total),
            "total_display": format_money(total, self._currency),
        }


def create_cart_engine(
    catalog: Optional[Catalog] = None,
    notifier: Optional[Notifier] = None,
) -> CartEngine:
    """Build an engine from the environment settings (``CART_MODE``, ``CURRENCY``)."""
    from storefront.catalog import default_catalog
    from storefront.config import get_settings

    settings = get_settings()
    return CartEngine(
        catalog=catalog if catalog is not None else default_catalog(),
        mode=settings.cart_mode,
        notifier=notifier,
        currency=settings.currency,
    )
