"""
Cart Router

Thin HTTP presentation layer over the CartEngine.

Domain outcomes (duplicate add, unknown id, empty checkout) are answered
with 200 and a status field; the toasts the engine emitted during the
request come back in ``cart.notifications``.
"""
from fastapi import APIRouter, Depends

from storefront.cart import CartEngine
from storefront.logging import get_logger
from storefront.money import format_amount, format_money
from storefront.notifications import NotificationCollector
from .deps import get_cart_engine, get_notification_collector
from .models import (
    AddToCartRequest,
    AddToCartResponse,
    CartResponse,
    CatalogEntryModel,
    CheckoutResponse,
    UpdateCartItemRequest,
)

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _cart_response(engine: CartEngine, collector: NotificationCollector) -> CartResponse:
    """Current summary plus any notifications emitted since the last response."""
    notifications = [n.to_dict() for n in collector.drain()]
    return CartResponse(**engine.summary(), notifications=notifications)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/catalog", response_model=list[CatalogEntryModel])
async def get_catalog(engine: CartEngine = Depends(get_cart_engine)):
    """Entries the user can pick from."""
    return [
        CatalogEntryModel(
            id=entry.id,
            name=entry.name,
            unit_price=format_amount(entry.unit_price),
            unit_price_display=format_money(entry.unit_price, engine.currency),
        )
        for entry in engine.catalog
    ]


@router.get("/cart", response_model=CartResponse)
async def get_cart(
    engine: CartEngine = Depends(get_cart_engine),
    collector: NotificationCollector = Depends(get_notification_collector),
):
    return _cart_response(engine, collector)


@router.post("/cart/add", response_model=AddToCartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    engine: CartEngine = Depends(get_cart_engine),
    collector: NotificationCollector = Depends(get_notification_collector),
):
    """Add a catalog entry at quantity 0."""
    result = engine.add_item(request.catalog_id)
    return AddToCartResponse(result=result.to_dict(), cart=_cart_response(engine, collector))


@router.patch("/cart/item", response_model=CartResponse)
async def update_cart_item(
    request: UpdateCartItemRequest,
    engine: CartEngine = Depends(get_cart_engine),
    collector: NotificationCollector = Depends(get_notification_collector),
):
    """Set a line's quantity (negative values are ignored)."""
    engine.update_quantity(request.id, request.quantity)
    return _cart_response(engine, collector)


@router.post("/cart/item/{line_id}/increment", response_model=CartResponse)
async def increment_cart_item(
    line_id: int,
    engine: CartEngine = Depends(get_cart_engine),
    collector: NotificationCollector = Depends(get_notification_collector),
):
    engine.increment(line_id)
    return _cart_response(engine, collector)


@router.post("/cart/item/{line_id}/decrement", response_model=CartResponse)
async def decrement_cart_item(
    line_id: int,
    engine: CartEngine = Depends(get_cart_engine),
    collector: NotificationCollector = Depends(get_notification_collector),
):
    engine.decrement(line_id)
    return _cart_response(engine, collector)


@router.post("/cart/checkout", response_model=CheckoutResponse)
async def checkout(
    engine: CartEngine = Depends(get_cart_engine),
    collector: NotificationCollector = Depends(get_notification_collector),
):
    """Validate the total and report the order."""
    result = engine.checkout()
    return CheckoutResponse(result=result.to_dict(), cart=_cart_response(engine, collector))


@router.post("/cart/reset", response_model=CartResponse)
async def reset_cart(
    engine: CartEngine = Depends(get_cart_engine),
    collector: NotificationCollector = Depends(get_notification_collector),
):
    engine.reset()
    logger.info("Cart reset")
    return _cart_response(engine, collector)
