"""
Cart API Pydantic Models

Request bodies and response envelopes for the cart endpoints.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


# ==================== REQUESTS ====================

class AddToCartRequest(BaseModel):
    catalog_id: int


class UpdateCartItemRequest(BaseModel):
    id: int
    quantity: int  # negative values are ignored by the engine


# ==================== RESPONSES ====================

class NotificationModel(BaseModel):
    title: str
    description: str
    variant: str = "default"


class CatalogEntryModel(BaseModel):
    id: int
    name: str
    unit_price: str
    unit_price_display: str


class CartLineModel(BaseModel):
    id: int
    name: str
    quantity: int
    unit_price: str
    subtotal: str
    unit_price_display: str
    subtotal_display: str


class CartResponse(BaseModel):
    mode: str
    currency: str
    is_empty: bool
    total_items: int
    lines: List[CartLineModel]
    total: str
    total_display: str
    notifications: List[NotificationModel] = Field(default_factory=list)


class OutcomeModel(BaseModel):
    status: str
    title: str
    message: str
    total: Optional[str] = None


class AddToCartResponse(BaseModel):
    result: OutcomeModel
    cart: CartResponse


class CheckoutResponse(BaseModel):
    result: OutcomeModel
    cart: CartResponse
