"""HTTP routers for the storefront presentation layer."""
from .cart import router as cart_router

__all__ = ["cart_router"]
