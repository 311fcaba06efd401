"""
Storefront - Main FastAPI Application

Single entry point for the product selection page's HTTP API.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.logging import get_logger
from storefront.routers import cart_router
from storefront.routers.deps import get_cart_engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    engine = get_cart_engine()
    logger.info(f"Cart engine ready: mode={engine.mode.value}, {len(engine.catalog)} catalog entries")
    yield


app = FastAPI(
    title="Storefront",
    description="Product selection cart API",
    version="1.0.0",
    lifespan=lifespan
)

# The selection page is served from a different origin during development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cart_router, prefix="/api")
