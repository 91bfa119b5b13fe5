"""FastAPI stand-in for the remote products API (local development and tests)."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_board.core.config import Settings, get_settings
from product_board.stub_api.routers import health, products
from product_board.stub_api.store import ProductStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: ProductStore | None = None) -> FastAPI:
    """Instantiate the app with a fresh in-memory store unless one is given."""
    settings = settings or get_settings()
    app = FastAPI(title=f"{settings.app_name} stub API", version="0.1.0")
    app.state.store = store if store is not None else ProductStore()

    cors_origins = settings.cors_origins
    logger.info(f"[CORS] Allowed origins: {cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(products.router, prefix=settings.products_path, tags=["products"])

    return app


app = create_app()
