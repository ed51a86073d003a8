from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.cache import _NoopCache, build_cache_from_env
from app.coordinates import router as coordinates_router
from app.images import router as images_router
from app.locations import router as locations_router
from app.logging_setup import configure_logging, logging_middleware
from catalog.images import ImageHost, build_image_host_from_env
from catalog.seed import seed_store
from catalog.store import InMemoryLocationStore, LocationStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.cache = await build_cache_from_env()
    try:
        yield
    finally:
        await app.state.cache.close()


def create_app(
    store: Optional[LocationStore] = None,
    image_host: Optional[ImageHost] = None,
) -> FastAPI:
    configure_logging()
    app = FastAPI(title="Location catalog", lifespan=lifespan)
    app.middleware("http")(logging_middleware)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(locations_router)
    app.include_router(coordinates_router)
    app.include_router(images_router)

    if store is None:
        store = InMemoryLocationStore()
        if os.getenv("CATALOG_SEED", "1") == "1":
            seed_store(store)
    app.state.store = store
    app.state.image_host = image_host if image_host is not None else build_image_host_from_env()
    # replaced on startup when Redis is configured
    app.state.cache = _NoopCache()
    return app


app = create_app()
