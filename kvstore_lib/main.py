"""Application factory for the kvstore FastAPI app.

This module exposes `create_app(config: Config) -> FastAPI` which performs
all setup (logging, storage/store composition, middleware and router
registration). Nothing happens at import time so tests can construct
isolated apps.

    from kvstore_lib.main import create_app, Config
    app = create_app(Config())
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from kvstore_lib.config.config import Config
from kvstore_lib.logging_config import configure_logging
from kvstore_lib.kv.api import failure
from kvstore_lib.services import ServiceContainer
from kvstore_lib.storage import create_storage
from kvstore_lib.store import NamespaceStore


def create_app(config: Config) -> FastAPI:
    """Create and return a configured FastAPI application."""
    logger = configure_logging(config.log_level)

    backend = create_storage(
        backend=config.storage_backend,
        serializer=config.value_serializer,
        database=config.database,
    )
    store = NamespaceStore(backend)
    logger.info("Using %s storage backend", backend.name)

    container = ServiceContainer()
    container.register_singleton("config", config)
    container.register_singleton("namespace_store", store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        logger.info("Shutting down; closing storage backend")
        store.close()

    app = FastAPI(title="kvstore", lifespan=lifespan)
    app.state.container = container

    if config.enable_brotli:
        logger.info("Brotli compression middleware is enabled")
        from kvstore_lib.middleware import BrotliCompression
        app.add_middleware(BrotliCompression)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
        return failure(400, "Invalid request")

    from kvstore_lib.kv.api import router as kv_router
    from kvstore_lib.namespaces.api import router as namespaces_router
    from kvstore_lib.server.api import router as server_router

    app.include_router(kv_router)
    app.include_router(namespaces_router)
    app.include_router(server_router)

    return app


__all__ = ["Config", "create_app"]
