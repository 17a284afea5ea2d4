"""
FastAPI application factory.

Builds the ASGI app around an injected settings object and product
repository. Nothing here touches module-level mutable state, so every call
returns an independent service.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings
from internal.infrastructure.memory.repository import create_repository
from internal.infrastructure.metrics import PRODUCTS_TOTAL
from internal.transport.http.errors import register_error_handlers
from internal.transport.http.handlers import router, set_dependencies, system_router
from internal.transport.http.middleware import MetricsMiddleware, RequestContextMiddleware
from internal.usecase.create_product import ProductRepository
from pkg.logger.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Logs startup/shutdown and publishes the initial registry size.
    """
    settings: Settings = app.state.settings

    logger.info("Starting Product Registry API...", service=settings.APP_NAME)

    if not settings.API_KEY:
        logger.warning("API_KEY not set, all write requests will be rejected")

    PRODUCTS_TOTAL.set(await app.state.deps.repository.count())

    logger.info("Product Registry API started successfully")

    yield

    logger.info("Product Registry API shutdown complete")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Service settings; read from the environment if omitted.
        repository: Product store; a seeded in-memory repository if omitted.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or Settings()
    if repository is None:
        repository = create_repository(seed=True)

    app = FastAPI(
        title="Product Registry API",
        description="In-memory product catalogue with API-key protected writes",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.settings = settings
    set_dependencies(app, repository)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Metrics middleware
    app.add_middleware(MetricsMiddleware)

    # Request ID and access log, outermost
    app.add_middleware(RequestContextMiddleware)

    register_error_handlers(app)

    app.include_router(system_router)
    app.include_router(router)

    return app
