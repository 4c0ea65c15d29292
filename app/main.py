"""Geocode Lookup — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.adapters.persistence.database import engine
from app.application.errors import InvalidInput, StoreUnavailable
from app.config import settings
from app.domain.value_objects.lookup_result import LookupResult
from app.infrastructure.api.dependencies import get_cache
from app.infrastructure.api.routes_geocode import router as geocode_router
from app.infrastructure.api.routes_health import router as health_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await get_cache().close()
    await engine.dispose()


async def _invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=422, content=LookupResult.failed(str(exc)).to_dict())


async def _store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content=LookupResult.failed(str(exc)).to_dict())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Geocode Lookup",
        description="Keyword, postal code, state and proximity lookups with a read-through cache",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(InvalidInput, _invalid_input_handler)
    app.add_exception_handler(StoreUnavailable, _store_unavailable_handler)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(geocode_router, prefix="/api")

    return app


app = create_app()
