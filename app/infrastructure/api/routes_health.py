"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import get_session
from app.application.ports.cache_port import CachePort
from app.infrastructure.api.dependencies import get_cache

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    session: AsyncSession = Depends(get_session),
    cache: CachePort = Depends(get_cache),
):
    """Check API, database and cache connectivity."""
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {e}"

    # a cache outage only degrades latency; lookups still work
    cache_status = "connected" if await cache.ping() else "unavailable"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "cache": cache_status,
        "service": "Geocode Lookup",
    }
