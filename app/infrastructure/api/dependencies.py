"""FastAPI dependency injection — wires adapters into the lookup services."""

from __future__ import annotations

import logging

from app.adapters.cache.memory_adapter import InMemoryCacheAdapter
from app.adapters.cache.redis_adapter import RedisCacheAdapter
from app.adapters.persistence.database import async_session_factory
from app.adapters.persistence.repositories import SqlLocationRepository
from app.application.ports.cache_port import CachePort
from app.application.ports.lookup_port import LocationLookupPort
from app.application.use_cases.cached_lookup import CacheAsideLookupService
from app.application.use_cases.lookup_locations import LookupService
from app.config import settings

logger = logging.getLogger(__name__)

# Singleton adapters (sessions are opened per call inside the repository)
_cache_adapter: CachePort
if settings.redis_url:
    _cache_adapter = RedisCacheAdapter()
    logger.info("Using Redis for lookup caching")
else:
    _cache_adapter = InMemoryCacheAdapter()
    logger.info("REDIS_URL not set, using in-process lookup cache")

_location_repo = SqlLocationRepository(async_session_factory)

_lookup_service = CacheAsideLookupService(
    lookup=LookupService(
        repo=_location_repo,
        keyword_limit=settings.keyword_lookup_limit,
        radius_miles=settings.nearby_radius_miles,
        nearby_limit=settings.nearby_limit,
        store_timeout=settings.store_timeout_seconds,
    ),
    cache=_cache_adapter,
    radius_miles=settings.nearby_radius_miles,
    nearby_limit=settings.nearby_limit,
    cache_timeout=settings.cache_timeout_seconds,
    single_flight=settings.cache_single_flight,
)


def get_cache() -> CachePort:
    return _cache_adapter


def get_lookup_service() -> LocationLookupPort:
    return _lookup_service
