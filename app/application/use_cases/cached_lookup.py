"""CacheAsideLookupService — read-through cache in front of LookupService."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from app.application.cache_keys import build_cache_key
from app.application.errors import CacheUnavailable, MalformedCacheEntry
from app.application.normalization import (
    normalize_coordinates,
    normalize_keyword,
    normalize_limit,
    normalize_radius,
    normalize_state_code,
    parse_postal_code,
)
from app.application.ports.cache_port import CachePort
from app.application.ports.lookup_port import LocationLookupPort
from app.application.use_cases.lookup_locations import (
    DEFAULT_NEARBY_LIMIT,
    DEFAULT_RADIUS_MILES,
)
from app.domain.value_objects.enums import LookupOperation
from app.domain.value_objects.lookup_result import LookupResult
from app.domain.value_objects.state_summary import StateSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_states(states: list[StateSummary]) -> str:
    return json.dumps([s.to_dict() for s in states], ensure_ascii=False)


def _decode_states(raw: str) -> list[StateSummary]:
    payload = json.loads(raw)
    if not isinstance(payload, list):
        raise ValueError("expected a JSON array")
    return [StateSummary.from_dict(item) for item in payload]


def _identity(value: str) -> str:
    return value


class CacheAsideLookupService(LocationLookupPort):
    """Wraps every lookup with a cache read, falling back to *lookup* on a miss.

    Entries are only ever created, never updated or deleted; expiry belongs
    to the cache adapter. Cache failures degrade to the store and never fail
    the call. ``get_all_geo_data`` always bypasses the cache.
    """

    def __init__(
        self,
        lookup: LocationLookupPort,
        cache: CachePort,
        radius_miles: float = DEFAULT_RADIUS_MILES,
        nearby_limit: int = DEFAULT_NEARBY_LIMIT,
        cache_timeout: float | None = None,
        single_flight: bool = True,
    ):
        self._lookup = lookup
        self._cache = cache
        self._radius_miles = radius_miles
        self._nearby_limit = nearby_limit
        self._timeout = cache_timeout
        self._single_flight = single_flight
        self._in_flight: dict[str, asyncio.Future] = {}

    # ── Lookups ───────────────────────────────────────────────────

    async def keyword_lookup(self, keyword: str) -> LookupResult:
        keyword = normalize_keyword(keyword)
        return await self._cached(
            build_cache_key(LookupOperation.KEYWORD, keyword),
            lambda: self._lookup.keyword_lookup(keyword),
            LookupResult.to_json,
            LookupResult.from_json,
        )

    async def zipcode_lookup(self, zipcode: int) -> LookupResult:
        code = parse_postal_code(zipcode)
        return await self._cached(
            build_cache_key(LookupOperation.ZIPCODE, code),
            lambda: self._lookup.zipcode_lookup(code),
            LookupResult.to_json,
            LookupResult.from_json,
        )

    async def statecode_lookup(self, state_code: str) -> LookupResult:
        code = normalize_state_code(state_code)
        return await self._cached(
            build_cache_key(LookupOperation.STATECODE, code),
            lambda: self._lookup.statecode_lookup(code),
            LookupResult.to_json,
            LookupResult.from_json,
        )

    async def lat_long_lookup(
        self,
        lat: float,
        lng: float,
        radius_miles: float | None = None,
        limit: int | None = None,
    ) -> LookupResult:
        lat, lng = normalize_coordinates(lat, lng)
        radius = normalize_radius(self._radius_miles if radius_miles is None else radius_miles)
        cap = normalize_limit(self._nearby_limit if limit is None else limit)
        return await self._cached(
            build_cache_key(LookupOperation.LAT_LONG, lat, lng, radius, cap),
            lambda: self._lookup.lat_long_lookup(lat, lng, radius, cap),
            LookupResult.to_json,
            LookupResult.from_json,
        )

    async def get_state_by_zip(self, zipcode: int) -> str | None:
        """Cached as the raw state-name string, not a JSON envelope."""
        code = parse_postal_code(zipcode)
        return await self._cached(
            build_cache_key(LookupOperation.STATE_BY_ZIP, code),
            lambda: self._lookup.get_state_by_zip(code),
            _identity,
            _identity,
        )

    async def get_states(self) -> list[StateSummary]:
        return await self._cached(
            build_cache_key(LookupOperation.STATES),
            self._lookup.get_states,
            _encode_states,
            _decode_states,
        )

    async def get_all_geo_data(self) -> LookupResult:
        return await self._lookup.get_all_geo_data()

    # ── Cache-aside protocol ──────────────────────────────────────

    async def _cached(
        self,
        key: str,
        load: Callable[[], Awaitable[T]],
        encode: Callable[[T], str],
        decode: Callable[[str], T],
    ) -> T:
        raw = await self._read(key)
        if raw and raw.strip():
            try:
                value = self._decode(key, raw, decode)
            except MalformedCacheEntry as exc:
                logger.warning("%s; treating as a miss", exc)
            else:
                logger.debug("Cache hit for '%s'", key)
                return value

        logger.info("Cache miss for '%s'", key)
        if not self._single_flight:
            return await self._load_and_fill(key, load, encode)

        future = self._in_flight.get(key)
        if future is None:
            future = asyncio.ensure_future(self._load_and_fill(key, load, encode))
            self._in_flight[key] = future
            future.add_done_callback(lambda f, k=key: self._forget(k, f))
        else:
            logger.debug("Joining in-flight load for '%s'", key)
        return await asyncio.shield(future)

    async def _load_and_fill(
        self,
        key: str,
        load: Callable[[], Awaitable[T]],
        encode: Callable[[T], str],
    ) -> T:
        value = await load()
        if value is None:
            return value
        payload = encode(value)
        if payload and payload.strip():
            await self._write(key, payload)
        return value

    @staticmethod
    def _decode(key: str, raw: str, decode: Callable[[str], T]) -> T:
        try:
            return decode(raw)
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            raise MalformedCacheEntry(key, str(exc)) from exc

    async def _read(self, key: str) -> str | None:
        try:
            return await asyncio.wait_for(self._cache.get(key), self._timeout)
        except (CacheUnavailable, asyncio.TimeoutError) as exc:
            logger.warning("Cache read failed for '%s', using store: %s", key, exc)
            return None
        except (MalformedCacheEntry, UnicodeDecodeError) as exc:
            logger.warning("Unreadable cache entry '%s'; treating as a miss: %s", key, exc)
            return None

    async def _write(self, key: str, payload: str) -> None:
        try:
            await asyncio.wait_for(self._cache.set(key, payload), self._timeout)
        except (CacheUnavailable, asyncio.TimeoutError) as exc:
            logger.warning("Cache write failed for '%s': %s", key, exc)

    def _forget(self, key: str, future: asyncio.Future) -> None:
        if self._in_flight.get(key) is future:
            del self._in_flight[key]
