"""LookupService — translate each query shape into record-store calls."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from app.application.errors import StoreUnavailable
from app.application.normalization import (
    keyword_postal_code,
    normalize_coordinates,
    normalize_keyword,
    normalize_limit,
    normalize_radius,
    normalize_state_code,
    parse_postal_code,
)
from app.application.ports.location_repo import LocationRepository
from app.application.ports.lookup_port import LocationLookupPort
from app.domain.policies.proximity import select_nearby_ids
from app.domain.value_objects.geo_point import GeoPoint
from app.domain.value_objects.lookup_result import LookupResult
from app.domain.value_objects.state_summary import StateSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_KEYWORD_LIMIT = 10
DEFAULT_RADIUS_MILES = 4
DEFAULT_NEARBY_LIMIT = 10


class LookupService(LocationLookupPort):
    """Read-only lookups against the location record store."""

    def __init__(
        self,
        repo: LocationRepository,
        keyword_limit: int = DEFAULT_KEYWORD_LIMIT,
        radius_miles: float = DEFAULT_RADIUS_MILES,
        nearby_limit: int = DEFAULT_NEARBY_LIMIT,
        store_timeout: float | None = None,
    ):
        self._repo = repo
        self._keyword_limit = keyword_limit
        self._radius_miles = radius_miles
        self._nearby_limit = nearby_limit
        self._timeout = store_timeout

    async def keyword_lookup(self, keyword: str) -> LookupResult:
        """Match city substring, state name, county name or postal code.

        A store failure raises StoreUnavailable; it is never reported as an
        empty result.
        """
        keyword = normalize_keyword(keyword)
        logger.info("KeywordLookup '%s'", keyword)
        records = await self._query(
            "KeywordLookup",
            self._repo.find_by_keyword(
                keyword, keyword_postal_code(keyword), self._keyword_limit
            ),
        )
        return LookupResult.found(records[: self._keyword_limit])

    async def zipcode_lookup(self, zipcode: int) -> LookupResult:
        code = parse_postal_code(zipcode)
        records = await self._query("ZipcodeLookup", self._repo.find_by_postal_code(code))
        return LookupResult.found(records)

    async def statecode_lookup(self, state_code: str) -> LookupResult:
        code = normalize_state_code(state_code)
        records = await self._query("StatecodeLookup", self._repo.find_by_state_code(code))
        return LookupResult.found(records)

    async def lat_long_lookup(
        self,
        lat: float,
        lng: float,
        radius_miles: float | None = None,
        limit: int | None = None,
    ) -> LookupResult:
        """Records within *radius_miles* of (lat, lng), at most *limit* of them.

        Two passes: scan every (id, lat, lng) projection and filter in memory,
        then fetch the full records of the survivors. Output keeps store
        order, not distance order.
        """
        lat, lng = normalize_coordinates(lat, lng)
        radius = normalize_radius(self._radius_miles if radius_miles is None else radius_miles)
        cap = normalize_limit(self._nearby_limit if limit is None else limit)

        candidates = await self._query("LatLongLookup", self._repo.get_coordinates())
        ids = select_nearby_ids(GeoPoint(latitude=lat, longitude=lng), candidates, radius, cap)
        logger.info(
            "LatLongLookup (%s, %s) r=%s mi: %d of %d candidates matched",
            lat, lng, radius, len(ids), len(candidates),
        )
        if not ids:
            return LookupResult.found([])

        records = await self._query("LatLongLookup", self._repo.find_by_ids(ids))
        return LookupResult.found(records[:cap])

    async def get_state_by_zip(self, zipcode: int) -> str | None:
        code = parse_postal_code(zipcode)
        return await self._query(
            "GetStateByZip", self._repo.get_state_name_by_postal_code(code)
        )

    async def get_states(self) -> list[StateSummary]:
        states = await self._query("GetStates", self._repo.get_distinct_states())
        # dedupe again in case the store returns repeated pairs
        return list(dict.fromkeys(states))

    async def get_all_geo_data(self) -> LookupResult:
        # Unbounded full-table dump; callers must apply their own limits.
        logger.warning("GetAllGeoData requested: returning the entire record store")
        records = await self._query("GetAllGeoData", self._repo.get_all_summaries())
        return LookupResult.found(records)

    async def _query(self, operation: str, call: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(call, self._timeout)
        except asyncio.TimeoutError:
            logger.error("%s: record store timed out after %ss", operation, self._timeout)
            raise StoreUnavailable(operation, f"timed out after {self._timeout}s") from None
