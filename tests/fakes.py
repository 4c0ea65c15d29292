"""In-memory fakes implementing the application ports."""

from __future__ import annotations

from app.adapters.cache.memory_adapter import InMemoryCacheAdapter
from app.application.errors import CacheUnavailable
from app.application.ports.cache_port import CachePort
from app.application.ports.location_repo import LocationRepository
from app.domain.entities.location import LocationCoordinates, LocationRecord
from app.domain.value_objects.state_summary import StateSummary


class FakeLocationRepository(LocationRepository):
    """Mirrors SqlLocationRepository semantics over a list, counting calls."""

    def __init__(self, records: list[LocationRecord]):
        self._records = sorted(records, key=lambda r: r.id)
        self.calls: list[str] = []

    async def find_by_keyword(self, keyword, postal_code, limit):
        self.calls.append("find_by_keyword")
        kw = keyword.lower()
        found = [
            r for r in self._records
            if kw in (r.city or "").lower()
            or kw == (r.state_name or "").lower()
            or kw == (r.county_name or "").lower()
            or (postal_code is not None and r.postal_code == postal_code)
        ]
        return found[:limit]

    async def find_by_postal_code(self, postal_code):
        self.calls.append("find_by_postal_code")
        return [r for r in self._records if r.postal_code == postal_code]

    async def find_by_state_code(self, state_code):
        self.calls.append("find_by_state_code")
        return [r for r in self._records if r.state_code == state_code]

    async def find_by_ids(self, ids):
        self.calls.append("find_by_ids")
        wanted = set(ids)
        return [r for r in self._records if r.id in wanted]

    async def get_coordinates(self):
        self.calls.append("get_coordinates")
        return [LocationCoordinates(r.id, r.latitude, r.longitude) for r in self._records]

    async def get_state_name_by_postal_code(self, postal_code):
        self.calls.append("get_state_name_by_postal_code")
        return next((r.state_name for r in self._records if r.postal_code == postal_code), None)

    async def get_distinct_states(self):
        self.calls.append("get_distinct_states")
        pairs = {(r.state_code, r.state_name) for r in self._records}
        return [StateSummary(code, name) for code, name in sorted(pairs)]

    async def get_all_summaries(self):
        self.calls.append("get_all_summaries")
        return [
            LocationRecord(
                id=r.id, latitude=r.latitude, longitude=r.longitude, city=r.city,
                county_name=None, state_name=r.state_name, state_code=r.state_code,
                postal_code=r.postal_code,
            )
            for r in self._records
        ]

def make_record(id, city, county, state_code, state_name, zip_code, lat, lng) -> LocationRecord:
    return LocationRecord(
        id=id, latitude=lat, longitude=lng, city=city, county_name=county,
        state_name=state_name, state_code=state_code, postal_code=zip_code,
    )



class RecordingCache(InMemoryCacheAdapter):
    """Memory cache that records every get/set key."""

    def __init__(self):
        super().__init__(ttl_seconds=0)
        self.gets: list[str] = []
        self.sets: list[str] = []

    async def get(self, key):
        self.gets.append(key)
        return await super().get(key)

    async def set(self, key, value):
        self.sets.append(key)
        await super().set(key, value)


class BrokenCache(CachePort):
    """Cache whose backend is always down."""

    async def get(self, key):
        raise CacheUnavailable("connection refused")

    async def set(self, key, value):
        raise CacheUnavailable("connection refused")

    async def ping(self):
        return False
