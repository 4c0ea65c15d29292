"""Port interface shared by the lookup service and its caching wrapper."""

from abc import ABC, abstractmethod

from app.domain.value_objects.lookup_result import LookupResult
from app.domain.value_objects.state_summary import StateSummary


class LocationLookupPort(ABC):
    @abstractmethod
    async def keyword_lookup(self, keyword: str) -> LookupResult:
        ...

    @abstractmethod
    async def zipcode_lookup(self, zipcode: int) -> LookupResult:
        ...

    @abstractmethod
    async def statecode_lookup(self, state_code: str) -> LookupResult:
        ...

    @abstractmethod
    async def lat_long_lookup(
        self,
        lat: float,
        lng: float,
        radius_miles: float | None = None,
        limit: int | None = None,
    ) -> LookupResult:
        ...

    @abstractmethod
    async def get_state_by_zip(self, zipcode: int) -> str | None:
        ...

    @abstractmethod
    async def get_states(self) -> list[StateSummary]:
        ...

    @abstractmethod
    async def get_all_geo_data(self) -> LookupResult:
        ...
