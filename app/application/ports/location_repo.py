"""Port interface for the read-only location record store."""

from abc import ABC, abstractmethod

from app.domain.entities.location import LocationCoordinates, LocationRecord
from app.domain.value_objects.state_summary import StateSummary


class LocationRepository(ABC):
    @abstractmethod
    async def find_by_keyword(
        self, keyword: str, postal_code: int | None, limit: int
    ) -> list[LocationRecord]:
        """City contains *keyword*, or state/county name equals it, or zip equals *postal_code*.

        Text comparisons are case-insensitive. *postal_code* of None disables
        the zip branch.
        """
        ...

    @abstractmethod
    async def find_by_postal_code(self, postal_code: int) -> list[LocationRecord]:
        ...

    @abstractmethod
    async def find_by_state_code(self, state_code: str) -> list[LocationRecord]:
        ...

    @abstractmethod
    async def find_by_ids(self, ids: list[int]) -> list[LocationRecord]:
        ...

    @abstractmethod
    async def get_coordinates(self) -> list[LocationCoordinates]:
        """Full scan of (id, lat, lng) projections."""
        ...

    @abstractmethod
    async def get_state_name_by_postal_code(self, postal_code: int) -> str | None:
        ...

    @abstractmethod
    async def get_distinct_states(self) -> list[StateSummary]:
        ...

    @abstractmethod
    async def get_all_summaries(self) -> list[LocationRecord]:
        """Every record, county name left out. Unbounded."""
        ...
