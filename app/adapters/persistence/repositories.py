"""SQLAlchemy repository implementations."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.adapters.persistence.models import GeoDataModel
from app.application.errors import StoreUnavailable
from app.application.ports.location_repo import LocationRepository
from app.domain.entities.location import LocationCoordinates, LocationRecord
from app.domain.value_objects.state_summary import StateSummary

logger = logging.getLogger(__name__)

# ─── Mappers ─────────────────────────────────────────────────────────


def _location_to_domain(m: GeoDataModel) -> LocationRecord:
    return LocationRecord(
        id=m.id,
        latitude=m.lat,
        longitude=m.lng,
        city=m.city,
        county_name=m.county_name,
        state_name=m.state_name,
        state_code=m.state_id,
        postal_code=m.zip,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlLocationRepository(LocationRepository):
    """Read-only queries over ``geo_data``.

    Each call opens its own session and closes it on exit, so one instance
    can be shared across concurrent requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Record store error during %s", operation)
            raise StoreUnavailable(operation, str(exc)) from exc

    async def find_by_keyword(
        self, keyword: str, postal_code: int | None, limit: int
    ) -> list[LocationRecord]:
        kw = keyword.lower()
        clauses = [
            func.lower(GeoDataModel.city).contains(kw, autoescape=True),
            func.lower(GeoDataModel.state_name) == kw,
            func.lower(GeoDataModel.county_name) == kw,
        ]
        if postal_code is not None:
            clauses.append(GeoDataModel.zip == postal_code)

        async with self._session("find_by_keyword") as s:
            result = await s.execute(
                select(GeoDataModel).where(or_(*clauses)).order_by(GeoDataModel.id).limit(limit)
            )
            return [_location_to_domain(m) for m in result.scalars()]

    async def find_by_postal_code(self, postal_code: int) -> list[LocationRecord]:
        async with self._session("find_by_postal_code") as s:
            result = await s.execute(
                select(GeoDataModel)
                .where(GeoDataModel.zip == postal_code)
                .order_by(GeoDataModel.id)
            )
            return [_location_to_domain(m) for m in result.scalars()]

    async def find_by_state_code(self, state_code: str) -> list[LocationRecord]:
        async with self._session("find_by_state_code") as s:
            result = await s.execute(
                select(GeoDataModel)
                .where(GeoDataModel.state_id == state_code)
                .order_by(GeoDataModel.id)
            )
            return [_location_to_domain(m) for m in result.scalars()]

    async def find_by_ids(self, ids: list[int]) -> list[LocationRecord]:
        if not ids:
            return []
        async with self._session("find_by_ids") as s:
            result = await s.execute(
                select(GeoDataModel)
                .where(GeoDataModel.id.in_(ids))
                .order_by(GeoDataModel.id)
            )
            return [_location_to_domain(m) for m in result.scalars()]

    async def get_coordinates(self) -> list[LocationCoordinates]:
        async with self._session("get_coordinates") as s:
            result = await s.execute(
                select(GeoDataModel.id, GeoDataModel.lat, GeoDataModel.lng).order_by(
                    GeoDataModel.id
                )
            )
            return [
                LocationCoordinates(id=row.id, latitude=row.lat, longitude=row.lng)
                for row in result
            ]

    async def get_state_name_by_postal_code(self, postal_code: int) -> str | None:
        async with self._session("get_state_name_by_postal_code") as s:
            result = await s.execute(
                select(GeoDataModel.state_name)
                .where(GeoDataModel.zip == postal_code)
                .order_by(GeoDataModel.id)
                .limit(1)
            )
            return result.scalars().first()

    async def get_distinct_states(self) -> list[StateSummary]:
        async with self._session("get_distinct_states") as s:
            result = await s.execute(
                select(GeoDataModel.state_id, GeoDataModel.state_name)
                .where(GeoDataModel.state_id.is_not(None), GeoDataModel.state_name.is_not(None))
                .distinct()
                .order_by(GeoDataModel.state_id, GeoDataModel.state_name)
            )
            return [StateSummary(state_code=row.state_id, state_name=row.state_name) for row in result]

    async def get_all_summaries(self) -> list[LocationRecord]:
        async with self._session("get_all_summaries") as s:
            result = await s.execute(
                select(
                    GeoDataModel.id,
                    GeoDataModel.lat,
                    GeoDataModel.lng,
                    GeoDataModel.city,
                    GeoDataModel.state_id,
                    GeoDataModel.state_name,
                    GeoDataModel.zip,
                ).order_by(GeoDataModel.id)
            )
            return [
                LocationRecord(
                    id=row.id,
                    latitude=row.lat,
                    longitude=row.lng,
                    city=row.city,
                    county_name=None,
                    state_name=row.state_name,
                    state_code=row.state_id,
                    postal_code=row.zip,
                )
                for row in result
            ]
