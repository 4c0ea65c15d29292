"""Tests for SqlLocationRepository against a small SQLite database."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from app.adapters.persistence.database import Base
from app.adapters.persistence.models import GeoDataModel
from app.adapters.persistence.repositories import SqlLocationRepository
from app.application.errors import StoreUnavailable
from app.domain.value_objects.state_summary import StateSummary
from tests.fakes import make_record


def _to_model(record) -> GeoDataModel:
    return GeoDataModel(
        id=record.id,
        lat=record.latitude,
        lng=record.longitude,
        city=record.city,
        county_name=record.county_name,
        state_name=record.state_name,
        state_id=record.state_code,
        zip=record.postal_code,
    )


def _async_factory(db_path: Path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture()
def geo_db(tmp_path: Path, sample_records) -> Path:
    """SQLite geo_data table seeded with the sample records plus a few extras."""
    db_path = tmp_path / "geo.db"
    extras = [
        make_record(6, "Lake_View", "Dallas", "TX", "Texas", 75201, 32.78, -96.80),
        make_record(7, "Lake View", "Dallas", "TX", "Texas", 75202, 32.79, -96.81),
        make_record(8, "Nowhere", None, None, None, 1, 0.0, 0.0),
    ]
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(_to_model(r) for r in sample_records + extras)
        session.commit()
    engine.dispose()
    return db_path


@pytest.fixture()
def sql_repo(geo_db: Path) -> SqlLocationRepository:
    return SqlLocationRepository(_async_factory(geo_db))


def _ids(records):
    return [r.id for r in records]


# ─── Keyword ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_keyword_city_substring_any_case(sql_repo):
    assert _ids(await sql_repo.find_by_keyword("FIELD", None, 10)) == [1, 3]
    assert _ids(await sql_repo.find_by_keyword("springfield", None, 10)) == [1, 3]


@pytest.mark.asyncio
async def test_keyword_state_and_county_require_equality(sql_repo):
    assert _ids(await sql_repo.find_by_keyword("massachusetts", None, 10)) == [3]
    assert _ids(await sql_repo.find_by_keyword("sangamon", None, 10)) == [1, 4, 5]
    assert await sql_repo.find_by_keyword("sanga", None, 10) == []


@pytest.mark.asyncio
async def test_keyword_postal_code_branch(sql_repo):
    assert _ids(await sql_repo.find_by_keyword("62701", 62701, 10)) == [1]
    assert await sql_repo.find_by_keyword("62701", None, 10) == []


@pytest.mark.asyncio
async def test_keyword_wildcards_match_literally(sql_repo):
    assert _ids(await sql_repo.find_by_keyword("e_v", None, 10)) == [6]
    assert await sql_repo.find_by_keyword("%", None, 10) == []
    assert _ids(await sql_repo.find_by_keyword("_", None, 10)) == [6]


@pytest.mark.asyncio
async def test_keyword_limit(sql_repo):
    assert _ids(await sql_repo.find_by_keyword("illinois", None, 2)) == [1, 2]


# ─── Exact lookups ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_find_by_postal_code(sql_repo, springfield):
    assert await sql_repo.find_by_postal_code(62701) == [springfield]
    assert await sql_repo.find_by_postal_code(99999) == []


@pytest.mark.asyncio
async def test_find_by_state_code(sql_repo):
    assert _ids(await sql_repo.find_by_state_code("IL")) == [1, 2, 4, 5]


@pytest.mark.asyncio
async def test_find_by_ids_in_store_order(sql_repo):
    assert _ids(await sql_repo.find_by_ids([5, 1, 42])) == [1, 5]
    assert await sql_repo.find_by_ids([]) == []


@pytest.mark.asyncio
async def test_get_coordinates(sql_repo):
    coords = await sql_repo.get_coordinates()
    assert _ids(coords) == [1, 2, 3, 4, 5, 6, 7, 8]
    assert (coords[0].latitude, coords[0].longitude) == (39.78, -89.65)


@pytest.mark.asyncio
async def test_state_name_by_postal_code(sql_repo):
    assert await sql_repo.get_state_name_by_postal_code(1103) == "Massachusetts"
    assert await sql_repo.get_state_name_by_postal_code(99999) is None


# ─── States / full dump ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_distinct_states_skip_nulls(sql_repo):
    assert await sql_repo.get_distinct_states() == [
        StateSummary("IL", "Illinois"),
        StateSummary("MA", "Massachusetts"),
        StateSummary("TX", "Texas"),
    ]


@pytest.mark.asyncio
async def test_all_summaries_narrow_projection(sql_repo):
    records = await sql_repo.get_all_summaries()
    assert _ids(records) == [1, 2, 3, 4, 5, 6, 7, 8]
    assert all(r.county_name is None for r in records)
    assert records[0].city == "Springfield"
    assert records[0].state_code == "IL"
    assert records[0].postal_code == 62701


# ─── Failures ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_database_errors_become_store_unavailable(tmp_path: Path):
    # no tables were created in this file
    repo = SqlLocationRepository(_async_factory(tmp_path / "empty.db"))
    with pytest.raises(StoreUnavailable) as exc_info:
        await repo.find_by_keyword("springfield", None, 10)
    assert exc_info.value.operation == "find_by_keyword"
    with pytest.raises(StoreUnavailable):
        await repo.get_distinct_states()
