"""Pytest configuration and shared fixtures."""

import pytest

from app.adapters.cache.memory_adapter import InMemoryCacheAdapter
from tests.fakes import FakeLocationRepository, make_record


@pytest.fixture
def springfield():
    return make_record(1, "Springfield", "Sangamon", "IL", "Illinois", 62701, 39.78, -89.65)


@pytest.fixture
def sample_records(springfield):
    return [
        springfield,
        make_record(2, "Chicago", "Cook", "IL", "Illinois", 60601, 41.886, -87.62),
        make_record(3, "Springfield", "Hampden", "MA", "Massachusetts", 1103, 42.10, -72.59),
        # ~12 km south of Springfield IL
        make_record(4, "Chatham", "Sangamon", "IL", "Illinois", 62629, 39.676, -89.704),
        # ~1.8 km west of Springfield IL
        make_record(5, "Leland Grove", "Sangamon", "IL", "Illinois", 62704, 39.775, -89.67),
    ]


@pytest.fixture
def location_repo(sample_records):
    return FakeLocationRepository(sample_records)


@pytest.fixture
def crowded_repo():
    """25 records sharing one city and one point."""
    return FakeLocationRepository([
        make_record(i, "Testville", "Test", "TS", "Testland", 10000 + i, 40.0, -100.0)
        for i in range(1, 26)
    ])


@pytest.fixture
def memory_cache():
    return InMemoryCacheAdapter(ttl_seconds=0)
