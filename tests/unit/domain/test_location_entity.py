"""Tests for location entities."""

import pytest

from app.domain.entities.location import LocationCoordinates, LocationRecord
from app.domain.value_objects.geo_point import GeoPoint


def test_record_point(springfield):
    assert springfield.point == GeoPoint(latitude=39.78, longitude=-89.65)


def test_record_dict_round_trip(springfield):
    assert LocationRecord.from_dict(springfield.to_dict()) == springfield


def test_record_from_dict_tolerates_missing_county():
    record = LocationRecord.from_dict({
        "id": 9, "latitude": 1, "longitude": 2, "city": "X",
        "state_name": "Y", "state_code": "YY", "postal_code": "123",
    })
    assert record.county_name is None
    assert record.postal_code == 123
    assert isinstance(record.latitude, float)


def test_record_is_frozen(springfield):
    with pytest.raises(AttributeError):
        springfield.city = "Elsewhere"


def test_coordinates_point():
    assert LocationCoordinates(1, 10.0, 20.0).point == GeoPoint(10.0, 20.0)
