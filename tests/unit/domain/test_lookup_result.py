"""Tests for LookupResult and StateSummary serialization."""

import json

import pytest

from app.domain.value_objects.lookup_result import LookupResult
from app.domain.value_objects.state_summary import StateSummary


def test_found_result_is_success(springfield):
    result = LookupResult.found([springfield])
    assert result.success is True
    assert result.message is None
    assert result.data == [springfield]


def test_empty_found_result_is_still_success():
    result = LookupResult.found([])
    assert result.success is True
    assert result.data == []


def test_failed_result_has_no_data_and_a_message():
    result = LookupResult.failed("store down")
    assert result.success is False
    assert result.data == []
    assert result.message == "store down"


def test_json_round_trip_preserves_records(springfield):
    original = LookupResult.found([springfield])
    restored = LookupResult.from_json(original.to_json())
    assert restored == original


def test_json_shape(springfield):
    payload = json.loads(LookupResult.found([springfield]).to_json())
    assert payload["success"] is True
    assert payload["data"][0]["postal_code"] == 62701
    assert payload["data"][0]["state_code"] == "IL"


def test_from_json_rejects_missing_fields():
    with pytest.raises(KeyError):
        LookupResult.from_json('{"data": [{"id": 1}], "success": true}')


def test_state_summary_is_hashable_and_comparable():
    a = StateSummary("IL", "Illinois")
    b = StateSummary.from_dict({"state_code": "IL", "state_name": "Illinois"})
    assert a == b
    assert len({a, b}) == 1
