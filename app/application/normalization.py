"""Input normalization shared by the lookup service and the cache keys."""

from __future__ import annotations

import math

from app.application.errors import InvalidInput


def normalize_keyword(keyword: str) -> str:
    """Strip and lowercase a keyword. Blank keywords are rejected."""
    if not isinstance(keyword, str) or not keyword.strip():
        raise InvalidInput("keyword", keyword, "must be a non-empty string")
    return keyword.strip().lower()


def normalize_state_code(state_code: str) -> str:
    if not isinstance(state_code, str) or not state_code.strip():
        raise InvalidInput("state_code", state_code, "must be a non-empty string")
    return state_code.strip().upper()


def parse_postal_code(value: int | str) -> int:
    """Accept an int or a string of digits ("02134" -> 2134)."""
    if isinstance(value, bool):
        raise InvalidInput("postal_code", value, "must be numeric")
    if isinstance(value, int):
        code = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        code = int(value.strip())
    else:
        raise InvalidInput("postal_code", value, "must be numeric")
    if code < 0:
        raise InvalidInput("postal_code", value, "must not be negative")
    return code


def keyword_postal_code(keyword: str) -> int | None:
    """Postal-code branch of a keyword search; None unless the keyword is plain ASCII digits."""
    if keyword.isascii() and keyword.isdigit():
        return int(keyword)
    return None


def normalize_coordinates(lat: float, lng: float) -> tuple[float, float]:
    try:
        lat, lng = float(lat), float(lng)
    except (TypeError, ValueError):
        raise InvalidInput("coordinates", (lat, lng), "must be numeric") from None
    if math.isnan(lat) or not -90.0 <= lat <= 90.0:
        raise InvalidInput("latitude", lat, "must be within [-90, 90]")
    if math.isnan(lng) or not -180.0 <= lng <= 180.0:
        raise InvalidInput("longitude", lng, "must be within [-180, 180]")
    # fold -0.0 into 0.0
    return lat + 0.0, lng + 0.0


def normalize_radius(radius_miles: float) -> float:
    try:
        radius = float(radius_miles)
    except (TypeError, ValueError):
        raise InvalidInput("radius_miles", radius_miles, "must be numeric") from None
    if math.isnan(radius) or radius <= 0:
        raise InvalidInput("radius_miles", radius_miles, "must be positive")
    return radius


def normalize_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidInput("limit", limit, "must be a positive integer")
    return limit
