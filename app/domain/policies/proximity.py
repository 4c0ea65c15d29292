"""Proximity policy — flat-projection radius filter used instead of a spatial index."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities.location import LocationCoordinates
from app.domain.value_objects.geo_point import GeoPoint

KM_PER_MILE = 1.609344


def miles_to_km(miles: float) -> float:
    return miles * KM_PER_MILE


def are_points_near(origin: GeoPoint, other: GeoPoint, radius_miles: float) -> bool:
    """True when *other* lies within *radius_miles* of *origin* (inclusive)."""
    return origin.flat_distance_km(other) <= miles_to_km(radius_miles)


def select_nearby_ids(
    origin: GeoPoint,
    candidates: Iterable[LocationCoordinates],
    radius_miles: float,
    limit: int,
) -> list[int]:
    """Return ids of the first *limit* candidates within the radius.

    Candidates are taken in iteration order; the result is not sorted by
    distance.
    """
    found: list[int] = []
    if limit <= 0:
        return found
    for candidate in candidates:
        if are_points_near(origin, candidate.point, radius_miles):
            found.append(candidate.id)
            if len(found) >= limit:
                break
    return found
