"""Location entities — reference records owned by the record store."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from app.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class LocationRecord:
    id: int
    latitude: float
    longitude: float
    city: str | None
    county_name: str | None
    state_name: str | None
    state_code: str | None
    postal_code: int

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> LocationRecord:
        return cls(
            id=int(data["id"]),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            city=data["city"],
            county_name=data.get("county_name"),
            state_name=data["state_name"],
            state_code=data["state_code"],
            postal_code=int(data["postal_code"]),
        )


@dataclass(frozen=True)
class LocationCoordinates:
    """Narrow (id, lat, lng) projection scanned by the proximity search."""

    id: int
    latitude: float
    longitude: float

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
