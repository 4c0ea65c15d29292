"""GeoPoint value object — immutable (lat, lon) pair."""

import math
from dataclasses import dataclass

# Earth circumference ~40000 km spread over 360 degrees of latitude
KM_PER_DEGREE_LAT = 40000 / 360


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def flat_distance_km(self, other: "GeoPoint") -> float:
        """Approximate distance in km using a flat-earth projection around self.

        Longitude degrees shrink by cos(latitude) of this point. Only valid for
        short distances; no correction near the poles or across the 180° seam.
        """
        ky = KM_PER_DEGREE_LAT
        kx = math.cos(math.pi * self.latitude / 180.0) * ky

        dx = abs(self.longitude - other.longitude) * kx
        dy = abs(self.latitude - other.latitude) * ky

        return math.sqrt(dx * dx + dy * dy)
