"""Globe-aware normalisation of coordinates.

Earth and the Moon number longitudes in [-180, 180); every other globe
uses [0, 360). Latitudes beyond the poles are folded back over them,
which moves the longitude half-way around the globe. On a pole the
longitude is meaningless and collapses to 0.
"""

from __future__ import annotations

from globe_coords.core.constants import GLOBE_EARTH, GLOBE_MOON
from globe_coords.models.values import GeoCoordinate, LatLong

EASTERN_MINIMUM_LONGITUDE = -180.0
ZERO_MINIMUM_LONGITUDE = 0.0

_SIGNED_LONGITUDE_GLOBES = frozenset({GLOBE_EARTH, GLOBE_MOON})


class GlobeMath:
    """Stateless normalisation helpers."""

    @staticmethod
    def normalize_globe(globe: str | None) -> str:
        """Return *globe*, or the Earth IRI when it is ``None`` or empty."""
        return globe or GLOBE_EARTH

    def normalize_globe_coordinate(self, coordinate: GeoCoordinate) -> GeoCoordinate:
        """Normalise the position of *coordinate*, keeping precision and globe."""
        globe = self.normalize_globe(coordinate.globe)
        return GeoCoordinate(
            self.normalize_globe_lat_long(coordinate.lat_long, globe),
            coordinate.precision,
            globe,
        )

    def normalize_globe_lat_long(self, lat_long: LatLong, globe: str | None = None) -> LatLong:
        """Normalise *lat_long* using the longitude range of *globe*."""
        if self.normalize_globe(globe) in _SIGNED_LONGITUDE_GLOBES:
            minimum_longitude = EASTERN_MINIMUM_LONGITUDE
        else:
            minimum_longitude = ZERO_MINIMUM_LONGITUDE
        return self.normalize_lat_long(lat_long, minimum_longitude)

    @staticmethod
    def normalize_lat_long(
        lat_long: LatLong,
        minimum_longitude: float = EASTERN_MINIMUM_LONGITUDE,
    ) -> LatLong:
        """Bring *lat_long* into [-90, 90] x [min, min + 360).

        The longitude is wrapped by at most one turn, which is enough
        because ``LatLong`` components never exceed 360 in magnitude.
        """
        latitude = lat_long.latitude
        longitude = lat_long.longitude

        if longitude < minimum_longitude:
            longitude += 360
        elif longitude >= minimum_longitude + 360:
            longitude -= 360

        if latitude >= 270:
            latitude -= 360
        elif latitude <= -270:
            latitude += 360

        if latitude > 90 or latitude < -90:
            latitude = (180 if latitude > 90 else -180) - latitude
            if longitude - 180 >= minimum_longitude:
                longitude -= 180
            else:
                longitude += 180

        if abs(latitude) == 90:
            longitude = 0.0

        return LatLong(latitude, longitude)
