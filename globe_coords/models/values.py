"""Immutable coordinate value types.

- ``LatLong``: a latitude/longitude pair in degrees.
- ``Precision``: a resolution in degrees, kept apart from plain floats so
  a precision is never passed where a degree value is expected.
- ``GeoCoordinate``: a ``LatLong`` with an optional precision and a globe.
- ``PreciseLatLong``: a parsed ``LatLong`` paired with its detected precision.

Design notes:
- All types are frozen dataclasses; "changing" a value means building a
  new one (e.g. ``GeoCoordinate.with_precision``).
- Both degree components and precisions are bounded by [-360, 360], not
  by the geographic ranges, so un-normalised intermediate values remain
  representable. ``GlobeMath`` maps them into canonical ranges.
"""

from __future__ import annotations

import hashlib
import json
import math
from dataclasses import dataclass

from globe_coords.core.constants import GLOBE_EARTH, MAX_DEGREES, MIN_DEGREES
from globe_coords.core.exceptions import (
    CoordinateRangeError,
    CoordinateValueError,
    InvalidGlobeError,
)
from globe_coords.models.payloads import (
    GLOBE_COORDINATE_TYPE,
    LAT_LONG_TYPE,
    GlobeCoordinateRecord,
    LatLongRecord,
    validate_record,
)

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _check_degrees(field_name: str, value: object) -> float:
    """Return *value* as a float, raising if it is not within [-360, 360]."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{field_name} must be a number, got {type(value).__name__}"
        raise CoordinateValueError(msg)
    degrees = float(value)
    if math.isnan(degrees) or degrees < MIN_DEGREES or degrees > MAX_DEGREES:
        raise CoordinateRangeError(field_name, value)
    return degrees


def _number_text(value: float | None) -> str:
    """Render a float the way hashes and the pipe serialisation expect."""
    if value is None:
        return ""
    return repr(float(value))


# ---------------------------------------------------------------------------
# LatLong
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LatLong:
    """A latitude/longitude pair in degrees.

    Attributes:
        latitude: Latitude in degrees, within [-360, 360].
        longitude: Longitude in degrees, within [-360, 360].
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", _check_degrees("latitude", self.latitude))
        object.__setattr__(self, "longitude", _check_degrees("longitude", self.longitude))

    @property
    def sort_key(self) -> float:
        return self.latitude

    @property
    def type_name(self) -> str:
        return LAT_LONG_TYPE

    def serialize(self) -> str:
        """Serialise to ``"<latitude>|<longitude>"``."""
        return f"{_number_text(self.latitude)}|{_number_text(self.longitude)}"

    @classmethod
    def unserialize(cls, text: str) -> LatLong:
        """Inverse of ``serialize``.

        Raises:
            CoordinateValueError: If *text* is not two ``|``-separated numbers.
        """
        parts = text.split("|", 1)
        if len(parts) < 2:
            msg = f"Invalid LatLong serialization {text!r}"
            raise CoordinateValueError(msg)
        try:
            latitude, longitude = float(parts[0]), float(parts[1])
        except ValueError as exc:
            msg = f"Invalid LatLong serialization {text!r}"
            raise CoordinateValueError(msg) from exc
        return cls(latitude, longitude)

    @property
    def content_hash(self) -> str:
        """Stable md5 hex digest of the serialised value."""
        return hashlib.md5(self.serialize().encode("utf-8")).hexdigest()

    def to_dict(self) -> dict[str, float]:
        """Serialise to ``{"latitude": ..., "longitude": ...}``."""
        return LatLongRecord(latitude=self.latitude, longitude=self.longitude).model_dump()

    def to_typed_dict(self) -> dict[str, object]:
        """Serialise to ``{"value": {...}, "type": "geocoordinate"}``."""
        return {"value": self.to_dict(), "type": self.type_name}

    @classmethod
    def from_dict(cls, data: object) -> LatLong:
        """Deserialise from a ``to_dict`` payload.

        Raises:
            CoordinateValueError: If a key is missing or not numeric.
            CoordinateRangeError: If a component is outside [-360, 360].
        """
        record = validate_record(LatLongRecord, data)
        return cls(record.latitude, record.longitude)


# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Precision:
    """Resolution of a measurement in degrees.

    ``Precision(1 / 3600)`` asserts the value is accurate to one arc-second.
    Smaller values are more precise.
    """

    degrees: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", _check_degrees("precision", self.degrees))

    def to_float(self) -> float:
        return self.degrees


# ---------------------------------------------------------------------------
# GeoCoordinate
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, init=False)
class GeoCoordinate:
    """A coordinate on a globe, optionally with a known precision.

    Attributes:
        lat_long: The latitude/longitude pair.
        precision: Resolution in degrees, or ``None`` when unknown.
        globe: Globe identifier IRI. Never empty; defaults to Earth.
    """

    lat_long: LatLong
    precision: float | None
    globe: str

    def __init__(
        self,
        lat_long: LatLong,
        precision: float | Precision | None = None,
        globe: str | None = None,
    ) -> None:
        if not isinstance(lat_long, LatLong):
            msg = f"lat_long must be a LatLong, got {type(lat_long).__name__}"
            raise CoordinateValueError(msg)
        if isinstance(precision, Precision):
            precision = precision.to_float()
        elif precision is not None:
            precision = _check_degrees("precision", precision)

        if globe is None:
            globe = GLOBE_EARTH
        elif not isinstance(globe, str) or globe == "":
            msg = "globe must be a non-empty string or None"
            raise InvalidGlobeError(msg)

        object.__setattr__(self, "lat_long", lat_long)
        object.__setattr__(self, "precision", precision)
        object.__setattr__(self, "globe", globe)

    @property
    def latitude(self) -> float:
        return self.lat_long.latitude

    @property
    def longitude(self) -> float:
        return self.lat_long.longitude

    @property
    def sort_key(self) -> float:
        return self.latitude

    @property
    def type_name(self) -> str:
        return GLOBE_COORDINATE_TYPE

    def with_precision(self, precision: float | Precision | None) -> GeoCoordinate:
        """Return a copy carrying *precision* instead of the current one."""
        return GeoCoordinate(self.lat_long, precision, self.globe)

    @property
    def content_hash(self) -> str:
        """Stable md5 hex digest over latitude, longitude, precision and globe."""
        key = "|".join(
            (
                _number_text(self.latitude),
                _number_text(self.longitude),
                _number_text(self.precision),
                self.globe,
            )
        )
        return hashlib.md5(key.encode("utf-8")).hexdigest()

    def to_dict(self) -> dict[str, object]:
        """Serialise to the ``GlobeCoordinateRecord`` shape."""
        return GlobeCoordinateRecord(
            latitude=self.latitude,
            longitude=self.longitude,
            precision=self.precision,
            globe=self.globe,
        ).model_dump()

    def to_typed_dict(self) -> dict[str, object]:
        """Serialise to ``{"value": {...}, "type": "globecoordinate"}``."""
        return {"value": self.to_dict(), "type": self.type_name}

    @classmethod
    def from_dict(cls, data: object) -> GeoCoordinate:
        """Deserialise from a ``to_dict`` payload.

        ``precision`` and ``globe`` may be absent or ``None``; ``altitude``
        is ignored.

        Raises:
            CoordinateValueError: If latitude or longitude is missing, or a
                field has the wrong type.
            CoordinateRangeError: If a value is outside [-360, 360].
        """
        record = validate_record(GlobeCoordinateRecord, data)
        return cls(LatLong(record.latitude, record.longitude), record.precision, record.globe)

    def serialize(self) -> str:
        """Serialise to a JSON array ``[lat, lon, altitude, precision, globe]``."""
        return json.dumps(list(self.to_dict().values()))

    @classmethod
    def unserialize(cls, text: str) -> GeoCoordinate:
        """Inverse of ``serialize``.

        Raises:
            CoordinateValueError: If *text* is not a five-element JSON array.
        """
        try:
            fields = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Invalid GeoCoordinate serialization {text!r}"
            raise CoordinateValueError(msg) from exc
        if not isinstance(fields, list) or len(fields) != 5:
            msg = f"Invalid GeoCoordinate serialization {text!r}"
            raise CoordinateValueError(msg)
        keys = ("latitude", "longitude", "altitude", "precision", "globe")
        return cls.from_dict(dict(zip(keys, fields, strict=True)))


# ---------------------------------------------------------------------------
# PreciseLatLong
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PreciseLatLong:
    """A parsed ``LatLong`` together with the precision detected for it."""

    lat_long: LatLong
    precision: Precision
