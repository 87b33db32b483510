"""Pydantic wire records for the coordinate value types.

These records define the plain-dict shape that ``LatLong`` and
``GeoCoordinate`` are exchanged in, and validate dicts coming back in.
The value types themselves stay frozen dataclasses; the records are only
used at the serialisation boundary.

Shapes:
- ``LatLongRecord``:         ``{"latitude", "longitude"}``
- ``GlobeCoordinateRecord``: ``{"latitude", "longitude", "altitude",
  "precision", "globe"}``; ``altitude`` is always ``None`` and is kept
  only so older consumers reading the field keep working.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from globe_coords.core.exceptions import CoordinateValueError

LAT_LONG_TYPE = "geocoordinate"
GLOBE_COORDINATE_TYPE = "globecoordinate"

RecordT = TypeVar("RecordT", bound=BaseModel)


class LatLongRecord(BaseModel):
    """Plain latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    model_config = {"frozen": True}


class GlobeCoordinateRecord(BaseModel):
    """Globe coordinate as exchanged with other systems.

    Attributes:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        altitude: Unused; always serialised as ``None``.
        precision: Resolution in degrees, ``None`` when unknown.
        globe: Globe identifier IRI, ``None`` meaning Earth.
    """

    latitude: float
    longitude: float
    altitude: float | None = None
    precision: float | None = None
    globe: str | None = None

    model_config = {"frozen": True}


def validate_record(record_type: type[RecordT], data: object) -> RecordT:
    """Validate *data* against *record_type*.

    Raises:
        CoordinateValueError: If *data* is not a dict or violates the
            record schema. Missing keys are reported as
            ``"<name> field required"``.
    """
    if not isinstance(data, dict):
        msg = f"dict expected, got {type(data).__name__}"
        raise CoordinateValueError(msg)
    try:
        return record_type.model_validate(data)
    except ValidationError as exc:
        raise CoordinateValueError(_describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    """Collapse pydantic errors into one readable sentence."""
    problems: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        if error["type"] == "missing":
            problems.append(f"{location} field required")
        else:
            problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)
