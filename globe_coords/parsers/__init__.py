"""Coordinate parsers.

One parser per notation (``_float``, ``_decimal_degree``,
``_decimal_minute``, ``_degree_minute_second``) built on the shared
``_segments`` pipeline, with matching precision detectors in
``_precision``. ``coordinate_parser`` tries them in priority order.
"""

from __future__ import annotations

from globe_coords.parsers._decimal_degree import DdCoordinateParser
from globe_coords.parsers._decimal_minute import DmCoordinateParser
from globe_coords.parsers._degree_minute_second import DmsCoordinateParser
from globe_coords.parsers._float import FloatCoordinateParser
from globe_coords.parsers._precision import (
    DmPrecisionDetector,
    DmsPrecisionDetector,
    FloatPrecisionDetector,
    PrecisionDetector,
)
from globe_coords.parsers.coordinate_parser import (
    GlobeCoordinateParser,
    LatLongParser,
    LatLongPrecisionParser,
)

__all__ = [
    "DdCoordinateParser",
    "DmCoordinateParser",
    "DmPrecisionDetector",
    "DmsCoordinateParser",
    "DmsPrecisionDetector",
    "FloatCoordinateParser",
    "FloatPrecisionDetector",
    "GlobeCoordinateParser",
    "LatLongParser",
    "LatLongPrecisionParser",
    "PrecisionDetector",
]
