"""Geographic coordinate parsing, formatting and normalisation.

Reads and writes latitude/longitude pairs in float, decimal-degree,
decimal-minute and degree-minute-second notation, detects the precision
a coordinate was written with, and normalises coordinates into the
canonical ranges of their globe.

Usage::

    from globe_coords import GlobeCoordinateParser, LatLongFormatter

    coordinate = GlobeCoordinateParser().parse("55° 45' 20.8296\", 37° 37' 3.4788\"")
    LatLongFormatter().format_lat_long(coordinate.lat_long, coordinate.precision)
"""

from globe_coords.core.config import ConfigValidationError, CoordinateOptions
from globe_coords.core.constants import GLOBE_EARTH, GLOBE_MOON
from globe_coords.core.exceptions import (
    ConfigurationError,
    CoordinateParseError,
    CoordinateRangeError,
    CoordinateValueError,
    GeoCoordinateError,
    InvalidGlobeError,
    InvalidNotationError,
)
from globe_coords.formatters.latlong_formatter import GlobeCoordinateFormatter, LatLongFormatter
from globe_coords.models.notation import Notation, NotationSymbols
from globe_coords.models.values import GeoCoordinate, LatLong, PreciseLatLong, Precision
from globe_coords.parsers.coordinate_parser import (
    GlobeCoordinateParser,
    LatLongParser,
    LatLongPrecisionParser,
)
from globe_coords.utils.globe_math import GlobeMath

__version__ = "0.1.0"

__all__ = [
    "GLOBE_EARTH",
    "GLOBE_MOON",
    "ConfigValidationError",
    "ConfigurationError",
    "CoordinateOptions",
    "CoordinateParseError",
    "CoordinateRangeError",
    "CoordinateValueError",
    "GeoCoordinate",
    "GeoCoordinateError",
    "GlobeCoordinateFormatter",
    "GlobeCoordinateParser",
    "GlobeMath",
    "InvalidGlobeError",
    "InvalidNotationError",
    "LatLong",
    "LatLongFormatter",
    "LatLongParser",
    "LatLongPrecisionParser",
    "Notation",
    "NotationSymbols",
    "PreciseLatLong",
    "Precision",
]
