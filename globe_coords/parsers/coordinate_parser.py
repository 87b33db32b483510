"""Coordinate parsers that detect the notation of their input.

Each parser tries the notations in priority order (Float, DMS, DM, DD)
and returns the first successful result. A notation rejecting the text
with ``CoordinateParseError`` moves on to the next one; any other error
(e.g. ``CoordinateRangeError`` for ``"400, 20"``) propagates at once.

- ``LatLongParser``: text → ``LatLong``.
- ``LatLongPrecisionParser``: text → ``PreciseLatLong`` (value plus the
  precision detected from its digits).
- ``GlobeCoordinateParser``: text → ``GeoCoordinate`` on the configured
  globe, with the configured precision overriding the detected one.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from globe_coords.core.config import CoordinateOptions
from globe_coords.core.exceptions import CoordinateParseError
from globe_coords.models.notation import Notation
from globe_coords.models.values import GeoCoordinate, PreciseLatLong
from globe_coords.parsers._decimal_degree import DdCoordinateParser
from globe_coords.parsers._decimal_minute import DmCoordinateParser
from globe_coords.parsers._degree_minute_second import DmsCoordinateParser
from globe_coords.parsers._float import FloatCoordinateParser
from globe_coords.parsers._precision import (
    DmPrecisionDetector,
    DmsPrecisionDetector,
    FloatPrecisionDetector,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from globe_coords.models.values import LatLong
    from globe_coords.parsers._precision import PrecisionDetector
    from globe_coords.parsers._segments import NotationParser

logger = logging.getLogger("globe_coords.parsers.coordinate_parser")

GLOBE_COORDINATE_FORMAT = "globe-coordinate"
UNDETERMINED_FORMAT_MESSAGE = "The format of the coordinate could not be determined."

_NOTATION_PARSERS: dict[Notation, type[NotationParser]] = {
    Notation.FLOAT: FloatCoordinateParser,
    Notation.DMS: DmsCoordinateParser,
    Notation.DM: DmCoordinateParser,
    Notation.DD: DdCoordinateParser,
}

_PRECISION_DETECTORS: dict[Notation, Callable[[], PrecisionDetector]] = {
    Notation.FLOAT: FloatPrecisionDetector,
    Notation.DMS: DmsPrecisionDetector,
    Notation.DM: DmPrecisionDetector,
    Notation.DD: FloatPrecisionDetector,
}


class LatLongPrecisionParser:
    """Parses text in any supported notation and detects its precision.

    The notation parsers are built on first use and shared by every later
    call, including calls from other threads.
    """

    def __init__(self, options: CoordinateOptions | None = None) -> None:
        self._options = options or CoordinateOptions()
        self._parsers: tuple[tuple[NotationParser, PrecisionDetector], ...] | None = None
        self._lock = threading.Lock()

    @property
    def options(self) -> CoordinateOptions:
        return self._options

    def parse(self, value: object) -> PreciseLatLong:
        """Parse *value* into a ``PreciseLatLong``.

        Raises:
            CoordinateParseError: If no notation accepts *value*.
            CoordinateRangeError: If the matching notation yields a
                component outside [-360, 360].
        """
        for notation_parser, detector in self._notation_parsers():
            try:
                lat_long = notation_parser.parse(value)
            except CoordinateParseError:
                logger.debug(
                    "Coordinate rejected | notation=%s | value=%r",
                    notation_parser.format_name,
                    value,
                )
                continue

            precision = detector.detect(lat_long)
            logger.debug(
                "Coordinate parsed | notation=%s | precision=%s",
                notation_parser.format_name,
                precision.to_float(),
            )
            return PreciseLatLong(lat_long, precision)

        raise CoordinateParseError(UNDETERMINED_FORMAT_MESSAGE, value, GLOBE_COORDINATE_FORMAT)

    def _notation_parsers(self) -> tuple[tuple[NotationParser, PrecisionDetector], ...]:
        if self._parsers is None:
            with self._lock:
                if self._parsers is None:
                    symbols = self._options.symbols
                    self._parsers = tuple(
                        (_NOTATION_PARSERS[notation](symbols), _PRECISION_DETECTORS[notation]())
                        for notation in Notation.by_priority()
                    )
        return self._parsers


class LatLongParser:
    """Parses text in any supported notation into a ``LatLong``."""

    def __init__(self, options: CoordinateOptions | None = None) -> None:
        self._parser = LatLongPrecisionParser(options)

    def parse(self, value: object) -> LatLong:
        return self._parser.parse(value).lat_long


class GlobeCoordinateParser:
    """Parses text into a ``GeoCoordinate``.

    Example::

        parser = GlobeCoordinateParser()
        coordinate = parser.parse("55.7557860 N, 37.6176330 W")
        coordinate.lat_long    # LatLong(55.755786, -37.617633)
        coordinate.precision   # 1e-06
    """

    def __init__(self, options: CoordinateOptions | None = None) -> None:
        self._options = options or CoordinateOptions()
        self._parser = LatLongPrecisionParser(self._options)

    def parse(self, value: object) -> GeoCoordinate:
        """Parse *value* into a ``GeoCoordinate``.

        Raises:
            CoordinateParseError: If no notation accepts *value*.
            CoordinateRangeError: If a parsed component is outside
                [-360, 360].
        """
        parsed = self._parser.parse(value)
        precision = self._options.precision
        if precision is None:
            precision = parsed.precision.to_float()
        return GeoCoordinate(parsed.lat_long, precision, self._options.globe)
