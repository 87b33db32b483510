"""Render coordinates as text in any of the four notations.

Formatting a degree value takes four steps:

1. Round the value to a multiple of the precision (halves away from zero).
2. Pick the notation. Float always renders as float; for the other
   notations a precision of one degree or coarser falls back to decimal
   degrees, and one arc-minute or coarser falls back to decimal minutes.
   Precisions just below one degree (or one arc-minute) snap up to it.
3. Render with as many decimals as the precision needs.
4. Optionally swap the minus sign for a N/E/S/W glyph.

Example::

    formatter = LatLongFormatter(CoordinateOptions(notation=Notation.DM))
    formatter.format_lat_long(LatLong(55.755786, -37.617633), 1 / 60)
    # 55° 45', -37° 37'
"""

from __future__ import annotations

import math

from globe_coords.core.config import ConfigValidationError, CoordinateOptions
from globe_coords.core.constants import (
    ARC_MINUTE,
    ARC_SECOND,
    DEFAULT_PRECISION,
    SPACE_COORDPARTS,
    SPACE_DIRECTION,
    SPACE_LATLONG,
)
from globe_coords.models.notation import Notation
from globe_coords.models.values import GeoCoordinate, LatLong, Precision
from globe_coords.utils.numbers import canonical_float, format_number, round_half_up


def _usable_precision(precision: float | str | Precision | None) -> float:
    """Return *precision* in degrees, or the arc-second default if unusable."""
    if precision is None:
        return DEFAULT_PRECISION
    if isinstance(precision, Precision):
        precision = precision.to_float()
    elif isinstance(precision, str):
        if not precision.strip():
            return DEFAULT_PRECISION
        try:
            precision = float(precision)
        except ValueError as exc:
            raise ConfigValidationError("precision", precision, "must be numeric") from exc
    if not math.isfinite(precision) or precision <= 0:
        return DEFAULT_PRECISION
    return float(precision)


def _significant_digits(units_per_degree: int, precision: float) -> int:
    """Decimals needed to show *precision* in a unit of ``1/units_per_degree`` degrees."""
    return max(0, math.ceil(-math.log10(units_per_degree * precision)))


class LatLongFormatter:
    """Formats ``LatLong`` values according to ``CoordinateOptions``."""

    def __init__(self, options: CoordinateOptions | None = None) -> None:
        self._options = options or CoordinateOptions()

    @property
    def options(self) -> CoordinateOptions:
        return self._options

    def format(self, lat_long: LatLong) -> str:
        """Format *lat_long* at the precision configured in the options."""
        return self.format_lat_long(lat_long, self._options.precision)

    def format_lat_long(
        self,
        lat_long: LatLong,
        precision: float | str | Precision | None = None,
    ) -> str:
        """Format *lat_long* at *precision* degrees.

        ``None``, blank, zero, negative and non-finite precisions mean one
        arc-second.

        Raises:
            TypeError: If *lat_long* is not a ``LatLong``.
            ConfigValidationError: If *precision* is a non-blank, non-numeric string.
        """
        if not isinstance(lat_long, LatLong):
            msg = f"LatLongFormatter can only format LatLong values, got {type(lat_long).__name__}"
            raise TypeError(msg)

        degrees_precision = _usable_precision(precision)
        separator = self._options.symbols.separator + self._spacing(SPACE_LATLONG)
        return separator.join(
            (
                self.format_latitude(lat_long.latitude, degrees_precision),
                self.format_longitude(lat_long.longitude, degrees_precision),
            )
        )

    def format_latitude(
        self, degrees: float, precision: float | str | Precision | None = None
    ) -> str:
        """Format one latitude; unusable precisions mean one arc-second."""
        symbols = self._options.symbols
        text = self._format_degrees(degrees, _usable_precision(precision))
        return self._directional(text, symbols.north, symbols.south)

    def format_longitude(
        self, degrees: float, precision: float | str | Precision | None = None
    ) -> str:
        """Format one longitude; unusable precisions mean one arc-second."""
        symbols = self._options.symbols
        text = self._format_degrees(degrees, _usable_precision(precision))
        return self._directional(text, symbols.east, symbols.west)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _format_degrees(self, degrees: float, precision: float) -> str:
        degrees = self._round_degrees(degrees, precision)
        notation = self._options.notation

        if notation is Notation.FLOAT:
            return canonical_float(degrees)

        if 1 - ARC_MINUTE <= precision < 1:
            precision = 1.0
        elif ARC_MINUTE - ARC_SECOND <= precision < ARC_MINUTE:
            precision = ARC_MINUTE

        if notation is Notation.DD or precision >= 1:
            return self._decimal_degrees(degrees, precision)
        if notation is Notation.DM or precision >= ARC_MINUTE:
            return self._decimal_minutes(degrees, precision)
        return self._degrees_minutes_seconds(degrees, precision)

    @staticmethod
    def _round_degrees(degrees: float, precision: float) -> float:
        sign = 1 if degrees > 0 else -1
        return sign * round_half_up(abs(degrees) / precision) * precision

    def _decimal_degrees(self, degrees: float, precision: float) -> str:
        digits = _significant_digits(1, precision)
        return format_number(degrees, digits) + self._options.symbols.degree

    def _decimal_minutes(self, degrees: float, precision: float) -> str:
        symbols = self._options.symbols
        digits = _significant_digits(60, precision)

        minutes = round_half_up(abs(degrees) * 60, digits)
        whole_degrees = int(minutes / 60)
        minutes -= whole_degrees * 60

        sign = "-" if degrees < 0 and whole_degrees + minutes > 0 else ""
        return (
            f"{sign}{whole_degrees}{symbols.degree}{self._spacing(SPACE_COORDPARTS)}"
            f"{format_number(minutes, digits)}{symbols.minute}"
        )

    def _degrees_minutes_seconds(self, degrees: float, precision: float) -> str:
        symbols = self._options.symbols
        digits = _significant_digits(3600, precision)

        seconds = round_half_up(abs(degrees) * 3600, digits)
        minutes = int(seconds / 60)
        whole_degrees = int(minutes / 60)
        seconds -= minutes * 60
        minutes -= whole_degrees * 60

        space = self._spacing(SPACE_COORDPARTS)
        text = (
            f"{whole_degrees}{symbols.degree}{space}{minutes}{symbols.minute}{space}"
            f"{format_number(seconds, digits)}{symbols.second}"
        )
        if degrees < 0 and whole_degrees + minutes + seconds > 0:
            text = "-" + text
        return text

    def _directional(self, text: str, positive: str, negative: str) -> str:
        if not self._options.directional:
            return text
        is_negative = text.startswith("-")
        if is_negative:
            text = text[1:]
        glyph = negative if is_negative else positive
        return f"{text}{self._spacing(SPACE_DIRECTION)}{glyph}"

    def _spacing(self, flag: str) -> str:
        return " " if flag in self._options.spacing else ""


class GlobeCoordinateFormatter:
    """Formats ``GeoCoordinate`` values at their own precision."""

    def __init__(self, options: CoordinateOptions | None = None) -> None:
        self._formatter = LatLongFormatter(options)

    def format(self, coordinate: GeoCoordinate) -> str:
        """Format *coordinate*; an unknown precision means one arc-second.

        Raises:
            TypeError: If *coordinate* is not a ``GeoCoordinate``.
        """
        if not isinstance(coordinate, GeoCoordinate):
            msg = (
                "GlobeCoordinateFormatter can only format GeoCoordinate values, "
                f"got {type(coordinate).__name__}"
            )
            raise TypeError(msg)
        return self._formatter.format_lat_long(coordinate.lat_long, coordinate.precision)
