"""Precision detectors paired with the notation parsers.

A detector looks at the digits a parsed coordinate carries and derives
the resolution it was written with. The result for a ``LatLong`` is the
smaller (more precise) of the latitude and longitude results.

- ``FloatPrecisionDetector`` (Float, DD): ``10^-n`` for ``n`` decimals,
  counted after rounding to 8 places.
- ``DmsPrecisionDetector``: ``10^-n / 3600`` for ``n`` decimals of the
  arc-seconds value, counted after rounding to 4 places.
- ``DmPrecisionDetector``: ``1/60`` when the arc-minutes value is whole
  (after rounding to 6 places), else the DMS result.
"""

from __future__ import annotations

import abc

from globe_coords.core.constants import ARC_MINUTE, ARC_SECOND
from globe_coords.models.values import LatLong, Precision
from globe_coords.utils.numbers import fractional_digits

FLOAT_DECIMALS = 8
MINUTE_DECIMALS = 6
SECOND_DECIMALS = 4


def _power_of_ten(exponent: int) -> float:
    # float("1e-6") is exactly the literal 0.000001; 10 ** -6 is not.
    return float(f"1e-{exponent}")


class PrecisionDetector(abc.ABC):
    """Derives a ``Precision`` from a parsed ``LatLong``."""

    def detect(self, lat_long: LatLong) -> Precision:
        return Precision(
            min(
                self.detect_degree_precision(lat_long.latitude),
                self.detect_degree_precision(lat_long.longitude),
            )
        )

    @abc.abstractmethod
    def detect_degree_precision(self, degrees: float) -> float:
        """Return the resolution implied by a single degree value."""


class FloatPrecisionDetector(PrecisionDetector):
    def detect_degree_precision(self, degrees: float) -> float:
        digits = fractional_digits(degrees, FLOAT_DECIMALS)
        return _power_of_ten(digits) if digits else 1.0


class DmsPrecisionDetector(PrecisionDetector):
    def detect_degree_precision(self, degrees: float) -> float:
        digits = fractional_digits(degrees * 3600, SECOND_DECIMALS)
        if not digits:
            return ARC_SECOND
        return _power_of_ten(digits) / 3600


class DmPrecisionDetector(PrecisionDetector):
    def __init__(self) -> None:
        self._seconds = DmsPrecisionDetector()

    def detect_degree_precision(self, degrees: float) -> float:
        if fractional_digits(degrees * 60, MINUTE_DECIMALS):
            return self._seconds.detect_degree_precision(degrees)
        return ARC_MINUTE
