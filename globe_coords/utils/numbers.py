"""Numeric helpers shared by the precision detectors and the formatter.

Binary floats carry noise that must not leak into digit counting or
rendering: ``55.755786 * 3600`` is ``200720.82959999999``, not
``200720.8296``. Every helper here first reduces a float to at most
15 significant decimal digits, then works on the exact ``Decimal``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

SIGNIFICANT_DIGITS = 15
FLOAT_DISPLAY_DIGITS = 14


def _to_decimal(value: float, digits: int = SIGNIFICANT_DIGITS) -> Decimal:
    return Decimal(f"{value:.{digits}g}")


def round_half_up(value: float, places: int = 0) -> float:
    """Round *value* to *places* decimals, halves away from zero.

    ``round_half_up(0.5) == 1.0`` and ``round_half_up(-2.5) == -3.0``,
    unlike the built-in ``round`` which rounds halves to even.
    """
    exponent = Decimal(1).scaleb(-places)
    return float(_to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def fixed_point(value: float, places: int) -> str:
    """Render *value* rounded to *places* decimals, without exponent.

    Trailing zeros and a dangling decimal point are removed, so
    ``fixed_point(55.0, 8) == "55"`` and ``fixed_point(0.5, 8) == "0.5"``.
    """
    text = f"{round_half_up(value, places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def fractional_digits(value: float, places: int) -> int:
    """Count the decimals of *value* once rounded to *places* decimals."""
    _, _, fraction = fixed_point(value, places).partition(".")
    return len(fraction)


def format_number(value: float, digits: int = 0) -> str:
    """Render *value* with exactly ``max(digits, 0)`` decimals.

    Negative zero renders as ``"0"`` (or ``"0.0"``…), never ``"-0"``.
    """
    digits = max(digits, 0)
    rounded = round_half_up(value, digits)
    if rounded == 0:
        rounded = 0.0
    return f"{rounded:.{digits}f}"


def canonical_float(value: float) -> str:
    """Render *value* as the shortest plain decimal at 14 significant digits.

    ``canonical_float(55.75000000000001) == "55.75"``,
    ``canonical_float(1e-05) == "0.00001"`` and ``canonical_float(-0.0) == "0"``.
    """
    if value == 0:
        return "0"
    text = format(_to_decimal(value, FLOAT_DISPLAY_DIGITS), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
