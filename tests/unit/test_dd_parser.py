"""Tests for DdCoordinateParser (decimal degrees)."""

from __future__ import annotations

from typing import ClassVar

import pytest

from globe_coords.core.exceptions import CoordinateParseError
from globe_coords.parsers._decimal_degree import DdCoordinateParser


@pytest.fixture()
def parser() -> DdCoordinateParser:
    return DdCoordinateParser()


class TestDdParserValid:
    """Inputs the decimal-degree parser accepts."""

    VALID: ClassVar[list[tuple[str, tuple[float, float]]]] = [
        # Whitespace
        ("1°N 1°E\n", (1, 1)),
        (" 1°N 1°E ", (1, 1)),
        # With separator
        ("55.7557860° N, 37.6176330° W", (55.7557860, -37.6176330)),
        ("55.7557860°, -37.6176330°", (55.7557860, -37.6176330)),
        ("55° S, 37.6176330 ° W", (-55, -37.6176330)),
        ("-55°, -37.6176330 °", (-55, -37.6176330)),
        ("5.5°S,37°W ", (-5.5, -37)),
        ("-5.5°,-37° ", (-5.5, -37)),
        # Without separator
        ("55.7557860° N 37.6176330° W", (55.7557860, -37.6176330)),
        ("55.7557860° -37.6176330°", (55.7557860, -37.6176330)),
        ("55° S 37.6176330 ° W", (-55, -37.6176330)),
        ("-55° -37.6176330 °", (-55, -37.6176330)),
        ("5.5°S 37°W ", (-5.5, -37)),
        ("-5.5° -37° ", (-5.5, -37)),
        # Leading direction glyph
        ("N5.5° W37°", (5.5, -37)),
        ("S 5.5° E 37°", (-5.5, 37)),
        # HTML entities
        ("5.5&deg;, 37&#176;", (5.5, 37)),
    ]

    @pytest.mark.parametrize(("text", "expected"), VALID)
    def test_parses(self, parser: DdCoordinateParser, text: str, expected: tuple[float, float]) -> None:
        lat_long = parser.parse(text)
        assert lat_long.latitude == pytest.approx(expected[0])
        assert lat_long.longitude == pytest.approx(expected[1])


class TestDdParserInvalid:
    """Inputs the decimal-degree parser rejects."""

    @pytest.mark.parametrize(
        "value",
        [None, 1, 0.1, "~=[,,_,,]:3", "ohi there", "55.5, 37.5", "55° 30', 37° 30'", "5.5°S, -37°"],
    )
    def test_rejects(self, parser: DdCoordinateParser, value: object) -> None:
        with pytest.raises(CoordinateParseError) as exc_info:
            parser.parse(value)
        assert exc_info.value.notation == "dd"
