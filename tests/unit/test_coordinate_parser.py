"""Tests for the notation-detecting coordinate parsers.

Covers:
- Every notation is recognised, with its detected precision
- Priority order (seconds are never claimed by DM or DD)
- Precision and globe options
- The aggregate error when no notation matches
- Determinism across successive parses and threads
"""

from __future__ import annotations

import logging
import threading
from typing import ClassVar

import pytest

from globe_coords.core.config import CoordinateOptions
from globe_coords.core.constants import GLOBE_EARTH
from globe_coords.core.exceptions import CoordinateParseError, CoordinateRangeError
from globe_coords.models.notation import NotationSymbols
from globe_coords.models.values import GeoCoordinate, LatLong
from globe_coords.parsers.coordinate_parser import (
    GlobeCoordinateParser,
    LatLongParser,
    LatLongPrecisionParser,
)


class TestGlobeCoordinateParserValid:
    """Parsed value and detected precision for every notation."""

    VALID: ClassVar[list[tuple[str, tuple[float, float, float]]]] = [
        # Whitespace
        ("1N 1E\n", (1, 1, 1)),
        (" 1N 1E ", (1, 1, 1)),
        # Float
        ("55.7557860 N, 37.6176330 W", (55.7557860, -37.6176330, 0.000001)),
        ("55.7557860N,37.6176330W", (55.7557860, -37.6176330, 0.000001)),
        ("55.7557860, -37.6176330", (55.7557860, -37.6176330, 0.000001)),
        ("55.7557860, -37.6176330    ", (55.7557860, -37.6176330, 0.000001)),
        ("55 S, 37.6176330 W", (-55, -37.6176330, 0.000001)),
        ("55 S,37.6176330W", (-55, -37.6176330, 0.000001)),
        ("-55, -37.6176330", (-55, -37.6176330, 0.000001)),
        ("5.5S,37W ", (-5.5, -37, 0.1)),
        ("-5.5,-37 ", (-5.5, -37, 0.1)),
        ("-5.5 -37 ", (-5.5, -37, 0.1)),
        ("4,2", (4, 2, 1)),
        ("5.5S 37W ", (-5.5, -37, 0.1)),
        ("5.5 S 37 W ", (-5.5, -37, 0.1)),
        ("4 2", (4, 2, 1)),
        ("S5.5 W37 ", (-5.5, -37, 0.1)),
        # DD
        ("55.7557860° N, 37.6176330° W", (55.7557860, -37.6176330, 0.000001)),
        ("55.7557860°, -37.6176330°", (55.7557860, -37.6176330, 0.000001)),
        ("55.7557860°,-37.6176330°", (55.7557860, -37.6176330, 0.000001)),
        ("55.7557860°,-37.6176330°  ", (55.7557860, -37.6176330, 0.000001)),
        ("55° S, 37.6176330 ° W", (-55, -37.6176330, 0.000001)),
        ("-55°, -37.6176330 °", (-55, -37.6176330, 0.000001)),
        ("5.5°S,37°W ", (-5.5, -37, 0.1)),
        ("5.5° S,37° W ", (-5.5, -37, 0.1)),
        ("-5.5°,-37° ", (-5.5, -37, 0.1)),
        ("-55° -37.6176330 °", (-55, -37.6176330, 0.000001)),
        ("5.5°S 37°W ", (-5.5, -37, 0.1)),
        ("-5.5 ° -37 ° ", (-5.5, -37, 0.1)),
        ("S5.5° W37°", (-5.5, -37, 0.1)),
        (" S 5.5° W 37°", (-5.5, -37, 0.1)),
        # DMS
        ("55° 45' 20.8296\", 37° 37' 3.4788\"", (55.755786, 37.617633, 0.0001 / 3600)),
        ("55° 45' 20.8296\", -37° 37' 3.4788\"", (55.755786, -37.617633, 0.0001 / 3600)),
        ("-55° 45' 20.8296\", -37° 37' 3.4788\"", (-55.755786, -37.617633, 0.0001 / 3600)),
        ("-55° 45' 20.8296\", 37° 37' 3.4788\"  ", (-55.755786, 37.617633, 0.0001 / 3600)),
        ("55° 0' 0\", 37° 0' 0\"", (55, 37, 1 / 3600)),
        ("55° 30' 0\", 37° 30' 0\"", (55.5, 37.5, 1 / 3600)),
        ("  55° 0' 18\", 37° 0' 18\"", (55.005, 37.005, 1 / 3600)),
        ("0° 0' 0\", 0° 0' 0\"", (0, 0, 1 / 3600)),
        ("0° 0' 18\" N, 0° 0' 18\" E", (0.005, 0.005, 1 / 3600)),
        (" 0° 0' 18\" S  , 0°  0' 18\"  W ", (-0.005, -0.005, 1 / 3600)),
        ("0° 0′ 18″ N, 0° 0′ 18″ E", (0.005, 0.005, 1 / 3600)),
        ("0° 0' 18\" N  0° 0' 18\" E", (0.005, 0.005, 1 / 3600)),
        (" 0 ° 0 ' 18 \" S   0 °  0 ' 18 \"  W ", (-0.005, -0.005, 1 / 3600)),
        ("0° 0′ 18″ N 0° 0′ 18″ E", (0.005, 0.005, 1 / 3600)),
        ("N 0° 0' 18\" E 0° 0' 18\"", (0.005, 0.005, 1 / 3600)),
        ("N0°0'18\"E0°0'18\"", (0.005, 0.005, 1 / 3600)),
        ("N0°0'18\" E0°0'18\"", (0.005, 0.005, 1 / 3600)),
        # DM
        ("55° 0', 37° 0'", (55, 37, 1 / 60)),
        ("55° 30', 37° 30'", (55.5, 37.5, 1 / 60)),
        ("   0° 0', 0° 0'  ", (0, 0, 1 / 60)),
        ("-55° 30', -37° 30'", (-55.5, -37.5, 1 / 60)),
        ("0° 0.3' S, 0° 0.3' W", (-0.005, -0.005, 1 / 3600)),
        ("-55° 30′, -37° 30′", (-55.5, -37.5, 1 / 60)),
        ("-55 ° 30 ' -37 ° 30 '", (-55.5, -37.5, 1 / 60)),
        ("0° 0.3' S 0° 0.3' W", (-0.005, -0.005, 1 / 3600)),
        ("S 0° 0.3' W 0° 0.3'", (-0.005, -0.005, 1 / 3600)),
        ("S0°0.3'W0°0.3'", (-0.005, -0.005, 1 / 3600)),
        ("S0°0.3' W0°0.3'", (-0.005, -0.005, 1 / 3600)),
    ]

    @pytest.mark.parametrize(("text", "expected"), VALID)
    def test_parses(
        self,
        globe_parser: GlobeCoordinateParser,
        text: str,
        expected: tuple[float, float, float],
    ) -> None:
        coordinate = globe_parser.parse(text)
        latitude, longitude, precision = expected
        assert coordinate.latitude == pytest.approx(latitude)
        assert coordinate.longitude == pytest.approx(longitude)
        assert coordinate.precision == pytest.approx(precision)
        assert coordinate.globe == GLOBE_EARTH


class TestGlobeCoordinateParserPrecision:
    """Precision detected from the digits of the input."""

    CASES: ClassVar[list[tuple[str, float]]] = [
        # Float
        ("10 20", 1),
        ("1.3 2.4", 0.1),
        ("1.3 20", 0.1),
        ("1.35 2.46", 0.01),
        ("1.3579 2.468", 0.0001),
        ("1.00000001 2.00000001", 0.00000001),
        ("1.000000001 2.000000001", 1),
        ("1.555555555 2.555555555", 0.00000001),
        # DD
        ("10° 20°", 1),
        ("1.3° 2.4°", 0.1),
        ("1.357° 2.468°", 0.001),
        ("1.000000001° 2.000000001°", 1),
        # DM
        ("1°3' 2°4'", 1 / 60),
        ("1°3.5' 2°4.6'", 1 / 3600),
        ("1°3.57' 2°4.68'", 1 / 36000),
        ("1°3.000001' 2°4.000001'", 1 / 36000000),
        ("1°3.0000001' 2°4.0000001'", 1 / 60),
        # DMS
        ("1°3'5\" 2°4'6\"", 1 / 3600),
        ("1°3'5.7\" 2°4'6.8\"", 1 / 36000),
        ("1°3'5.0001\" 2°4'6.0001\"", 1 / 36000000),
        ("1°3'5.00001\" 2°4'6.00001\"", 1 / 3600),
        ("47°42'0.00\"N, 15°27'0.00\"E", 1 / 3600),
    ]

    @pytest.mark.parametrize(("text", "expected"), CASES)
    def test_detects(self, globe_parser: GlobeCoordinateParser, text: str, expected: float) -> None:
        assert globe_parser.parse(text).precision == pytest.approx(expected)

    def test_precision_option_overrides_detection(self) -> None:
        parser = GlobeCoordinateParser(CoordinateOptions(precision=0.5))
        assert parser.parse("1.3579 2.468").precision == 0.5


class TestGlobeCoordinateParserGlobe:
    """The globe option is attached to every result."""

    def test_matching_default(self) -> None:
        parser = GlobeCoordinateParser(CoordinateOptions(globe=GLOBE_EARTH))
        assert parser.parse("55.7557860° N, 37.6176330° W") == GeoCoordinate(
            LatLong(55.7557860, -37.6176330), 0.000001, GLOBE_EARTH
        )

    def test_other_globe(self) -> None:
        globe = "http://www.wikidata.org/entity/Q111"
        parser = GlobeCoordinateParser(CoordinateOptions(globe=globe))
        assert parser.parse("60.5, 260") == GeoCoordinate(LatLong(60.5, 260), 0.1, globe)

    def test_without_globe_option(self, globe_parser: GlobeCoordinateParser) -> None:
        assert globe_parser.parse("40.2, 22.5") == GeoCoordinate(LatLong(40.2, 22.5), 0.1, GLOBE_EARTH)


class TestGlobeCoordinateParserInvalid:
    """Aggregate failure and error propagation."""

    @pytest.mark.parametrize("value", ["~=[,,_,,]:3", "ohi there", "", None, 42])
    def test_undetermined_format(self, globe_parser: GlobeCoordinateParser, value: object) -> None:
        with pytest.raises(CoordinateParseError, match="could not be determined") as exc_info:
            globe_parser.parse(value)
        assert exc_info.value.notation == "globe-coordinate"
        assert exc_info.value.value == value

    def test_range_error_propagates(self, globe_parser: GlobeCoordinateParser) -> None:
        with pytest.raises(CoordinateRangeError):
            globe_parser.parse("400, 20")

    def test_rejections_are_logged(
        self, globe_parser: GlobeCoordinateParser, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="globe_coords.parsers.coordinate_parser"):
            globe_parser.parse("55° 30', 37° 30'")
        messages = [record.getMessage() for record in caplog.records]
        assert any("rejected | notation=float" in message for message in messages)
        assert any("rejected | notation=dms" in message for message in messages)
        assert any("parsed | notation=dm" in message for message in messages)


class TestNotationPriority:
    """Seconds are claimed by DMS, minutes by DM, plain degrees by DD."""

    def test_seconds_are_dms(self) -> None:
        parsed = LatLongPrecisionParser().parse("55° 30' 18\", 37° 30' 18\"")
        assert parsed.precision.to_float() == pytest.approx(1 / 3600)

    def test_minutes_are_dm(self) -> None:
        parsed = LatLongPrecisionParser().parse("55° 30', 37° 30'")
        assert parsed.precision.to_float() == pytest.approx(1 / 60)

    def test_degrees_are_dd(self) -> None:
        parsed = LatLongPrecisionParser().parse("55°, 37°")
        assert parsed.precision.to_float() == 1

    def test_partial_minutes_are_dm(self) -> None:
        parsed = LatLongPrecisionParser().parse("55°, 37° 30'")
        assert parsed.lat_long == LatLong(55, 37.5)
        assert parsed.precision.to_float() == pytest.approx(1 / 60)


class TestSuccessiveParses:
    """The lazily built parser list gives identical results every time."""

    def test_same_result_twice(self, globe_parser: GlobeCoordinateParser) -> None:
        assert globe_parser.parse("S5.5 W37") == globe_parser.parse("S5.5 W37")
        assert globe_parser.parse("55° 0' 0\", 37° 0' 0\"") == globe_parser.parse(
            "55° 0' 0\", 37° 0' 0\""
        )

    def test_concurrent_parses_agree(self) -> None:
        parser = GlobeCoordinateParser()
        results: list[GeoCoordinate] = []
        lock = threading.Lock()

        def worker() -> None:
            coordinate = parser.parse("55° 45' 20.8296\", 37° 37' 3.4788\"")
            with lock:
                results.append(coordinate)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert len(set(results)) == 1


class TestLatLongParser:
    """LatLongParser returns just the value."""

    def test_returns_lat_long(self, lat_long_parser: LatLongParser) -> None:
        assert lat_long_parser.parse("5.5S,37W") == LatLong(-5.5, -37)

    def test_custom_symbols(self) -> None:
        symbols = NotationSymbols(degree="º", minute="’", second="”", separator=";")
        parser = LatLongParser(CoordinateOptions(symbols=symbols))
        lat_long = parser.parse("55º 30’ 0”; 37º 30’ 0”")
        assert lat_long == LatLong(55.5, 37.5)

    def test_invalid(self, lat_long_parser: LatLongParser) -> None:
        with pytest.raises(CoordinateParseError):
            lat_long_parser.parse("ohi there")
