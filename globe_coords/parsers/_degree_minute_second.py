"""Parser for degree-minute-second notation: ``55° 45' 20.8296", 37° 37' 3.4788"``."""

from __future__ import annotations

import re

from globe_coords.models.notation import Notation, NotationSymbols
from globe_coords.parsers._segments import (
    DECIMAL_DIGITS,
    UnitNotationParser,
    apply_aliases,
    degree_aliases,
    minute_aliases,
    second_aliases,
)


class DmsCoordinateParser(UnitNotationParser):
    """Reads whole degrees, whole minutes and decimal seconds.

    Minutes and seconds may each be left out of a segment (``1°2"`` means
    one degree, zero minutes, two seconds), but at least one of the two
    segments must carry all three parts.
    """

    notation = Notation.DMS
    format_name = "dms"

    def __init__(self, symbols: NotationSymbols | None = None) -> None:
        super().__init__(symbols)
        degree, minute, second = (
            re.escape(glyph)
            for glyph in (self.symbols.degree, self.symbols.minute, self.symbols.second)
        )
        complete = rf"\d{{1,3}}{degree}\d{{1,2}}{minute}\d{{1,2}}(?:{DECIMAL_DIGITS})?{second}"
        self._complete = re.compile(complete, re.IGNORECASE)

    def segment_pattern(self) -> str:
        degree = re.escape(self.symbols.degree)
        minute = re.escape(self.symbols.minute)
        second = re.escape(self.symbols.second)
        return (
            rf"\d{{1,3}}{degree}(?:\d{{1,2}}{minute})?"
            rf"(?:\d{{1,2}}(?:{DECIMAL_DIGITS})?{second})?"
        )

    def delimiters(self) -> list[str]:
        return [self.symbols.second]

    def normalize_glyphs(self, text: str) -> str:
        symbols = self.symbols
        aliases = second_aliases(symbols) + minute_aliases(symbols) + degree_aliases(symbols)
        return apply_aliases(text, aliases)

    def accepts_segments(self, segments: list[str]) -> bool:
        return any(self._is_complete(segment) for segment in segments)

    def _is_complete(self, segment: str) -> bool:
        bare = self.resolve_direction(segment)
        return self._complete.fullmatch(bare.removeprefix("-")) is not None

    def parse_segment(self, segment: str) -> float:
        symbols = self.symbols
        negative, unsigned = self.split_sign(segment)
        degrees, rest = self.degree_split(unsigned)

        minute_end = rest.find(symbols.minute)
        minutes = float(rest[:minute_end]) if minute_end > 0 else 0.0
        seconds_start = minute_end + len(symbols.minute) if minute_end > 0 else 0

        second_end = rest.find(symbols.second)
        seconds = float(rest[seconds_start:second_end]) if second_end > seconds_start else 0.0

        value = degrees + (minutes + seconds / 60) / 60
        return -value if negative else value
