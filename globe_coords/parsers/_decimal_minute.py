"""Parser for decimal-minute notation: ``55° 45.35', 37° 37.06'``."""

from __future__ import annotations

import re

from globe_coords.models.notation import Notation, NotationSymbols
from globe_coords.parsers._segments import (
    DECIMAL_DIGITS,
    UnitNotationParser,
    apply_aliases,
    degree_aliases,
    minute_aliases,
)


class DmCoordinateParser(UnitNotationParser):
    """Reads whole degrees plus decimal minutes.

    A segment may leave out its minutes (``55°, 37° 30'``), but at least
    one of the two segments must carry them: ``10° 20°`` is left to the
    decimal-degree parser.
    """

    notation = Notation.DM
    format_name = "dm"

    def __init__(self, symbols: NotationSymbols | None = None) -> None:
        super().__init__(symbols)
        degree = re.escape(self.symbols.degree)
        minute = re.escape(self.symbols.minute)
        self._with_minutes = re.compile(
            rf"\d{{1,3}}{degree}\d{{1,2}}(?:{DECIMAL_DIGITS})?{minute}",
            re.IGNORECASE,
        )

    def segment_pattern(self) -> str:
        degree = re.escape(self.symbols.degree)
        minute = re.escape(self.symbols.minute)
        return rf"\d{{1,3}}{degree}(?:\d{{1,2}}(?:{DECIMAL_DIGITS})?{minute})?"

    def delimiters(self) -> list[str]:
        return [self.symbols.minute]

    def normalize_glyphs(self, text: str) -> str:
        symbols = self.symbols
        return apply_aliases(text, minute_aliases(symbols) + degree_aliases(symbols))

    def accepts_segments(self, segments: list[str]) -> bool:
        return any(self._has_minutes(segment) for segment in segments)

    def _has_minutes(self, segment: str) -> bool:
        bare = self.resolve_direction(segment)
        return self._with_minutes.fullmatch(bare.removeprefix("-")) is not None

    def parse_segment(self, segment: str) -> float:
        negative, unsigned = self.split_sign(segment)
        degrees, rest = self.degree_split(unsigned)

        minute_end = rest.find(self.symbols.minute)
        minutes = float(rest[:minute_end]) if minute_end > 0 else 0.0

        value = degrees + minutes / 60
        return -value if negative else value
