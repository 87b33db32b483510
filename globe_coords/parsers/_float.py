"""Parser for plain float notation: ``55.7557860 N, 37.6176330 W``."""

from __future__ import annotations

import re

from globe_coords.models.notation import Notation, NotationSymbols
from globe_coords.parsers._segments import DECIMAL_DIGITS, NotationParser

_NUMBER = rf"-?\d{{1,3}}(?:{DECIMAL_DIGITS})?"


class FloatCoordinateParser(NotationParser):
    """Reads signed or directional decimal numbers without unit glyphs.

    Without a separator the text must be two space-separated numbers, each
    optionally carrying its direction glyph before or after it.
    """

    notation = Notation.FLOAT
    format_name = "float"
    strip_spaces = False

    def __init__(self, symbols: NotationSymbols | None = None) -> None:
        super().__init__(symbols)
        lat = _directional_number(self.symbols.latitude_directions)
        lon = _directional_number(self.symbols.longitude_directions)
        self._pair = re.compile(f"({lat}) ({lon})", re.IGNORECASE)

    def segment_pattern(self) -> str:
        return rf"\d{{1,3}}(?:{DECIMAL_DIGITS})?"

    def split_without_separator(self, text: str) -> list[str]:
        match = self._pair.fullmatch(text)
        if match is None:
            return [text]
        return [match.group(1), match.group(2)]

    def parse_segment(self, segment: str) -> float:
        return float(self.resolve_direction(segment.replace(" ", "")))


def _directional_number(directions: tuple[str, str]) -> str:
    glyph = "(?:" + "|".join(re.escape(direction) for direction in directions) + ")"
    return rf"(?:{glyph}\s*)?{_NUMBER}(?:\s*{glyph})?"
