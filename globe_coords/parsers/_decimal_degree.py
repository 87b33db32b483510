"""Parser for decimal-degree notation: ``55.7557860° N, 37.6176330° W``."""

from __future__ import annotations

import re

from globe_coords.models.notation import Notation
from globe_coords.parsers._segments import (
    DECIMAL_DIGITS,
    UnitNotationParser,
    apply_aliases,
    degree_aliases,
)


class DdCoordinateParser(UnitNotationParser):
    """Reads decimal degrees followed by the degree glyph."""

    notation = Notation.DD
    format_name = "dd"

    def segment_pattern(self) -> str:
        return rf"\d{{1,3}}(?:{DECIMAL_DIGITS})?{re.escape(self.symbols.degree)}"

    def delimiters(self) -> list[str]:
        return [self.symbols.degree]

    def normalize_glyphs(self, text: str) -> str:
        return apply_aliases(text, degree_aliases(self.symbols))

    def parse_segment(self, segment: str) -> float:
        negative, unsigned = self.split_sign(segment)
        degrees = float(unsigned.replace(self.symbols.degree, ""))
        return -degrees if negative else degrees
