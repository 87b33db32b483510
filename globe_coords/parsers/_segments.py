"""Shared segmentation logic for the notation parsers.

Every notation parser runs the same pipeline:

1. **Glyph normalisation**: HTML entities and Unicode primes become the
   configured degree/minute/second glyphs.
2. **Cleaning**: characters outside printable ASCII (plus the configured
   glyphs) are dropped and the text is trimmed.
3. **Splitting**: the text is cut into a latitude and a longitude
   segment, on the separator when possible, heuristically otherwise.
4. **Validation**: each segment must match the notation's grammar, with
   an N/S (latitude) or E/W (longitude) glyph on either side, or a
   leading minus sign. Both segments must use the same style.
5. **Conversion**: each segment becomes a signed float degree value.

Notation parsers subclass ``NotationParser`` (or ``UnitNotationParser``
for the notations written with a degree glyph) and supply the grammar,
the delimiters and the conversion.
"""

from __future__ import annotations

import abc
import enum
import re
from typing import ClassVar

from globe_coords.core.exceptions import CoordinateParseError
from globe_coords.models.notation import Notation, NotationSymbols
from globe_coords.models.values import LatLong

DECIMAL_DIGITS = r"\.\d{1,20}"
"""Fractional part of a number: a point followed by up to 20 digits."""

_DEGREE_SIGN = "°"


class SegmentStyle(enum.Enum):
    """How a segment expresses its sign."""

    DIRECTIONAL = "directional"
    SIGNED = "signed"


# ---------------------------------------------------------------------------
# Glyph aliases
# ---------------------------------------------------------------------------


def degree_aliases(symbols: NotationSymbols) -> list[tuple[tuple[str, ...], str]]:
    """Spellings that stand for the degree glyph."""
    return [(("&#176;", "&deg;"), symbols.degree)]


def minute_aliases(symbols: NotationSymbols) -> list[tuple[tuple[str, ...], str]]:
    """Spellings that stand for the minute glyph."""
    return [(("&#8242;", "&prime;", "&acute;", "&#180;", "´", "′"), symbols.minute)]


def second_aliases(symbols: NotationSymbols) -> list[tuple[tuple[str, ...], str]]:
    """Spellings that stand for the second glyph.

    Doubled minute glyphs are included, so these must be applied before
    ``minute_aliases``.
    """
    doubled = symbols.minute + symbols.minute
    return [(("&#8243;", "&Prime;", doubled, "´´", "′′", "″"), symbols.second)]


def apply_aliases(text: str, aliases: list[tuple[tuple[str, ...], str]]) -> str:
    """Replace every alias in *text* with its glyph, in list order."""
    for spellings, glyph in aliases:
        for spelling in spellings:
            text = text.replace(spelling, glyph)
    return text


# ---------------------------------------------------------------------------
# Base parser
# ---------------------------------------------------------------------------


class NotationParser(abc.ABC):
    """Parses one coordinate notation into a ``LatLong``.

    Instances hold only compiled patterns derived from the symbols passed
    at construction, so they are safe to share between threads.
    """

    notation: ClassVar[Notation]
    format_name: ClassVar[str]

    #: Whether spaces carry no meaning and are removed during cleaning.
    strip_spaces: ClassVar[bool] = True

    def __init__(self, symbols: NotationSymbols | None = None) -> None:
        self._symbols = symbols or NotationSymbols()
        self._allowed_extra = frozenset(
            _DEGREE_SIGN + "".join(self._symbols.as_dict().values())
        )
        body = self.segment_pattern()
        self._segment_patterns = {
            index: self._compile_segment_patterns(body, directions)
            for index, directions in enumerate(
                (self._symbols.latitude_directions, self._symbols.longitude_directions)
            )
        }

    @property
    def symbols(self) -> NotationSymbols:
        """Return the glyphs this parser reads (read-only)."""
        return self._symbols

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def segment_pattern(self) -> str:
        """Regex for one unsigned, non-directional segment."""

    @abc.abstractmethod
    def split_without_separator(self, text: str) -> list[str]:
        """Split *text* that does not contain the separator exactly once."""

    @abc.abstractmethod
    def parse_segment(self, segment: str) -> float:
        """Convert a validated segment into signed degrees."""

    def normalize_glyphs(self, text: str) -> str:
        """Map alternative glyph spellings onto the configured glyphs."""
        return text

    def accepts_segments(self, segments: list[str]) -> bool:
        """Extra whole-coordinate check after per-segment validation."""
        return True

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def parse(self, value: object) -> LatLong:
        """Parse *value* into a ``LatLong``.

        Raises:
            CoordinateParseError: If *value* is not a string or does not
                follow this notation.
            CoordinateRangeError: If a parsed component is outside
                [-360, 360].
        """
        if not isinstance(value, str):
            raise CoordinateParseError("Not a string", value, self.format_name)

        text = self.clean(self.normalize_glyphs(value))
        segments = self.split(text)

        if len(segments) != 2 or not self.are_valid_segments(segments):
            raise CoordinateParseError(
                "Not a valid geographical coordinate", value, self.format_name
            )

        latitude, longitude = segments
        return LatLong(self.parse_segment(latitude), self.parse_segment(longitude))

    def clean(self, text: str) -> str:
        """Drop control and non-ASCII characters, then trim.

        Configured glyphs and the degree sign survive. Inner spaces are
        kept unless ``strip_spaces`` is set.
        """
        kept = "".join(
            char for char in text if 32 <= ord(char) < 127 or char in self._allowed_extra
        ).strip()
        if self.strip_spaces:
            kept = kept.replace(" ", "")
        return kept

    def split(self, text: str) -> list[str]:
        """Split *text* into latitude and longitude segments."""
        segments = text.split(self._symbols.separator)
        if len(segments) != 2:
            segments = self.split_without_separator(text)
        return segments

    def are_valid_segments(self, segments: list[str]) -> bool:
        """Check both segments follow the grammar in the same sign style."""
        styles = [self.segment_style(index, segment) for index, segment in enumerate(segments)]
        if None in styles or styles[0] != styles[1]:
            return False
        return self.accepts_segments(segments)

    def segment_style(self, index: int, segment: str) -> SegmentStyle | None:
        """Return how segment *index* (0 latitude, 1 longitude) is signed.

        ``None`` means the segment does not follow the grammar at all.
        """
        directional, signed = self._segment_patterns[index]
        segment = segment.replace(" ", "")
        if directional.fullmatch(segment):
            return SegmentStyle.DIRECTIONAL
        if signed.fullmatch(segment):
            return SegmentStyle.SIGNED
        return None

    def resolve_direction(self, segment: str) -> str:
        """Turn a leading or trailing direction glyph into a sign.

        ``"5.5S"`` becomes ``"-5.5"``, ``"N5.5"`` becomes ``"5.5"``; a
        segment without a glyph is returned unchanged.
        """
        symbols = self._symbols
        negative = (symbols.south, symbols.west)
        for direction in (symbols.north, symbols.east, symbols.south, symbols.west):
            escaped = re.escape(direction)
            match = re.fullmatch(
                f"({escaped}|)([^{escaped}]+)({escaped}|)", segment, re.IGNORECASE
            )
            if match is None or not (match.group(1) or match.group(3)):
                continue
            core = match.group(2)
            return f"-{core}" if direction in negative else core
        return segment

    @staticmethod
    def _compile_segment_patterns(
        body: str, directions: tuple[str, str]
    ) -> tuple[re.Pattern[str], re.Pattern[str]]:
        direction = "(?:" + "|".join(re.escape(glyph) for glyph in directions) + ")"
        directional = re.compile(
            f"(?:(?:{body}){direction}|{direction}(?:{body}))", re.IGNORECASE
        )
        signed = re.compile(f"-?(?:{body})", re.IGNORECASE)
        return directional, signed


# ---------------------------------------------------------------------------
# Notations written with unit glyphs (DD, DM, DMS)
# ---------------------------------------------------------------------------


class UnitNotationParser(NotationParser):
    """Base for notations whose segments end in a unit glyph.

    Without a separator, the text is split after the first N/S glyph, or
    before the first E/W glyph when the text starts with N/S, or else after
    the first occurrence of the notation's closing unit glyph.
    """

    @abc.abstractmethod
    def delimiters(self) -> list[str]:
        """Unit glyphs after which a latitude segment may end."""

    def split_without_separator(self, text: str) -> list[str]:
        symbols = self._symbols
        north_south = [symbols.north, symbols.south]
        east_west = [symbols.east, symbols.west]

        if any(text.startswith(glyph) for glyph in north_south):
            candidates = [*east_west, *self.delimiters()]
        else:
            candidates = [*north_south, *self.delimiters()]

        for delimiter in candidates:
            position = text.find(delimiter)
            if position == -1:
                continue
            cut = position if delimiter in east_west else position + len(delimiter)
            return [text[:cut], text[cut:]]

        return [text]

    def split_sign(self, segment: str) -> tuple[bool, str]:
        """Resolve the direction and return ``(is_negative, unsigned_text)``."""
        segment = self.resolve_direction(segment)
        if segment.startswith("-"):
            return True, segment[1:]
        return False, segment

    def degree_split(self, segment: str) -> tuple[float, str]:
        """Split ``"12°34'"`` into ``(12.0, "34'")``.

        Raises:
            CoordinateParseError: If the degree glyph is missing.
        """
        degree = self._symbols.degree
        position = segment.find(degree)
        if position == -1:
            raise CoordinateParseError(
                f"Did not find degree symbol ({degree})", segment, self.format_name
            )
        return float(segment[:position]), segment[position + len(degree) :]
