"""Coordinate notations and the glyphs used to write them.

- ``Notation``: the closed set of supported notations, each with the
  priority the parser tries it in.
- ``NotationSymbols``: direction, unit and separator glyphs shared by the
  parsers and the formatter.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from globe_coords.core.constants import (
    DEFAULT_DEGREE_SYMBOL,
    DEFAULT_EAST_SYMBOL,
    DEFAULT_MINUTE_SYMBOL,
    DEFAULT_NORTH_SYMBOL,
    DEFAULT_SECOND_SYMBOL,
    DEFAULT_SEPARATOR_SYMBOL,
    DEFAULT_SOUTH_SYMBOL,
    DEFAULT_WEST_SYMBOL,
)
from globe_coords.core.exceptions import InvalidNotationError


class Notation(enum.Enum):
    """Textual convention for writing a degree value.

    Values:
        FLOAT: ``55.7557860``
        DMS:   ``55° 45' 20.8296"``
        DM:    ``55° 45.35'``
        DD:    ``55.7557860°``
    """

    FLOAT = "float"
    DMS = "dms"
    DM = "dm"
    DD = "dd"

    @property
    def priority(self) -> int:
        """Order in which the parser tries this notation (lowest first).

        DMS comes before DM and DD so that a string carrying seconds is
        never claimed by a notation that merely tolerates a prefix of it.
        """
        return _PRIORITY[self]

    @classmethod
    def from_name(cls, name: Notation | str) -> Notation:
        """Resolve a notation from its value (``"dms"``) or itself.

        Raises:
            InvalidNotationError: If *name* is not a known notation.
        """
        if isinstance(name, Notation):
            return name
        if isinstance(name, str):
            try:
                return cls(name.strip().lower())
            except ValueError:
                pass
        raise InvalidNotationError(name)

    @classmethod
    def by_priority(cls) -> list[Notation]:
        """Return all notations in parser priority order."""
        return sorted(cls, key=lambda notation: notation.priority)


_PRIORITY: dict[Notation, int] = {
    Notation.FLOAT: 0,
    Notation.DMS: 1,
    Notation.DM: 2,
    Notation.DD: 3,
}


@dataclass(frozen=True, slots=True)
class NotationSymbols:
    """Glyphs used to read and write coordinates.

    Attributes:
        north: Marks a positive latitude in directional notation.
        east: Marks a positive longitude in directional notation.
        south: Marks a negative latitude in directional notation.
        west: Marks a negative longitude in directional notation.
        degree: Degree unit glyph.
        minute: Arc-minute unit glyph.
        second: Arc-second unit glyph.
        separator: Joins latitude and longitude.
    """

    north: str = DEFAULT_NORTH_SYMBOL
    east: str = DEFAULT_EAST_SYMBOL
    south: str = DEFAULT_SOUTH_SYMBOL
    west: str = DEFAULT_WEST_SYMBOL
    degree: str = DEFAULT_DEGREE_SYMBOL
    minute: str = DEFAULT_MINUTE_SYMBOL
    second: str = DEFAULT_SECOND_SYMBOL
    separator: str = DEFAULT_SEPARATOR_SYMBOL

    @property
    def latitude_directions(self) -> tuple[str, str]:
        """``(positive, negative)`` glyphs for latitude."""
        return (self.north, self.south)

    @property
    def longitude_directions(self) -> tuple[str, str]:
        """``(positive, negative)`` glyphs for longitude."""
        return (self.east, self.west)

    def as_dict(self) -> dict[str, str]:
        """Return the glyphs keyed by field name."""
        return {
            "north": self.north,
            "east": self.east,
            "south": self.south,
            "west": self.west,
            "degree": self.degree,
            "minute": self.minute,
            "second": self.second,
            "separator": self.separator,
        }
