"""Shared constants: single source of truth.

Centralises globe identifiers, default glyphs and value bounds that
parsers, formatters and the value types all rely on.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Globe identifiers (Wikidata entity IRIs)
# ---------------------------------------------------------------------------

GLOBE_EARTH: str = "http://www.wikidata.org/entity/Q2"
"""Default globe for every coordinate that does not name one."""

GLOBE_MOON: str = "http://www.wikidata.org/entity/Q405"
"""The Moon shares Earth's [-180, 180) longitude convention."""

# ---------------------------------------------------------------------------
# Value bounds
# ---------------------------------------------------------------------------

MIN_DEGREES = -360.0
MAX_DEGREES = 360.0

# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------

ARC_MINUTE = 1 / 60
ARC_SECOND = 1 / 3600

DEFAULT_PRECISION = ARC_SECOND
"""Used by the formatter when no usable precision is supplied."""

# ---------------------------------------------------------------------------
# Default glyphs
# ---------------------------------------------------------------------------

DEFAULT_NORTH_SYMBOL = "N"
DEFAULT_EAST_SYMBOL = "E"
DEFAULT_SOUTH_SYMBOL = "S"
DEFAULT_WEST_SYMBOL = "W"

DEFAULT_DEGREE_SYMBOL = "°"
DEFAULT_MINUTE_SYMBOL = "'"
DEFAULT_SECOND_SYMBOL = '"'

DEFAULT_SEPARATOR_SYMBOL = ","

# ---------------------------------------------------------------------------
# Formatter spacing flags
# ---------------------------------------------------------------------------

SPACE_LATLONG = "latlong"
"""Space after the separator between latitude and longitude."""

SPACE_DIRECTION = "direction"
"""Space between a value and its N/E/S/W glyph."""

SPACE_COORDPARTS = "coordparts"
"""Space between the degree, minute and second parts."""

ALL_SPACING_FLAGS = frozenset({SPACE_LATLONG, SPACE_DIRECTION, SPACE_COORDPARTS})
