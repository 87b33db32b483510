"""Parser and formatter options, optionally loaded from environment variables.

Every parser and formatter receives a ``CoordinateOptions`` explicitly;
there is no module-level mutable state. Defaults reproduce the usual
``55.7557860, 37.6176330`` style with N/E/S/W and ``° ' "`` glyphs.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a glyph is empty,
    a spacing flag is unknown, the precision is outside (0, 360] or the
    globe is empty. Unknown notation names raise ``InvalidNotationError``.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import os
from dataclasses import dataclass, field

from globe_coords.core.constants import ALL_SPACING_FLAGS, GLOBE_EARTH, MAX_DEGREES
from globe_coords.core.exceptions import ConfigurationError
from globe_coords.models.notation import Notation, NotationSymbols

logger = logging.getLogger("globe_coords.core.config")

ENV_PREFIX = "GEO_COORDS_"

_SYMBOL_FIELDS = ("north", "east", "south", "west", "degree", "minute", "second")


class ConfigValidationError(ConfigurationError):
    """Raised when an option value is out of its valid range.

    Attributes:
        key: The option (or environment variable) that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class CoordinateOptions:
    """Immutable options shared by the parsers and formatters.

    Attributes:
        symbols: Direction, unit and separator glyphs.
        notation: Output notation used by the formatters.
        directional: Write N/E/S/W glyphs instead of a minus sign.
        spacing: Which of ``latlong``, ``direction`` and ``coordparts``
            get a space in formatted output.
        precision: Parser: overrides detected precision. Formatter: used by
            ``LatLongFormatter.format``. ``None`` means detect / arc-second.
        globe: Globe identifier attached to parsed coordinates.
    """

    symbols: NotationSymbols = field(default_factory=NotationSymbols)
    notation: Notation = Notation.FLOAT
    directional: bool = False
    spacing: frozenset[str] = ALL_SPACING_FLAGS
    precision: float | None = None
    globe: str = GLOBE_EARTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "notation", Notation.from_name(self.notation))
        object.__setattr__(self, "spacing", frozenset(self.spacing))
        _validate(self)

    @classmethod
    def from_env(cls) -> CoordinateOptions:
        """Load and validate options from ``GEO_COORDS_*`` variables.

        Recognised variables: ``NOTATION``, ``DIRECTIONAL``, ``SEPARATOR``,
        ``SPACING`` (comma-separated flags, empty for none), ``PRECISION``,
        ``GLOBE`` and ``<NORTH|EAST|SOUTH|WEST|DEGREE|MINUTE|SECOND>_SYMBOL``.

        Raises:
            ConfigValidationError: If a value is out of range or empty.
            InvalidNotationError: If ``GEO_COORDS_NOTATION`` is unknown.
            ValueError: If ``GEO_COORDS_PRECISION`` cannot be parsed.
        """
        defaults = NotationSymbols()
        glyphs = {
            name: os.getenv(f"{ENV_PREFIX}{name.upper()}_SYMBOL", getattr(defaults, name))
            for name in _SYMBOL_FIELDS
        }
        glyphs["separator"] = os.getenv(f"{ENV_PREFIX}SEPARATOR", defaults.separator)

        spacing_raw = os.getenv(f"{ENV_PREFIX}SPACING")
        spacing = (
            ALL_SPACING_FLAGS
            if spacing_raw is None
            else frozenset(flag.strip() for flag in spacing_raw.split(",") if flag.strip())
        )

        precision_raw = os.getenv(f"{ENV_PREFIX}PRECISION", "")
        precision = float(precision_raw) if precision_raw.strip() else None

        overridden = sorted(key for key in os.environ if key.startswith(ENV_PREFIX))
        if overridden:
            logger.debug("Coordinate options from environment: %s", ", ".join(overridden))

        return cls(
            symbols=NotationSymbols(**glyphs),
            notation=Notation.from_name(os.getenv(f"{ENV_PREFIX}NOTATION", "float")),
            directional=_parse_bool(os.getenv(f"{ENV_PREFIX}DIRECTIONAL", "false")),
            spacing=spacing,
            precision=precision,
            globe=os.getenv(f"{ENV_PREFIX}GLOBE", GLOBE_EARTH),
        )

    def with_overrides(self, **changes: object) -> CoordinateOptions:
        """Return a validated copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off", ""}:
        return False
    raise ConfigValidationError(f"{ENV_PREFIX}DIRECTIONAL", raw, "must be a boolean")


def _validate(options: CoordinateOptions) -> None:
    """Validate option values.  Raises ``ConfigValidationError``."""
    for name, glyph in options.symbols.as_dict().items():
        if not isinstance(glyph, str) or not glyph:
            raise ConfigValidationError(f"symbols.{name}", glyph, "must not be empty")

    unknown = options.spacing - ALL_SPACING_FLAGS
    if unknown:
        raise ConfigValidationError(
            "spacing",
            sorted(unknown),
            f"must only contain {', '.join(sorted(ALL_SPACING_FLAGS))}",
        )

    if options.precision is not None and not (
        math.isfinite(options.precision) and 0 < options.precision <= MAX_DEGREES
    ):
        raise ConfigValidationError(
            "precision",
            options.precision,
            "must be > 0 and <= 360 (degrees)",
        )

    if not isinstance(options.globe, str) or not options.globe:
        raise ConfigValidationError("globe", options.globe, "must not be empty")
