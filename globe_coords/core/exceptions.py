"""Unified exception taxonomy for coordinate parsing and formatting.

Every domain exception inherits from ``GeoCoordinateError`` and carries
structured context fields so callers can tell data problems apart from
programming errors without string matching.

Taxonomy categories
-------------------
- ``CoordinateParseError``: text matches no supported notation.
- ``CoordinateValueError``: a value type was built from invalid data.
- ``CoordinateRangeError``: a numeric component lies outside [-360, 360].
- ``ConfigurationError``: unknown notation or unusable options.
  ``InvalidNotationError`` and ``core.config.ConfigValidationError``
  refine it; ``InvalidGlobeError`` is both a configuration and a value
  error.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging or API responses.
"""

from __future__ import annotations


class GeoCoordinateError(Exception):
    """Base exception for all coordinate-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"parse"``, ``"value"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"COORDINATE_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, CoordinateParseError):
            return "parse"
        if isinstance(self, ConfigurationError):
            return "configuration"
        if isinstance(self, CoordinateValueError):
            return "validation"
        return "unknown"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Parse failures
# ---------------------------------------------------------------------------


class CoordinateParseError(GeoCoordinateError):
    """Raised when a coordinate string does not match a notation's grammar.

    Attributes:
        value: The offending input (as received, before cleaning).
        notation: Name of the notation (or orchestrator) that rejected it.
    """

    default_stage = "parse"
    default_code = "COORDINATE_PARSE_FAILED"

    def __init__(self, message: str = "", value: object = None, notation: str = "") -> None:
        self.value = value
        self.notation = notation
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["value"] = self.value if isinstance(self.value, str) else repr(self.value)
        payload["notation"] = self.notation
        return payload


# ---------------------------------------------------------------------------
# Value construction failures
# ---------------------------------------------------------------------------


class CoordinateValueError(ValueError, GeoCoordinateError):
    """Raised when a value type is constructed from invalid data."""

    default_stage = "value"
    default_code = "COORDINATE_VALUE_INVALID"

    def __init__(self, message: str = "", **kwargs: str) -> None:
        GeoCoordinateError.__init__(self, message, **kwargs)


class CoordinateRangeError(CoordinateValueError):
    """Raised when a degree or precision value lies outside [-360, 360].

    Attributes:
        field_name: The field that violated the range invariant.
        value: The invalid value.
    """

    default_code = "COORDINATE_OUT_OF_RANGE"

    def __init__(self, field_name: str, value: object) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name} needs to be between -360 and 360, got {value!r}")


# ---------------------------------------------------------------------------
# Configuration failures
# ---------------------------------------------------------------------------


class ConfigurationError(GeoCoordinateError):
    """Programming error: options that no parser or formatter can honour."""

    default_stage = "config"
    default_code = "CONFIGURATION_INVALID"


class InvalidNotationError(ConfigurationError):
    """Raised when a notation name is not one of float, dms, dm or dd."""

    default_code = "NOTATION_UNKNOWN"

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Invalid coordinate notation {name!r}")


class InvalidGlobeError(CoordinateValueError, ConfigurationError):
    """Raised when a globe identifier is given but empty."""

    default_stage = "config"
    default_code = "GLOBE_INVALID"
