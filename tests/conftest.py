"""Shared pytest fixtures for the globe_coords test suite."""

from __future__ import annotations

import pytest

from globe_coords.core.config import CoordinateOptions
from globe_coords.formatters.latlong_formatter import LatLongFormatter
from globe_coords.models.notation import Notation
from globe_coords.parsers.coordinate_parser import GlobeCoordinateParser, LatLongParser
from globe_coords.utils.globe_math import GlobeMath

# ---------------------------------------------------------------------------
# Option fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def default_options() -> CoordinateOptions:
    """Options with every default: float notation, signed, fully spaced."""
    return CoordinateOptions()


@pytest.fixture()
def directional_dm_options() -> CoordinateOptions:
    """Directional decimal-minute output at arc-minute precision."""
    return CoordinateOptions(notation=Notation.DM, directional=True, precision=1 / 60)


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def globe_parser() -> GlobeCoordinateParser:
    """A globe coordinate parser with default options."""
    return GlobeCoordinateParser()


@pytest.fixture()
def lat_long_parser() -> LatLongParser:
    """A lat/long parser with default options."""
    return LatLongParser()


@pytest.fixture()
def formatter() -> LatLongFormatter:
    """A float formatter with default options."""
    return LatLongFormatter()


@pytest.fixture()
def globe_math() -> GlobeMath:
    return GlobeMath()
