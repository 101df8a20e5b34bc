"""Unit tests for geographic filter parsing."""

from __future__ import annotations

import pytest

from analysis.geo_levels import GeoFilter, GeoLevel, parse_filter, resolve_level

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("filter_type", ["continent", "region", "country", "state"])
@pytest.mark.parametrize("code", ["1", "US", "810", "a:b"])
def test_resolve_level_maps_known_types(filter_type: str, code: str) -> None:
    """Every `<known type>:<code>` filter resolves to that type's level."""

    assert resolve_level(f"{filter_type}:{code}") == GeoLevel(filter_type)


@pytest.mark.parametrize(
    "value",
    [None, "", "country", "country:", ":US", "planet:3", "Country:US", "world:1", "  "],
)
def test_resolve_level_falls_back_to_world(value: str | None) -> None:
    """Empty, malformed, or unknown filters degrade to the world level."""

    assert resolve_level(value) is GeoLevel.world


def test_parse_filter_splits_on_first_colon_only() -> None:
    """Additional colons stay in the code segment."""

    assert parse_filter("state:12:extra") == GeoFilter(type="state", code="12:extra")


def test_parse_filter_returns_none_for_missing_parts() -> None:
    """Filters without both a type and a code do not parse."""

    assert parse_filter("country:") is None
    assert parse_filter(":US") is None
    assert parse_filter("country") is None


def test_geo_levels_compare_equal_to_plain_strings() -> None:
    """Levels are string enums so templates and JSON can use them directly."""

    assert GeoLevel.country == "country"
    assert str(GeoLevel.world) == "world"
