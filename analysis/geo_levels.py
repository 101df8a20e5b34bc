"""Geographic filter parsing.

Filters are strings of the form `type:code` (for example `country:US` or
`continent:3`). They select the geographic level a page is scoped to. Parsing
never fails: anything that is not a recognised `type:code` pair falls back to
the `world` level.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class GeoLevel(StrEnum):
    """Geographic level a filter scopes a page to, broadest first."""

    world = "world"
    continent = "continent"
    region = "region"
    country = "country"
    state = "state"


GEO_LEVELS: tuple[GeoLevel, ...] = tuple(GeoLevel)

_FILTER_TYPES: dict[str, GeoLevel] = {
    "continent": GeoLevel.continent,
    "region": GeoLevel.region,
    "country": GeoLevel.country,
    "state": GeoLevel.state,
}


@dataclass(frozen=True, slots=True)
class GeoFilter:
    """A parsed `type:code` filter.

    Attributes:
        type: Raw type segment before the first colon.
        code: Everything after the first colon.
    """

    type: str
    code: str


def parse_filter(value: str | None) -> GeoFilter | None:
    """Split a filter string on its first colon.

    Args:
        value: Raw filter string, typically the `filter` query parameter.

    Returns:
        The parsed filter, or None when the value is empty or does not split
        into two non-empty parts.
    """

    if not value:
        return None
    type_, sep, code = value.partition(":")
    if not sep or not type_ or not code:
        return None
    return GeoFilter(type=type_, code=code)


def resolve_level(value: str | None) -> GeoLevel:
    """Return the geographic level selected by a filter string.

    Args:
        value: Raw filter string (may be None or empty).

    Returns:
        The matching GeoLevel, or `GeoLevel.world` for empty, malformed, or
        unknown filters.
    """

    parsed = parse_filter(value)
    if parsed is None:
        return GeoLevel.world
    return _FILTER_TYPES.get(parsed.type, GeoLevel.world)
