"""Geographic area search and filter lookups for the filter picker.

Search results carry the exact `type:code` filter string that selects the area,
so the picker can hand it straight to dashboard and chart URLs.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Any

from django.conf import settings
from django.db.models import Q

from analysis.geo_levels import GeoLevel
from core.caching import remember
from geography.models import Continent, Country, Region, State
from geography.routers import geography_alias

MIN_QUERY_LENGTH = 2
MAX_RESULTS_PER_LEVEL = 50
DEFAULT_SEARCH_TTL_SECONDS = 3600


class InvalidFilterError(ValueError):
    """Raised when a filter string does not split into `type:code`."""


@dataclass(frozen=True, slots=True)
class AreaMatch:
    """A single search result row.

    Attributes:
        type: Geographic level of the match.
        id: Primary key of the matched row.
        name: Area name.
        display: Label shown in the picker.
        filter: Filter string selecting the area.
        hierarchy: Names from the top of the tree down to the area.
        code: Alpha-2 code, countries only.
    """

    type: GeoLevel
    id: int
    name: str
    display: str
    filter: str
    hierarchy: tuple[str, ...] = field(default_factory=tuple)
    code: str | None = None

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        payload: dict[str, object] = {
            "type": str(self.type),
            "id": self.id,
            "name": self.name,
            "display": self.display,
            "filter": self.filter,
            "hierarchy": list(self.hierarchy),
        }
        if self.code:
            payload["code"] = self.code
        return payload


def _search_ttl() -> int:
    return int(getattr(settings, "GEOGRAPHY_SEARCH_CACHE_TTL_SECONDS", DEFAULT_SEARCH_TTL_SECONDS))


def _cache_key(prefix: str, raw: str) -> str:
    """Build a backend-safe cache key from request input of any length."""

    normalised = " ".join(raw.split())
    return f"{prefix}:{hashlib.sha256(normalised.encode()).hexdigest()}"


def _run_search(query: str) -> list[AreaMatch]:
    alias = geography_alias()
    results: list[AreaMatch] = []

    for continent in Continent.objects.using(alias).filter(name__icontains=query).values("id", "name"):
        results.append(
            AreaMatch(
                type=GeoLevel.continent,
                id=continent["id"],
                name=continent["name"],
                display=f"{continent['name']} (Continent)",
                filter=f"continent:{continent['id']}",
                hierarchy=(continent["name"],),
            )
        )

    regions = (
        Region.objects.using(alias)
        .filter(name__icontains=query)
        .values("id", "name", "continent__name")
    )
    for region in regions:
        results.append(
            AreaMatch(
                type=GeoLevel.region,
                id=region["id"],
                name=region["name"],
                display=f"{region['name']} (Region)",
                filter=f"region:{region['id']}",
                hierarchy=(region["continent__name"], region["name"]),
            )
        )

    countries = (
        Country.objects.using(alias)
        .filter(
            Q(name__icontains=query) | Q(alpha_2_code__icontains=query) | Q(alpha_3_code__icontains=query)
        )
        .values("id", "name", "alpha_2_code", "region__name", "region__continent__name")[:MAX_RESULTS_PER_LEVEL]
    )
    for country in countries:
        results.append(
            AreaMatch(
                type=GeoLevel.country,
                id=country["id"],
                name=country["name"],
                display=f"{country['name']} (Country)",
                filter=f"country:{country['alpha_2_code']}",
                hierarchy=(country["region__continent__name"], country["region__name"], country["name"]),
                code=country["alpha_2_code"],
            )
        )

    states = (
        State.objects.using(alias)
        .filter(name__icontains=query)
        .values("id", "name", "country__name")[:MAX_RESULTS_PER_LEVEL]
    )
    for state in states:
        results.append(
            AreaMatch(
                type=GeoLevel.state,
                id=state["id"],
                name=state["name"],
                display=f"{state['name']}, {state['country__name']} (State/Province)",
                filter=f"state:{state['id']}",
                hierarchy=(state["country__name"], state["name"]),
            )
        )

    return results


def search_areas(query: str) -> list[AreaMatch]:
    """Search every geographic level by name (and countries by ISO code).

    Args:
        query: Free-text query. Queries shorter than two characters match nothing.

    Returns:
        Matches ordered continents, regions, countries, then states.
    """

    query = query.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []
    key = _cache_key("geographic_search", query.lower())
    return remember(key, _search_ttl(), lambda: _run_search(query))


WORLD_DETAILS: dict[str, Any] = {"level": "world", "name": "World", "filter": None}


def _lookup_filter(level: str, code: str) -> dict[str, Any] | None:
    alias = geography_alias()

    if level == GeoLevel.continent:
        continent = (
            Continent.objects.using(alias).filter(pk=code).values("id", "name").first()
            if code.isdigit()
            else None
        )
        if continent is None:
            return None
        return {"level": "continent", "name": continent["name"], "id": continent["id"]}

    if level == GeoLevel.region:
        region = (
            Region.objects.using(alias).filter(pk=code).values("id", "name", "continent__name").first()
            if code.isdigit()
            else None
        )
        if region is None:
            return None
        return {"level": "region", "name": region["name"], "id": region["id"], "parent": region["continent__name"]}

    if level == GeoLevel.country:
        countries = Country.objects.using(alias)
        if code.isdigit():
            countries = countries.filter(pk=code)
        elif len(code) == 2:
            countries = countries.filter(alpha_2_code=code.upper())
        elif len(code) == 3:
            countries = countries.filter(alpha_3_code=code.upper())
        else:
            return None
        country = countries.values("id", "name", "alpha_2_code", "region__name").first()
        if country is None:
            return None
        return {
            "level": "country",
            "name": country["name"],
            "id": country["id"],
            "code": country["alpha_2_code"],
            "parent": country["region__name"],
        }

    if level == GeoLevel.state:
        state = (
            State.objects.using(alias).filter(pk=code).values("id", "name", "country__name").first()
            if code.isdigit()
            else None
        )
        if state is None:
            return None
        return {"level": "state", "name": state["name"], "id": state["id"], "parent": state["country__name"]}

    return None


def filter_details(geo_filter: str | None) -> dict[str, Any] | None:
    """Describe the area a filter selects.

    Args:
        geo_filter: Raw `type:code` filter string.

    Returns:
        The world descriptor for an empty filter, a descriptor with `level`,
        `name`, `id` (and `code`/`parent` where known) for a matching area, or
        None when nothing matches.

    Raises:
        InvalidFilterError: When a non-empty filter has no `:` separator.
    """

    if not geo_filter:
        return dict(WORLD_DETAILS)
    level, separator, code = geo_filter.partition(":")
    if not separator:
        raise InvalidFilterError("Invalid filter format")
    return remember(
        _cache_key("filter_details", geo_filter),
        _search_ttl(),
        lambda: _lookup_filter(level, code),
    )
