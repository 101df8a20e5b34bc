"""Nest flat geographic rows into a continent → region → country → state tree.

Inputs are the row mappings returned by the geography loaders. Each child row
names its parent by id; rows whose parent is missing from the parent level are
dropped from the tree but still counted in the flat totals.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class CountryNode:
    """A country row and its states."""

    country: Row
    states: tuple[Row, ...]


@dataclass(frozen=True, slots=True)
class RegionNode:
    """A region row and its countries."""

    region: Row
    countries: tuple[CountryNode, ...]


@dataclass(frozen=True, slots=True)
class ContinentNode:
    """A continent row and its regions."""

    continent: Row
    regions: tuple[RegionNode, ...]


@dataclass(frozen=True, slots=True)
class HierarchyTotals:
    """Flat row counts per level, as loaded (not as nested)."""

    continents: int
    regions: int
    countries: int
    states: int


@dataclass(frozen=True, slots=True)
class GeographicHierarchy:
    """Nested geographic tree plus flat per-level totals."""

    continents: tuple[ContinentNode, ...]
    totals: HierarchyTotals


def _group_by(rows: Iterable[Row], key: str) -> dict[Any, list[Row]]:
    """Group rows by a parent id column, preserving input order per group."""

    grouped: dict[Any, list[Row]] = defaultdict(list)
    for row in rows:
        grouped[row[key]].append(row)
    return grouped


def nest_hierarchy(
    *,
    continents: Iterable[Row],
    regions: Iterable[Row],
    countries: Iterable[Row],
    states: Iterable[Row],
) -> GeographicHierarchy:
    """Build the nested tree from flat, pre-sorted rows.

    Args:
        continents: Rows with `id` and `name`.
        regions: Rows with `id`, `name` and `continent_id`.
        countries: Rows with `id`, `name` and `region_id`.
        states: Rows with `id`, `name` and `country_id`.

    Returns:
        GeographicHierarchy whose children keep the order they were loaded in.
    """

    continents = list(continents)
    regions = list(regions)
    countries = list(countries)
    states = list(states)

    regions_by_continent = _group_by(regions, "continent_id")
    countries_by_region = _group_by(countries, "region_id")
    states_by_country = _group_by(states, "country_id")

    tree = tuple(
        ContinentNode(
            continent=continent,
            regions=tuple(
                RegionNode(
                    region=region,
                    countries=tuple(
                        CountryNode(
                            country=country,
                            states=tuple(states_by_country.get(country["id"], ())),
                        )
                        for country in countries_by_region.get(region["id"], ())
                    ),
                )
                for region in regions_by_continent.get(continent["id"], ())
            ),
        )
        for continent in continents
    )

    return GeographicHierarchy(
        continents=tree,
        totals=HierarchyTotals(
            continents=len(continents),
            regions=len(regions),
            countries=len(countries),
            states=len(states),
        ),
    )
