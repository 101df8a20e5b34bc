"""Cached loaders for the geographic reference tables.

Each level is cached independently so a single stale entry never forces the
other three levels to reload.
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.db.models import F

from analysis.hierarchy import GeographicHierarchy, nest_hierarchy
from core.caching import remember
from geography.models import Continent, Country, Region, State
from geography.routers import geography_alias

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "geographic_areas_"
DEFAULT_TTL_SECONDS = 86400

Rows = list[dict[str, Any]]


def _ttl() -> int:
    return int(getattr(settings, "GEOGRAPHY_CACHE_TTL_SECONDS", DEFAULT_TTL_SECONDS))


def _query_continents() -> Rows:
    logger.debug("Loading continents from %s", geography_alias())
    return list(Continent.objects.using(geography_alias()).order_by("name").values("id", "name"))


def _query_regions() -> Rows:
    logger.debug("Loading regions from %s", geography_alias())
    return list(
        Region.objects.using(geography_alias())
        .annotate(continent_name=F("continent__name"))
        .order_by("continent__name", "name")
        .values("id", "name", "continent_id", "continent_name")
    )


def _query_countries() -> Rows:
    logger.debug("Loading countries from %s", geography_alias())
    return list(
        Country.objects.using(geography_alias())
        .api_visible()
        .annotate(region_name=F("region__name"), continent_id=F("region__continent_id"))
        .order_by("name")
        .values(
            "id",
            "name",
            "alpha_2_code",
            "alpha_3_code",
            "region_id",
            "region_name",
            "continent_id",
        )
    )


def _query_states() -> Rows:
    logger.debug("Loading states from %s", geography_alias())
    return list(
        State.objects.using(geography_alias())
        .annotate(country_name=F("country__name"), country_code=F("country__alpha_2_code"))
        .order_by("country__name", "name")
        .values("id", "name", "country_id", "country_name", "country_code")
    )


def load_continents() -> Rows:
    """Return continent rows, cached."""

    return remember(f"{CACHE_KEY_PREFIX}continents", _ttl(), _query_continents)


def load_regions() -> Rows:
    """Return region rows with their continent name, cached."""

    return remember(f"{CACHE_KEY_PREFIX}regions", _ttl(), _query_regions)


def load_countries() -> Rows:
    """Return externally displayable country rows with region details, cached."""

    return remember(f"{CACHE_KEY_PREFIX}countries", _ttl(), _query_countries)


def load_states() -> Rows:
    """Return state rows with their country name and code, cached."""

    return remember(f"{CACHE_KEY_PREFIX}states", _ttl(), _query_states)


def build_geographic_hierarchy() -> GeographicHierarchy:
    """Load all four levels and nest them into a continent-rooted tree."""

    return nest_hierarchy(
        continents=load_continents(),
        regions=load_regions(),
        countries=load_countries(),
        states=load_states(),
    )
