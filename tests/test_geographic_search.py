"""Integration tests for geographic area search and filter details."""

from __future__ import annotations

import pytest
from django.core.cache.backends.base import CacheKeyWarning

from analysis.geo_levels import GeoLevel
from geography.models import Continent
from geography.search import InvalidFilterError, _cache_key, filter_details, search_areas

pytestmark = pytest.mark.integration


@pytest.mark.django_db
def test_search_requires_two_characters(geography, django_assert_num_queries) -> None:
    """Short queries return nothing without touching the database."""

    with django_assert_num_queries(0):
        assert search_areas("") == []
        assert search_areas("e") == []
        assert search_areas(" e ") == []


@pytest.mark.django_db
def test_search_matches_every_level_in_order(geography) -> None:
    """Continents come first, then regions, countries and states."""

    results = search_areas("eur")
    assert [(match.type, match.name) for match in results] == [
        (GeoLevel.continent, "Europe"),
        (GeoLevel.region, "Northern Europe"),
        (GeoLevel.region, "Western Europe"),
    ]
    assert results[0].filter == f"continent:{geography.europe.id}"
    assert results[1].hierarchy == ("Europe", "Northern Europe")


@pytest.mark.django_db
def test_search_country_by_iso_code(geography) -> None:
    """Countries match by alpha-3 code and filter by alpha-2 code."""

    results = search_areas("gbr")
    assert len(results) == 1
    match = results[0]
    assert match.type == GeoLevel.country
    assert match.filter == "country:GB"
    assert match.code == "GB"
    assert match.hierarchy == ("Europe", "Northern Europe", "United Kingdom")
    assert match.as_json()["code"] == "GB"


@pytest.mark.django_db
def test_search_state_display_names_country(geography) -> None:
    """State matches show their country and filter by state id."""

    results = search_areas("bavaria")
    assert [match.as_json() for match in results] == [
        {
            "type": "state",
            "id": geography.bavaria.id,
            "name": "Bavaria",
            "display": "Bavaria, Germany (State/Province)",
            "filter": f"state:{geography.bavaria.id}",
            "hierarchy": ["Germany", "Bavaria"],
        }
    ]


@pytest.mark.django_db
def test_search_results_are_cached_case_insensitively(geography, django_assert_num_queries) -> None:
    """Repeat searches differing only in case are served from the cache."""

    first = search_areas("Japan")
    with django_assert_num_queries(0):
        assert search_areas("JAPAN") == first


def test_filter_details_world_for_empty_filter() -> None:
    """No filter describes the whole world."""

    assert filter_details(None) == {"level": "world", "name": "World", "filter": None}
    assert filter_details("") == {"level": "world", "name": "World", "filter": None}


def test_filter_details_rejects_malformed_filter() -> None:
    """Filters that are not `type:code` raise InvalidFilterError."""

    with pytest.raises(InvalidFilterError):
        filter_details("country")


@pytest.mark.django_db
def test_filter_details_country_by_any_code(geography) -> None:
    """Countries resolve by alpha-2, alpha-3, or numeric id."""

    expected = {
        "level": "country",
        "name": "Germany",
        "id": geography.germany.id,
        "code": "DE",
        "parent": "Western Europe",
    }
    assert filter_details("country:de") == expected
    assert filter_details("country:DEU") == expected
    assert filter_details(f"country:{geography.germany.id}") == expected


@pytest.mark.django_db
def test_filter_details_other_levels(geography) -> None:
    """Continent, region and state filters resolve by id."""

    assert filter_details(f"continent:{geography.asia.id}") == {
        "level": "continent",
        "name": "Asia",
        "id": geography.asia.id,
    }
    assert filter_details(f"region:{geography.eastern_asia.id}")["parent"] == "Asia"
    assert filter_details(f"state:{geography.tokyo.id}")["parent"] == "Japan"


@pytest.mark.django_db
def test_filter_details_unknown_area_is_none(geography) -> None:
    """Unknown ids and unknown filter types describe nothing."""

    assert filter_details("state:999999") is None
    assert filter_details("planet:1") is None
    assert filter_details("continent:abc") is None


@pytest.mark.django_db
def test_filter_details_are_cached(geography) -> None:
    """Details are cached per filter string."""

    continent = Continent.objects.create(name="Oceania")
    filter_string = f"continent:{continent.id}"
    assert filter_details(filter_string)["name"] == "Oceania"

    Continent.objects.filter(pk=continent.pk).update(name="Australia")
    assert filter_details(filter_string)["name"] == "Oceania"


@pytest.mark.django_db
def test_filter_details_empty_code_matches_nothing(geography) -> None:
    """A filter with a separator but no code is well-formed and finds no area."""

    assert filter_details("country:") is None
    assert filter_details(":DE") is None


def test_cache_keys_stay_backend_safe_for_long_input() -> None:
    """Keys are bounded and free of whitespace whatever the request sends."""

    key = _cache_key("geographic_search", "a" * 400 + "\t\n x")
    assert key.startswith("geographic_search:")
    assert len(key) <= 250
    assert not any(char.isspace() for char in key)
    assert _cache_key("filter_details", "country:  DE") == _cache_key("filter_details", "country: DE")


@pytest.mark.django_db
def test_long_queries_do_not_trigger_cache_key_warnings(geography, recwarn) -> None:
    """Oversized search and filter input is cached without key warnings."""

    assert search_areas("a" * 400) == []
    assert filter_details("country:" + "x" * 400) is None
    assert not [warning for warning in recwarn if issubclass(warning.category, CacheKeyWarning)]
