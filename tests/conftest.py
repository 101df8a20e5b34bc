"""Pytest fixtures shared across unit and Django integration tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pytest
from django.core.cache import cache

from geography.models import Continent, Country, Region, State


@pytest.fixture(autouse=True)
def _clear_cache():
    """Start and finish every test with an empty cache."""

    cache.clear()
    yield
    cache.clear()


@dataclass(frozen=True)
class GeographySample:
    """Handles to the rows created by the `geography` fixture."""

    europe: Continent
    asia: Continent
    western_europe: Region
    northern_europe: Region
    eastern_asia: Region
    france: Country
    germany: Country
    united_kingdom: Country
    japan: Country
    hidden: Country
    bavaria: State
    berlin: State
    england: State
    scotland: State
    tokyo: State
    hidden_state: State


@pytest.fixture
def geography(db) -> GeographySample:
    """Create a small two-continent hierarchy with one hidden country."""

    europe = Continent.objects.create(name="Europe")
    asia = Continent.objects.create(name="Asia")

    western_europe = Region.objects.create(name="Western Europe", continent=europe)
    northern_europe = Region.objects.create(name="Northern Europe", continent=europe)
    eastern_asia = Region.objects.create(name="Eastern Asia", continent=asia)

    germany = Country.objects.create(name="Germany", alpha_2_code="DE", alpha_3_code="DEU", region=western_europe)
    france = Country.objects.create(name="France", alpha_2_code="FR", alpha_3_code="FRA", region=western_europe)
    united_kingdom = Country.objects.create(
        name="United Kingdom",
        alpha_2_code="GB",
        alpha_3_code="GBR",
        region=northern_europe,
    )
    japan = Country.objects.create(name="Japan", alpha_2_code="JP", alpha_3_code="JPN", region=eastern_asia)
    hidden = Country.objects.create(
        name="Hiddenland",
        alpha_2_code="HL",
        alpha_3_code="HLD",
        region=northern_europe,
        api_display=False,
    )

    berlin = State.objects.create(name="Berlin", country=germany)
    bavaria = State.objects.create(name="Bavaria", country=germany)
    scotland = State.objects.create(name="Scotland", country=united_kingdom)
    england = State.objects.create(name="England", country=united_kingdom)
    tokyo = State.objects.create(name="Tokyo", country=japan)
    hidden_state = State.objects.create(name="Hidden Province", country=hidden)

    return GeographySample(
        europe=europe,
        asia=asia,
        western_europe=western_europe,
        northern_europe=northern_europe,
        eastern_asia=eastern_asia,
        france=france,
        germany=germany,
        united_kingdom=united_kingdom,
        japan=japan,
        hidden=hidden,
        bavaria=bavaria,
        berlin=berlin,
        england=england,
        scotland=scotland,
        tokyo=tokyo,
        hidden_state=hidden_state,
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django views, the database, or the cache.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
