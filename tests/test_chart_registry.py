"""Unit tests for the chart and dashboard registries and their validation."""

from __future__ import annotations

import pytest

from analysis.geo_levels import GeoLevel
from core.charting.configs import (
    CHART_DEFINITIONS,
    CHART_REGISTRY,
    DASHBOARD_DEFINITIONS,
    DASHBOARD_REGISTRY,
    category_label,
)
from core.charting.schema import ChartDefinition, ChartRegistry, DashboardDefinition
from core.charting.validator import (
    validate_chart_definition,
    validate_chart_definitions,
    validate_dashboard_definitions,
)

pytestmark = pytest.mark.unit


def _chart(chart_id: str, **overrides: object) -> ChartDefinition:
    values: dict[str, object] = {
        "id": chart_id,
        "name": chart_id.title(),
        "description": "",
        "category": "overview",
        "component": chart_id,
    }
    values.update(overrides)
    return ChartDefinition(**values)  # type: ignore[arg-type]


def test_builtin_registries_are_valid() -> None:
    """The shipped definitions pass validation."""

    assert validate_chart_definitions(CHART_DEFINITIONS).is_valid
    result = validate_dashboard_definitions(DASHBOARD_DEFINITIONS, chart_ids=[c.id for c in CHART_DEFINITIONS])
    assert result.is_valid, result.errors


def test_chart_registry_lookup_preserves_declaration_order() -> None:
    """`all()` lists charts in declaration order and `get()` finds by id."""

    assert [chart.id for chart in CHART_REGISTRY.all()] == [chart.id for chart in CHART_DEFINITIONS]
    assert CHART_REGISTRY.get("venue-map") is not None
    assert CHART_REGISTRY.get("venue-map").name == "Venue Map"
    assert CHART_REGISTRY.get("does-not-exist") is None
    assert "timeline" in CHART_REGISTRY


def test_chart_registry_categories_are_distinct_first_occurrence() -> None:
    """Categories keep the order in which charts first use them."""

    assert CHART_REGISTRY.categories() == ("overview", "map", "regional", "trends", "rankings", "analysis")


def test_chart_registry_by_category() -> None:
    """Category lookup returns only charts of that category."""

    rankings = CHART_REGISTRY.by_category("rankings")
    assert [chart.id for chart in rankings] == ["top-venues-by-courts", "top-venues", "top-courts", "outdoor-courts"]


def test_chart_registry_is_read_only() -> None:
    """Definitions and the underlying mapping cannot be mutated."""

    chart = CHART_REGISTRY.get("timeline")
    with pytest.raises(AttributeError):
        chart.name = "Changed"  # type: ignore[misc]
    with pytest.raises(TypeError):
        CHART_REGISTRY._by_id["timeline"] = chart  # type: ignore[index]


def test_chart_definition_defaults_to_world_level() -> None:
    """Charts that declare no levels are world-only."""

    assert _chart("plain").relevant_levels == (GeoLevel.world,)


def test_dashboard_registry_lookup() -> None:
    """Dashboards resolve by id and keep their chart order."""

    world = DASHBOARD_REGISTRY.get("world")
    assert world is not None
    assert world.route == "core:dashboard_world"
    assert world.charts[:2] == ("summary-stats", "venue-map")
    assert DASHBOARD_REGISTRY.get("nonexistent") is None
    assert [dashboard.id for dashboard in DASHBOARD_REGISTRY.all()] == ["world", "country", "venue-types"]


def test_validation_rejects_unknown_category_and_level() -> None:
    """Unsupported categories and levels are reported per chart."""

    result = validate_chart_definition(_chart("bad", category="weather", relevant_levels=("planet",)))
    assert result.is_valid is False
    assert any("category is not a supported value" in error for error in result.errors)
    assert any("unknown levels" in error for error in result.errors)


def test_validation_rejects_empty_levels() -> None:
    """A chart must be relevant somewhere."""

    result = validate_chart_definition(_chart("nowhere", relevant_levels=()))
    assert result.is_valid is False


def test_validation_rejects_duplicate_chart_ids() -> None:
    """Duplicate ids would silently shadow each other in the registry."""

    result = validate_chart_definitions([_chart("dup"), _chart("dup")])
    assert result.is_valid is False
    assert "Duplicate ChartDefinition id: 'dup'." in result.errors


def test_validation_rejects_dashboards_with_unknown_charts() -> None:
    """Dashboards may only reference registered charts."""

    dashboard = DashboardDefinition(
        id="broken",
        name="Broken",
        description="",
        route="core:dashboard_world",
        charts=("known", "missing"),
    )
    result = validate_dashboard_definitions([dashboard], chart_ids=["known"])
    assert result.is_valid is False
    assert any("missing" in error for error in result.errors)


def test_custom_registry_categories() -> None:
    """Registries built from arbitrary definitions derive their own categories."""

    registry = ChartRegistry([_chart("a", category="map"), _chart("b", category="overview"), _chart("c", category="map")])
    assert registry.categories() == ("map", "overview")
    assert len(registry) == 3


def test_category_label_falls_back_to_title_case() -> None:
    """Known categories use their label; unknown ones are title-cased."""

    assert category_label("regional") == "Regional Analysis"
    assert category_label("court_types") == "Court Types"


def test_chart_definition_as_json() -> None:
    """JSON payloads list levels as plain strings."""

    payload = CHART_REGISTRY.get("state-breakdown").as_json()
    assert payload["relevant_levels"] == ["country"]
    assert payload["api_endpoints"] == ["/venues-by-state"]
