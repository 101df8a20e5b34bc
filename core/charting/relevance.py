"""Decide which charts are worth showing at the active geographic level."""

from __future__ import annotations

from analysis.geo_levels import resolve_level

from .configs import CHART_REGISTRY
from .schema import ChartDefinition, ChartRegistry, DashboardDefinition


def is_chart_relevant(
    chart_id: str,
    geo_filter: str | None,
    *,
    registry: ChartRegistry = CHART_REGISTRY,
) -> bool:
    """Return whether a chart should render for a geographic filter.

    Args:
        chart_id: Registered chart id.
        geo_filter: Raw `type:code` filter string (may be None or empty).
        registry: Chart registry used for the lookup.

    Returns:
        False for unknown chart ids; otherwise whether the filter's level is
        one of the chart's relevant levels.
    """

    chart = registry.get(chart_id)
    if chart is None:
        return False
    return resolve_level(geo_filter) in chart.relevant_levels


def relevant_charts(
    geo_filter: str | None,
    *,
    registry: ChartRegistry = CHART_REGISTRY,
) -> tuple[ChartDefinition, ...]:
    """Return every registered chart relevant for a filter, in registry order."""

    level = resolve_level(geo_filter)
    return tuple(chart for chart in registry if level in chart.relevant_levels)


def relevant_dashboard_charts(
    dashboard: DashboardDefinition,
    geo_filter: str | None,
    *,
    registry: ChartRegistry = CHART_REGISTRY,
) -> tuple[ChartDefinition, ...]:
    """Return a dashboard's charts that should render for a filter.

    Args:
        dashboard: Dashboard whose chart list is checked.
        geo_filter: Raw filter string from the request.
        registry: Chart registry used for lookups.

    Returns:
        Relevant chart definitions in dashboard order. Unknown ids are dropped.
    """

    charts: list[ChartDefinition] = []
    for chart_id in dashboard.charts:
        if not is_chart_relevant(chart_id, geo_filter, registry=registry):
            continue
        chart = registry.get(chart_id)
        if chart is not None:
            charts.append(chart)
    return tuple(charts)
