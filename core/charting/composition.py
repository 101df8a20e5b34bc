"""Resolve `/render` request parameters into something a view can return.

Two mutually exclusive query parameters are supported:

- `dashboard=<id>` forwards to the dashboard's own page.
- `charts=<id>,<id>,...` renders the listed charts on a generic page.

With neither parameter the request is forwarded to the default dashboard.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from .configs import CHART_REGISTRY, DASHBOARD_REGISTRY, DEFAULT_DASHBOARD_ID, category_label
from .schema import ChartDefinition, ChartRegistry, DashboardDefinition, DashboardRegistry

logger = logging.getLogger(__name__)

NotFoundKind = Literal["unknown_dashboard", "no_valid_charts"]


@dataclass(frozen=True, slots=True)
class RenderPlan:
    """Charts to hand to the generic chart-rendering page, in request order."""

    charts: tuple[ChartDefinition, ...]


@dataclass(frozen=True, slots=True)
class Redirect:
    """Forward to a named route."""

    route: str


@dataclass(frozen=True, slots=True)
class NotFound:
    """The request names nothing that can be rendered.

    Attributes:
        kind: Machine-readable failure kind.
        reason: Human-readable message for the 404 page.
    """

    kind: NotFoundKind
    reason: str


Composition = RenderPlan | Redirect | NotFound


def _split_chart_ids(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",")]


def compose(
    params: Mapping[str, str],
    *,
    charts: ChartRegistry = CHART_REGISTRY,
    dashboards: DashboardRegistry = DASHBOARD_REGISTRY,
) -> Composition:
    """Resolve request parameters into a render plan, redirect, or not-found.

    Args:
        params: Query parameters (typically `request.GET`).
        charts: Chart registry used for `charts=` lookups.
        dashboards: Dashboard registry used for `dashboard=` lookups.

    Returns:
        A Redirect for dashboard mode and for requests without parameters, a
        RenderPlan for chart mode, or NotFound when nothing resolves.
    """

    dashboard_id = params.get("dashboard")
    if dashboard_id:
        dashboard = dashboards.get(dashboard_id)
        if dashboard is None:
            return NotFound(kind="unknown_dashboard", reason=f"Dashboard '{dashboard_id}' not found")
        return Redirect(route=dashboard.route)

    raw_charts = params.get("charts")
    if raw_charts:
        resolved: list[ChartDefinition] = []
        for chart_id in _split_chart_ids(raw_charts):
            chart = charts.get(chart_id)
            if chart is None:
                logger.warning("Chart '%s' not found in registry", chart_id)
                continue
            resolved.append(chart)
        if not resolved:
            return NotFound(kind="no_valid_charts", reason="No valid charts specified")
        return RenderPlan(charts=tuple(resolved))

    default = dashboards.get(DEFAULT_DASHBOARD_ID)
    if default is None:
        return NotFound(kind="unknown_dashboard", reason=f"Dashboard '{DEFAULT_DASHBOARD_ID}' not found")
    return Redirect(route=default.route)


@dataclass(frozen=True, slots=True)
class GalleryCategory:
    """A chart category with its display label."""

    id: str
    label: str


@dataclass(frozen=True, slots=True)
class Gallery:
    """Everything the chart gallery page lists."""

    charts: tuple[ChartDefinition, ...]
    dashboards: tuple[DashboardDefinition, ...]
    categories: tuple[GalleryCategory, ...]


def build_gallery(
    *,
    charts: ChartRegistry = CHART_REGISTRY,
    dashboards: DashboardRegistry = DASHBOARD_REGISTRY,
) -> Gallery:
    """Return all charts, all dashboards, and the categories used by the charts."""

    return Gallery(
        charts=charts.all(),
        dashboards=dashboards.all(),
        categories=tuple(
            GalleryCategory(id=category, label=category_label(category)) for category in charts.categories()
        ),
    )
