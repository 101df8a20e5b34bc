"""Schema types for the chart and dashboard registries.

Dashboards are composed from declarative definitions instead of hard-coded
page logic. A chart definition names the front-end component that draws it, which
API endpoints its script reads, and at which geographic levels it is worth
showing. A dashboard definition is an ordered list of chart ids plus the route
that renders it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from analysis.geo_levels import GeoLevel

ChartCategory = Literal[
    "overview",
    "map",
    "regional",
    "trends",
    "rankings",
    "analysis",
]


@dataclass(frozen=True, slots=True)
class ChartDefinition:
    """Declarative chart definition.

    Args:
        id: Stable, unique identifier used in `?charts=` and dashboards.
        name: Chart title displayed in the UI.
        description: Short description shown in the gallery.
        category: Used for grouping charts in the gallery filter control.
        component: Front-end component name the page script mounts for the chart.
        api_endpoints: API paths the chart's script fetches from.
        thumbnail: Gallery preview image path.
        relevant_levels: Geographic levels at which the chart is shown.
    """

    id: str
    name: str
    description: str
    category: ChartCategory
    component: str
    api_endpoints: tuple[str, ...] = ()
    thumbnail: str | None = None
    relevant_levels: tuple[GeoLevel, ...] = (GeoLevel.world,)

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "component": self.component,
            "api_endpoints": list(self.api_endpoints),
            "thumbnail": self.thumbnail,
            "relevant_levels": [str(level) for level in self.relevant_levels],
        }


@dataclass(frozen=True, slots=True)
class DashboardDefinition:
    """Declarative dashboard definition.

    Args:
        id: Stable, unique identifier used in `?dashboard=`.
        name: Dashboard title.
        description: Short description shown in the gallery.
        route: Django URL name of the page that renders the dashboard.
        charts: Chart ids in display order.
        thumbnail: Gallery preview image path.
    """

    id: str
    name: str
    description: str
    route: str
    charts: tuple[str, ...]
    thumbnail: str | None = None

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "route": self.route,
            "charts": list(self.charts),
            "thumbnail": self.thumbnail,
        }


class ChartRegistry:
    """Read-only lookup over chart definitions, in declaration order."""

    __slots__ = ("_by_id",)

    def __init__(self, charts: Iterable[ChartDefinition]) -> None:
        self._by_id: Mapping[str, ChartDefinition] = MappingProxyType({chart.id: chart for chart in charts})

    def get(self, chart_id: str) -> ChartDefinition | None:
        """Return the chart with the given id, or None."""

        return self._by_id.get(chart_id)

    def all(self) -> tuple[ChartDefinition, ...]:
        """Return every chart in declaration order."""

        return tuple(self._by_id.values())

    def by_category(self, category: str) -> tuple[ChartDefinition, ...]:
        """Return the charts of one category in declaration order."""

        return tuple(chart for chart in self._by_id.values() if chart.category == category)

    def categories(self) -> tuple[str, ...]:
        """Return distinct chart categories, first occurrence wins."""

        return tuple(dict.fromkeys(chart.category for chart in self._by_id.values()))

    def __contains__(self, chart_id: object) -> bool:
        return chart_id in self._by_id

    def __iter__(self) -> Iterator[ChartDefinition]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


class DashboardRegistry:
    """Read-only lookup over dashboard definitions, in declaration order."""

    __slots__ = ("_by_id",)

    def __init__(self, dashboards: Iterable[DashboardDefinition]) -> None:
        self._by_id: Mapping[str, DashboardDefinition] = MappingProxyType(
            {dashboard.id: dashboard for dashboard in dashboards}
        )

    def get(self, dashboard_id: str) -> DashboardDefinition | None:
        """Return the dashboard with the given id, or None."""

        return self._by_id.get(dashboard_id)

    def all(self) -> tuple[DashboardDefinition, ...]:
        """Return every dashboard in declaration order."""

        return tuple(self._by_id.values())

    def __contains__(self, dashboard_id: object) -> bool:
        return dashboard_id in self._by_id

    def __iter__(self) -> Iterator[DashboardDefinition]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)
