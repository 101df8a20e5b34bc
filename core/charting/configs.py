"""Built-in chart and dashboard definitions."""

from __future__ import annotations

from typing import Final

from analysis.geo_levels import GEO_LEVELS, GeoLevel

from .schema import ChartDefinition, ChartRegistry, DashboardDefinition, DashboardRegistry
from .validator import validate_chart_definitions, validate_dashboard_definitions

# Charts that compare countries make no sense once a single country is selected.
_ABOVE_COUNTRY: Final[tuple[GeoLevel, ...]] = (GeoLevel.world, GeoLevel.continent, GeoLevel.region)


CHART_DEFINITIONS: Final[tuple[ChartDefinition, ...]] = (
    ChartDefinition(
        id="summary-stats",
        name="Summary Statistics",
        description="Key metrics: total countries, venues with squash, total venues, and total courts",
        category="overview",
        component="summary-stats",
        api_endpoints=("/country-stats",),
        thumbnail="/images/charts/summary-stats.png",
        relevant_levels=GEO_LEVELS,
    ),
    ChartDefinition(
        id="venue-map",
        name="Venue Map",
        description="Interactive map showing squash venues with clustering",
        category="map",
        component="venue-map",
        api_endpoints=("/map",),
        thumbnail="/images/charts/venue-map.png",
        relevant_levels=GEO_LEVELS,
    ),
    ChartDefinition(
        id="continental-breakdown",
        name="Squash Venues & Courts by Continent",
        description="Bar chart comparing squash venues and courts across continents",
        category="regional",
        component="continental-breakdown",
        api_endpoints=("/regional-breakdown",),
        thumbnail="/images/charts/continental-breakdown.png",
        relevant_levels=(GeoLevel.world,),
    ),
    ChartDefinition(
        id="subcontinental-breakdown",
        name="Squash Venues & Courts by Region",
        description="Detailed regional breakdown of squash venues by region",
        category="regional",
        component="subcontinental-breakdown",
        api_endpoints=("/subcontinental-breakdown",),
        thumbnail="/images/charts/subcontinental-breakdown.png",
        relevant_levels=(GeoLevel.world, GeoLevel.continent),
    ),
    ChartDefinition(
        id="timeline",
        name="Squash Venues Added Over Time",
        description="Line chart showing squash venue growth over time",
        category="trends",
        component="timeline",
        api_endpoints=("/timeline",),
        thumbnail="/images/charts/timeline.png",
        relevant_levels=GEO_LEVELS,
    ),
    ChartDefinition(
        id="state-breakdown",
        name="Squash Venues & Courts by State/County",
        description="Bar chart showing squash venues and courts by state/county within a country",
        category="regional",
        component="state-breakdown",
        api_endpoints=("/venues-by-state",),
        thumbnail="/images/charts/state-breakdown.png",
        relevant_levels=(GeoLevel.country,),
    ),
    ChartDefinition(
        id="venues-by-state-pie",
        name="Squash Venues by State/County (Pie)",
        description="Pie chart showing distribution of squash venues by state/county within a country",
        category="regional",
        component="venues-by-state-pie",
        api_endpoints=("/venues-by-state",),
        thumbnail="/images/charts/venues-by-state-pie.png",
        relevant_levels=(GeoLevel.country,),
    ),
    ChartDefinition(
        id="top-venues-by-courts",
        name="Top 20 Squash Venues by Courts",
        description="Horizontal bar chart of squash venues with the most courts",
        category="rankings",
        component="top-venues-by-courts",
        api_endpoints=("/top-venues-by-courts?limit=20",),
        thumbnail="/images/charts/top-venues-by-courts.png",
        relevant_levels=GEO_LEVELS,
    ),
    ChartDefinition(
        id="top-venues",
        name="Top 20 Countries by Squash Venues",
        description="Horizontal bar chart of countries with most squash venues",
        category="rankings",
        component="top-venues",
        api_endpoints=("/top-countries?metric=venues&limit=20",),
        thumbnail="/images/charts/top-venues.png",
        relevant_levels=_ABOVE_COUNTRY,
    ),
    ChartDefinition(
        id="court-distribution",
        name="Squash Courts Per Venue",
        description="Distribution showing how many squash courts venues typically have",
        category="analysis",
        component="court-distribution",
        api_endpoints=("/court-distribution",),
        thumbnail="/images/charts/court-distribution.png",
        relevant_levels=GEO_LEVELS,
    ),
    ChartDefinition(
        id="top-courts",
        name="Top 20 Countries by Squash Courts",
        description="Horizontal bar chart of countries with most squash courts",
        category="rankings",
        component="top-courts",
        api_endpoints=("/top-countries?metric=courts&limit=20",),
        thumbnail="/images/charts/top-courts.png",
        relevant_levels=_ABOVE_COUNTRY,
    ),
    ChartDefinition(
        id="venue-categories",
        name="Squash Venues by Category",
        description="Doughnut chart showing squash venue type distribution",
        category="analysis",
        component="venue-categories",
        api_endpoints=("/categories",),
        thumbnail="/images/charts/venue-categories.png",
        relevant_levels=GEO_LEVELS,
    ),
    ChartDefinition(
        id="website-stats",
        name="Squash Venues with Websites",
        description="Pie chart showing percentage of squash venues with website information",
        category="analysis",
        component="website-stats",
        api_endpoints=("/website-stats",),
        thumbnail="/images/charts/website-stats.png",
        relevant_levels=GEO_LEVELS,
    ),
    ChartDefinition(
        id="outdoor-courts",
        name="Top 20 Countries by Outdoor Squash Courts",
        description="Horizontal bar chart of countries with most outdoor squash courts",
        category="rankings",
        component="outdoor-courts",
        api_endpoints=("/top-countries?metric=outdoor_courts&limit=20",),
        thumbnail="/images/charts/outdoor-courts.png",
        relevant_levels=_ABOVE_COUNTRY,
    ),
)


DASHBOARD_DEFINITIONS: Final[tuple[DashboardDefinition, ...]] = (
    DashboardDefinition(
        id="world",
        name="World Statistics",
        description="Complete global overview with all charts and interactive map",
        route="core:dashboard_world",
        charts=(
            "summary-stats",
            "venue-map",
            "continental-breakdown",
            "subcontinental-breakdown",
            "timeline",
            "state-breakdown",
            "top-venues-by-courts",
            "top-venues",
            "court-distribution",
            "top-courts",
            "venue-categories",
            "venues-by-state-pie",
            "website-stats",
            "outdoor-courts",
        ),
        thumbnail="/images/dashboards/world.png",
    ),
    DashboardDefinition(
        id="country",
        name="Country Statistics",
        description="Detailed breakdown by country with filtered data",
        route="core:dashboard_country",
        charts=(
            "summary-stats",
            "venue-map",
            "top-venues",
            "court-distribution",
            "venue-categories",
            "website-stats",
            "timeline",
        ),
        thumbnail="/images/dashboards/country.png",
    ),
    DashboardDefinition(
        id="venue-types",
        name="Venue Types & Categories",
        description="Focus on venue characteristics and categories",
        route="core:dashboard_venue_types",
        charts=(
            "summary-stats",
            "venue-categories",
            "court-distribution",
            "website-stats",
            "outdoor-courts",
            "continental-breakdown",
            "subcontinental-breakdown",
        ),
        thumbnail="/images/dashboards/venue-types.png",
    ),
)

DEFAULT_DASHBOARD_ID: Final[str] = "world"

CATEGORY_LABELS: Final[dict[str, str]] = {
    "overview": "Overview",
    "map": "Maps",
    "regional": "Regional Analysis",
    "trends": "Trends",
    "rankings": "Rankings",
    "analysis": "Analysis",
}


_CHART_VALIDATION = validate_chart_definitions(CHART_DEFINITIONS)
if not _CHART_VALIDATION.is_valid:
    joined = "\n".join(_CHART_VALIDATION.errors)
    raise ValueError(f"Invalid CHART_DEFINITIONS:\n{joined}")

_DASHBOARD_VALIDATION = validate_dashboard_definitions(
    DASHBOARD_DEFINITIONS,
    chart_ids=(chart.id for chart in CHART_DEFINITIONS),
)
if not _DASHBOARD_VALIDATION.is_valid:
    joined = "\n".join(_DASHBOARD_VALIDATION.errors)
    raise ValueError(f"Invalid DASHBOARD_DEFINITIONS:\n{joined}")


CHART_REGISTRY: Final[ChartRegistry] = ChartRegistry(CHART_DEFINITIONS)
DASHBOARD_REGISTRY: Final[DashboardRegistry] = DashboardRegistry(DASHBOARD_DEFINITIONS)


def category_label(category: str) -> str:
    """Return the display label for a chart category."""

    return CATEGORY_LABELS.get(category, category.replace("-", " ").replace("_", " ").title())
