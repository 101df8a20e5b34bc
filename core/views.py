"""Views for dashboards, ad-hoc chart pages, the gallery and geographic lookups."""

from __future__ import annotations

from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render

from analysis.geo_levels import resolve_level
from core.charting.composition import NotFound, Redirect, build_gallery, compose
from core.charting.configs import CHART_REGISTRY, DASHBOARD_REGISTRY
from core.charting.relevance import relevant_dashboard_charts
from geography.search import InvalidFilterError, filter_details, search_areas
from geography.services import build_geographic_hierarchy


def _render_dashboard(
    request: HttpRequest,
    *,
    dashboard_id: str,
    geo_filter: str | None,
    extra: dict[str, object] | None = None,
) -> HttpResponse:
    """Render a registered dashboard with only the charts relevant to the filter."""

    dashboard = DASHBOARD_REGISTRY.get(dashboard_id)
    if dashboard is None:
        raise Http404(f"Dashboard '{dashboard_id}' not found")

    context: dict[str, object] = {
        "dashboard": dashboard,
        "charts": relevant_dashboard_charts(dashboard, geo_filter),
        "geo_filter": geo_filter or "",
        "geo_level": resolve_level(geo_filter),
    }
    context.update(extra or {})
    return render(request, "core/dashboard.html", context)


def world_dashboard(request: HttpRequest) -> HttpResponse:
    """Render the world dashboard."""

    return _render_dashboard(request, dashboard_id="world", geo_filter=request.GET.get("filter"))


def country_dashboard(request: HttpRequest, code: str | None = None) -> HttpResponse:
    """Render the country dashboard.

    A country code in the path selects that country unless an explicit
    `filter` query parameter overrides it.
    """

    geo_filter = request.GET.get("filter") or (f"country:{code.upper()}" if code else None)
    return _render_dashboard(
        request,
        dashboard_id="country",
        geo_filter=geo_filter,
        extra={"country_code": code.upper() if code else None},
    )


def venue_types_dashboard(request: HttpRequest) -> HttpResponse:
    """Render the venue types dashboard."""

    return _render_dashboard(request, dashboard_id="venue-types", geo_filter=request.GET.get("filter"))


def render_charts(request: HttpRequest) -> HttpResponse:
    """Render a dashboard (via redirect) or an ad-hoc list of charts.

    `?dashboard=<id>` forwards to the dashboard page, `?charts=a,b` renders the
    listed charts on a generic page, and no parameters forwards to the world
    dashboard.
    """

    result = compose(request.GET)
    if isinstance(result, NotFound):
        raise Http404(result.reason)
    if isinstance(result, Redirect):
        return redirect(result.route)

    geo_filter = request.GET.get("filter")
    return render(
        request,
        "core/chart_renderer.html",
        {
            "charts": result.charts,
            "geo_filter": geo_filter or "",
            "geo_level": resolve_level(geo_filter),
        },
    )


def charts_gallery(request: HttpRequest) -> HttpResponse:
    """Render the gallery of every chart and dashboard."""

    gallery = build_gallery()
    return render(
        request,
        "core/charts_gallery.html",
        {
            "charts": gallery.charts,
            "dashboards": gallery.dashboards,
            "categories": gallery.categories,
        },
    )


def geographic_areas(request: HttpRequest) -> HttpResponse:
    """Render the geographic hierarchy with the filter code of every area."""

    hierarchy = build_geographic_hierarchy()
    return render(
        request,
        "core/geographic_areas.html",
        {
            "organized_data": hierarchy.continents,
            "totals": hierarchy.totals,
        },
    )


def charts_api(request: HttpRequest) -> JsonResponse:
    """Return the chart registry keyed by chart id."""

    return JsonResponse({chart.id: chart.as_json() for chart in CHART_REGISTRY})


def dashboards_api(request: HttpRequest) -> JsonResponse:
    """Return the dashboard registry keyed by dashboard id."""

    return JsonResponse({dashboard.id: dashboard.as_json() for dashboard in DASHBOARD_REGISTRY})


def search_areas_api(request: HttpRequest) -> JsonResponse:
    """Return geographic areas matching `?query=`."""

    query = request.GET.get("query") or ""
    results = search_areas(query)
    return JsonResponse([match.as_json() for match in results], safe=False)


def filter_details_api(request: HttpRequest) -> JsonResponse:
    """Describe the area selected by `?filter=`."""

    try:
        details = filter_details(request.GET.get("filter"))
    except InvalidFilterError as exc:
        return JsonResponse({"error": str(exc)}, status=400)
    if details is None:
        return JsonResponse({"error": "Area not found"}, status=404)
    return JsonResponse(details)
