"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.world_dashboard, name="dashboard_world"),
    path("country/", views.country_dashboard, name="dashboard_country"),
    path("country/<str:code>/", views.country_dashboard, name="dashboard_country"),
    path("venue-types/", views.venue_types_dashboard, name="dashboard_venue_types"),
    path("render/", views.render_charts, name="render_charts"),
    path("charts/", views.charts_gallery, name="charts_gallery"),
    path("geographic-areas/", views.geographic_areas, name="geographic_areas"),
    path("api/charts/", views.charts_api, name="charts_api"),
    path("api/dashboards/", views.dashboards_api, name="dashboards_api"),
    path("api/squash/search-areas/", views.search_areas_api, name="search_areas_api"),
    path("api/squash/filter-details/", views.filter_details_api, name="filter_details_api"),
]
