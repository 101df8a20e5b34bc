"""App configuration for the dashboard pages and chart registries."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app (dashboards, chart pages, gallery)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
