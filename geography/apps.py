"""Django app configuration for geographic reference data."""

from __future__ import annotations

from django.apps import AppConfig


class GeographyConfig(AppConfig):
    """AppConfig for the read-only geography tables."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "geography"
