"""Minimal smoke tests for project wiring."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.unit


def test_analysis_package_exports() -> None:
    """Import the pure analysis package and verify its public entry points."""

    from analysis import nest_hierarchy, resolve_level

    assert callable(nest_hierarchy)
    assert callable(resolve_level)


def test_django_project_loads() -> None:
    """Settings include both project apps and the geography router."""

    from django.conf import settings

    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
    assert "geography.apps.GeographyConfig" in settings.INSTALLED_APPS
    assert settings.DATABASE_ROUTERS == ["geography.routers.GeographyRouter"]
    assert settings.GEOGRAPHY_CACHE_TTL_SECONDS == 86400
