"""Admin registrations for geography models.

The tables are reference data owned by the remote directory, so the admin is
read-only.
"""

from __future__ import annotations

from django.contrib import admin
from django.http import HttpRequest

from geography.models import Continent, Country, Region, State


class ReadOnlyAdmin(admin.ModelAdmin):
    """ModelAdmin that allows browsing but no changes."""

    def has_add_permission(self, request: HttpRequest) -> bool:
        return False

    def has_change_permission(self, request: HttpRequest, obj: object | None = None) -> bool:
        return False

    def has_delete_permission(self, request: HttpRequest, obj: object | None = None) -> bool:
        return False


@admin.register(Continent)
class ContinentAdmin(ReadOnlyAdmin):
    """Admin configuration for Continent."""

    list_display = ("name", "id")
    search_fields = ("name",)


@admin.register(Region)
class RegionAdmin(ReadOnlyAdmin):
    """Admin configuration for Region."""

    list_display = ("name", "continent", "id")
    list_filter = ("continent",)
    search_fields = ("name",)


@admin.register(Country)
class CountryAdmin(ReadOnlyAdmin):
    """Admin configuration for Country."""

    list_display = ("name", "alpha_2_code", "alpha_3_code", "region", "api_display")
    list_filter = ("api_display", "region__continent")
    search_fields = ("name", "alpha_2_code", "alpha_3_code")


@admin.register(State)
class StateAdmin(ReadOnlyAdmin):
    """Admin configuration for State."""

    list_display = ("name", "country", "id")
    search_fields = ("name", "country__name")
