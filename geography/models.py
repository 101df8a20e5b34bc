"""Database models for the geographic hierarchy.

Continent → Region → Country → State. Table names match the remote squash
directory schema so the same models read either the local development
database or the remote one (see `geography.routers`).
"""

from __future__ import annotations

from django.db import models


class Continent(models.Model):
    """Top level of the geographic hierarchy."""

    name = models.CharField(max_length=100)

    class Meta:
        db_table = "continents"
        ordering = ["name"]

    def __str__(self) -> str:
        """Return the continent name for display contexts."""

        return self.name


class Region(models.Model):
    """A sub-continental region (for example "Western Europe")."""

    name = models.CharField(max_length=100)
    continent = models.ForeignKey(Continent, on_delete=models.PROTECT, related_name="regions")

    class Meta:
        db_table = "regions"
        ordering = ["name"]

    def __str__(self) -> str:
        """Return the region name for display contexts."""

        return self.name


class CountryQuerySet(models.QuerySet["Country"]):
    """QuerySet helpers for Country."""

    def api_visible(self) -> "CountryQuerySet":
        """Restrict to countries flagged for external display."""

        return self.filter(api_display=True)


class Country(models.Model):
    """A country, identified externally by its ISO alpha-2 code."""

    name = models.CharField(max_length=100)
    alpha_2_code = models.CharField(max_length=2, db_index=True)
    alpha_3_code = models.CharField(max_length=3, db_index=True)
    region = models.ForeignKey(Region, on_delete=models.PROTECT, related_name="countries")
    api_display = models.BooleanField(
        default=True,
        help_text="Whether the country is shown on public dashboards and reference pages.",
    )

    objects = CountryQuerySet.as_manager()

    class Meta:
        db_table = "countries"
        ordering = ["name"]
        verbose_name_plural = "Countries"

    def __str__(self) -> str:
        """Return a concise display string."""

        return f"{self.name} ({self.alpha_2_code})"


class State(models.Model):
    """A state, province, or county within a country."""

    name = models.CharField(max_length=100)
    country = models.ForeignKey(Country, on_delete=models.PROTECT, related_name="states")

    class Meta:
        db_table = "states"
        ordering = ["name"]

    def __str__(self) -> str:
        """Return the state name for display contexts."""

        return self.name
