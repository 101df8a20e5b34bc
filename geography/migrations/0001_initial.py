"""Create the geographic hierarchy tables.

In production these tables belong to the remote squash directory database and
this migration is not applied there (see `geography.routers`). Locally it
provides the same schema for development and tests.
"""

from __future__ import annotations

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    """Initial schema for Continent, Region, Country and State."""

    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Continent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
            ],
            options={"db_table": "continents", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Region",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                (
                    "continent",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="regions",
                        to="geography.continent",
                    ),
                ),
            ],
            options={"db_table": "regions", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Country",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("alpha_2_code", models.CharField(db_index=True, max_length=2)),
                ("alpha_3_code", models.CharField(db_index=True, max_length=3)),
                (
                    "api_display",
                    models.BooleanField(
                        default=True,
                        help_text="Whether the country is shown on public dashboards and reference pages.",
                    ),
                ),
                (
                    "region",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="countries",
                        to="geography.region",
                    ),
                ),
            ],
            options={"db_table": "countries", "ordering": ["name"], "verbose_name_plural": "Countries"},
        ),
        migrations.CreateModel(
            name="State",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                (
                    "country",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="states",
                        to="geography.country",
                    ),
                ),
            ],
            options={"db_table": "states", "ordering": ["name"]},
        ),
    ]
