"""Database router for the geography app.

Geography reads go to `settings.GEOGRAPHY_DATABASE_ALIAS`. When that alias is
a separate (remote) database, the tables are owned elsewhere and migrations
for the app are skipped everywhere.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings

APP_LABEL = "geography"


def geography_alias() -> str:
    """Return the database alias geography models read from."""

    return getattr(settings, "GEOGRAPHY_DATABASE_ALIAS", "default")


class GeographyRouter:
    """Route the geography app to its configured database alias."""

    def db_for_read(self, model: type, **hints: Any) -> str | None:
        if model._meta.app_label == APP_LABEL:
            return geography_alias()
        return None

    def db_for_write(self, model: type, **hints: Any) -> str | None:
        if model._meta.app_label == APP_LABEL:
            return geography_alias()
        return None

    def allow_relation(self, obj1: Any, obj2: Any, **hints: Any) -> bool | None:
        if obj1._meta.app_label == APP_LABEL and obj2._meta.app_label == APP_LABEL:
            return True
        return None

    def allow_migrate(self, db: str, app_label: str, model_name: str | None = None, **hints: Any) -> bool | None:
        alias = geography_alias()
        if app_label == APP_LABEL:
            return alias == "default" and db == "default"
        if db == alias and alias != "default":
            return False
        return None
