"""Template context processors for squashStats."""

from __future__ import annotations

from django.http import HttpRequest

from analysis.geo_levels import resolve_level


def geographic_filter(request: HttpRequest) -> dict[str, str]:
    """Expose the request's geographic filter and its level to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `request_geo_filter` and `request_geo_level`.
    """

    raw = request.GET.get("filter") or ""
    return {"request_geo_filter": raw, "request_geo_level": str(resolve_level(raw))}
