"""Validation for chart and dashboard definitions.

The registries are static, so validation is strict and fails fast when the
module defining them is imported.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import get_args

from analysis.geo_levels import GEO_LEVELS

from .schema import ChartCategory, ChartDefinition, DashboardDefinition


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a set of definitions."""

    is_valid: bool
    errors: tuple[str, ...] = ()


def _duplicate_ids(ids: Iterable[str]) -> list[str]:
    counts = Counter(ids)
    return sorted(key for key, count in counts.items() if count > 1)


def validate_chart_definition(chart: ChartDefinition) -> ValidationResult:
    """Validate a single ChartDefinition.

    Args:
        chart: Definition to validate.

    Returns:
        ValidationResult containing any errors.
    """

    errors: list[str] = []

    if not chart.id.strip():
        errors.append("ChartDefinition.id must be a non-empty string.")
    if not chart.name.strip():
        errors.append(f"ChartDefinition[{chart.id}].name must be a non-empty string.")
    if not chart.component.strip():
        errors.append(f"ChartDefinition[{chart.id}].component must be a non-empty string.")

    allowed_categories = set(get_args(ChartCategory))
    if chart.category not in allowed_categories:
        errors.append(f"ChartDefinition[{chart.id}].category is not a supported value: {chart.category!r}.")

    if not chart.relevant_levels:
        errors.append(f"ChartDefinition[{chart.id}].relevant_levels must contain at least one level.")
    unknown_levels = [level for level in chart.relevant_levels if level not in GEO_LEVELS]
    if unknown_levels:
        errors.append(f"ChartDefinition[{chart.id}].relevant_levels has unknown levels: {unknown_levels!r}.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors))


def validate_chart_definitions(charts: Iterable[ChartDefinition]) -> ValidationResult:
    """Validate every chart definition and reject duplicate ids."""

    charts = tuple(charts)
    errors: list[str] = []
    for chart in charts:
        errors.extend(validate_chart_definition(chart).errors)
    for duplicate in _duplicate_ids(chart.id for chart in charts):
        errors.append(f"Duplicate ChartDefinition id: {duplicate!r}.")
    return ValidationResult(is_valid=not errors, errors=tuple(errors))


def validate_dashboard_definitions(
    dashboards: Iterable[DashboardDefinition],
    *,
    chart_ids: Iterable[str],
) -> ValidationResult:
    """Validate dashboards against the set of known chart ids.

    Args:
        dashboards: Dashboard definitions to validate.
        chart_ids: Ids of every registered chart.

    Returns:
        ValidationResult containing any errors.
    """

    dashboards = tuple(dashboards)
    known = set(chart_ids)
    errors: list[str] = []

    for dashboard in dashboards:
        if not dashboard.id.strip():
            errors.append("DashboardDefinition.id must be a non-empty string.")
        if not dashboard.route.strip():
            errors.append(f"DashboardDefinition[{dashboard.id}].route must be a non-empty string.")
        if not dashboard.charts:
            errors.append(f"DashboardDefinition[{dashboard.id}].charts must contain at least one chart id.")
        unknown = [chart_id for chart_id in dashboard.charts if chart_id not in known]
        if unknown:
            errors.append(f"DashboardDefinition[{dashboard.id}] references unknown charts: {unknown!r}.")

    for duplicate in _duplicate_ids(dashboard.id for dashboard in dashboards):
        errors.append(f"Duplicate DashboardDefinition id: {duplicate!r}.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors))
