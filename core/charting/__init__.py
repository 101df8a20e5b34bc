"""Declarative chart and dashboard registries.

Pages in the UI are driven by `ChartDefinition` and `DashboardDefinition`
objects rather than bespoke view logic. This package contains the schema,
validation, relevance filtering and request composition used by the views.
"""
