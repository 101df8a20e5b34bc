"""Dashboard pages, chart registries and their HTTP views."""
