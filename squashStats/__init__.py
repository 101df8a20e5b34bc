"""Django project package for the squash venue statistics dashboard."""
