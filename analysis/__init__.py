"""Pure computations for squashStats.

This package contains deterministic, testable computations that operate on
in-memory inputs. It must not import Django or perform any database I/O.
"""

from .geo_levels import GeoLevel, resolve_level
from .hierarchy import nest_hierarchy

__all__ = ["GeoLevel", "nest_hierarchy", "resolve_level"]
