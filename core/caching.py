"""Compute-if-absent helper over Django's cache framework."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from django.core.cache import cache

T = TypeVar("T")


def remember(key: str, ttl_seconds: int, compute: Callable[[], T]) -> T:
    """Return the cached value for `key`, computing and storing it on a miss.

    Args:
        key: Cache key.
        ttl_seconds: Expiry applied by the cache backend when the value is stored.
        compute: Zero-argument callable producing the value on a miss.

    Returns:
        The cached or freshly computed value.
    """

    return cache.get_or_set(key, compute, timeout=ttl_seconds)
