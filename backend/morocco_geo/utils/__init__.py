"""Shared helpers."""

from .cache import create_cache_key, memoize, memoized

__all__ = ["create_cache_key", "memoize", "memoized"]
