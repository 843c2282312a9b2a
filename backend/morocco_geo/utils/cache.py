"""Cache key composition and memoization helpers.

``memoize`` wraps a pure function with a CacheService: the wrapped function
is invoked at most once per key within one TTL window. Nothing guards
against side-effecting functions; only memoize pure ones.
"""

import functools
from typing import Any, Callable, TypeVar

from morocco_geo.services.cache import MISSING, CacheService

R = TypeVar("R")


def create_cache_key(*parts: str | int) -> str:
    """Join parts with ``:`` (``create_cache_key("a", 1, "b") == "a:1:b"``)."""
    return CacheService.build_key(*parts)


def memoize(
    cache: CacheService,
    fn: Callable[..., R],
    key_of: Callable[..., str],
    ttl_ms: int | None = None,
) -> Callable[..., R]:
    """Return ``fn`` wrapped with a cache lookup keyed by ``key_of(*args)``.

    A cached ``None`` counts as a hit. With caching disabled the store never
    holds anything, so the wrapper calls ``fn`` every time.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> R:
        key = key_of(*args, **kwargs)
        cached = cache.get(key)
        if cached is not MISSING:
            return cached
        result = fn(*args, **kwargs)
        cache.set(key, result, ttl_ms)
        return result

    return wrapper


def memoized(
    cache: CacheService,
    key_of: Callable[..., str],
    ttl_ms: int | None = None,
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """Decorator form of :func:`memoize`."""

    def decorator(fn: Callable[..., R]) -> Callable[..., R]:
        return memoize(cache, fn, key_of, ttl_ms)

    return decorator
