"""Unit tests for create_cache_key and memoize."""

from morocco_geo.config import ConfigProvider
from morocco_geo.services.cache import InMemoryCacheService
from morocco_geo.utils.cache import create_cache_key, memoize, memoized


def test_create_cache_key() -> None:
    assert create_cache_key("a", 1, "b") == "a:1:b"


class TestMemoize:
    def setup_method(self) -> None:
        self.calls = 0

    def _double(self, x: int) -> int:
        self.calls += 1
        return x * 2

    def test_invokes_once_per_key(self, cache: InMemoryCacheService) -> None:
        memoized_double = memoize(cache, self._double, lambda x: f"double:{x}")
        assert memoized_double(2) == 4
        assert memoized_double(2) == 4
        assert self.calls == 1

    def test_distinct_keys_invoke_again(self, cache: InMemoryCacheService) -> None:
        memoized_double = memoize(cache, self._double, lambda x: f"double:{x}")
        memoized_double(2)
        memoized_double(3)
        assert self.calls == 2

    def test_reinvokes_after_ttl(self, cache: InMemoryCacheService, clock) -> None:
        memoized_double = memoize(cache, self._double, lambda x: f"double:{x}", ttl_ms=10)
        memoized_double(2)
        clock.advance_ms(11)
        memoized_double(2)
        assert self.calls == 2

    def test_none_result_is_cached(self, cache: InMemoryCacheService) -> None:
        def lookup(name: str) -> None:
            self.calls += 1
            return None

        memoized_lookup = memoize(cache, lookup, lambda name: f"lookup:{name}")
        assert memoized_lookup("x") is None
        assert memoized_lookup("x") is None
        assert self.calls == 1

    def test_disabled_caching_passes_through(
        self, cache: InMemoryCacheService, config_provider: ConfigProvider
    ) -> None:
        config_provider.set_caching_enabled(False)
        memoized_double = memoize(cache, self._double, lambda x: f"double:{x}")
        assert memoized_double(2) == 4
        assert memoized_double(2) == 4
        assert self.calls == 2

    def test_decorator_form(self, cache: InMemoryCacheService) -> None:
        @memoized(cache, lambda a, b: create_cache_key("add", a, b))
        def add(a: int, b: int) -> int:
            self.calls += 1
            return a + b

        assert add(1, 2) == 3
        assert add(1, 2) == 3
        assert self.calls == 1
        assert add.__name__ == "add"
        assert cache.keys() == ["add:1:2"]
