"""Lookup and search service over the regions dataset.

Point lookups, substring searches and counts consult the cache before
scanning the dataset and store their result after. Keys are namespaced by
operation, lower-cased query text and resolved language, e.g.
``search-cities:casa:english``. Search queries are also stripped; point
lookup names are matched exactly as given.

Negative results are cached too: a name that matches nothing is stored as
``None`` so repeated misses do not rescan the dataset.

Random sampling is never cached and draws from an injectable
``random.Random`` so tests can seed it.
"""

import logging
import random
from typing import Any, Callable, Optional, Sequence, TypeVar

from morocco_geo.config import ConfigProvider, get_config_provider
from morocco_geo.data import Dataset, get_dataset
from morocco_geo.models import (
    CityDetails,
    InvalidRegionIdError,
    Language,
    Region,
    RegionSummary,
)
from morocco_geo.services.cache import MISSING, CacheService, InMemoryCacheService
from morocco_geo.validation import validate_language

logger = logging.getLogger(__name__)

T = TypeVar("T")

REGION_BY_NAME = "region-by-name"
CITY_DETAILS = "city-details"
SEARCH_REGIONS = "search-regions"
SEARCH_CITIES = "search-cities"
CITIES_COUNT = "cities-count"
ALL_CITIES = "all-cities"


def _normalize_text(text: str) -> str:
    return text.strip().lower()


def _unique(values: Sequence[str]) -> list[str]:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(values))


def sample_without_replacement(candidates: Sequence[T], count: int, rng: random.Random) -> list[T]:
    """Return ``min(count, len(candidates))`` distinct items.

    Shuffles a copy with Fisher-Yates (``Random.shuffle``) and takes a prefix.
    """
    pool = list(candidates)
    rng.shuffle(pool)
    return pool[: max(0, min(count, len(pool)))]


class LookupService:
    """Cached region and city lookups.

    Attributes:
        _dataset: Immutable dataset scanned on cache misses.
        _cache: Store for lookup results.
        _config: Live configuration (default language).
        _rng: Random source for the sampling operations.
    """

    def __init__(
        self,
        dataset: Dataset,
        cache: CacheService,
        config_provider: ConfigProvider,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._dataset = dataset
        self._cache = cache
        self._config = config_provider
        self._rng = rng or random.Random()

    @property
    def cache(self) -> CacheService:
        return self._cache

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def _language(self, language: Any) -> Language:
        return validate_language(language, default=self._config.default_language())

    def _cached(self, key: str, compute: Callable[[], T]) -> T:
        cached = self._cache.get(key)
        if cached is not MISSING:
            logger.debug(f"[LOOKUP] Cache hit {key}")
            return cached
        result = compute()
        self._cache.set(key, result)
        return result

    @staticmethod
    def _summary(region: Region, language: Language) -> RegionSummary:
        return RegionSummary(region_id=region.region_id, region_name=region.name(language))

    # ── Point lookups ──

    def find_region_by_name(self, name: str, language: Any = None) -> Optional[RegionSummary]:
        """Exact, case-insensitive match on the region name in ``language``.

        The name is not trimmed: surrounding whitespace makes it a miss.
        """
        lang = self._language(language)
        target = name.lower()
        key = self._cache.build_key(REGION_BY_NAME, target, lang.value)

        def compute() -> Optional[RegionSummary]:
            for region in self._dataset.regions():
                if region.name(lang).lower() == target:
                    return self._summary(region, lang)
            return None

        return self._cached(key, compute)

    def find_city_details(self, name: str, language: Any = None) -> Optional[CityDetails]:
        """Exact, case-insensitive city match.

        Assigned cities are scanned first in dataset order, then unassigned
        cities. The first match wins.
        """
        lang = self._language(language)
        target = name.lower()
        key = self._cache.build_key(CITY_DETAILS, target, lang.value)

        def compute() -> Optional[CityDetails]:
            for region in self._dataset.regions():
                for city in region.cities:
                    if city.name(lang).lower() == target:
                        return CityDetails(
                            city_id=city.city_id,
                            city_name=city.name(lang),
                            region_id=region.region_id,
                            region_name=region.name(lang),
                            is_assigned=True,
                        )
            for city in self._dataset.unassigned_cities():
                if city.name(lang).lower() == target:
                    return CityDetails(
                        city_id=city.city_id,
                        city_name=city.name(lang),
                        is_assigned=False,
                    )
            return None

        return self._cached(key, compute)

    def region_exists(self, name: str, language: Any = None) -> bool:
        return self.find_region_by_name(name, language) is not None

    def city_exists(self, name: str, language: Any = None) -> bool:
        return self.find_city_details(name, language) is not None

    # ── Searches ──

    def search_regions(self, query: str, language: Any = None) -> list[RegionSummary]:
        """Substring match over region names, in dataset order.

        An empty or whitespace-only query returns [] without touching the cache.
        """
        needle = _normalize_text(query)
        if not needle:
            return []
        lang = self._language(language)
        key = self._cache.build_key(SEARCH_REGIONS, needle, lang.value)
        result = self._cached(
            key,
            lambda: [
                self._summary(region, lang)
                for region in self._dataset.regions()
                if needle in region.name(lang).lower()
            ],
        )
        return list(result)

    def search_cities(self, query: str, language: Any = None) -> list[str]:
        """Substring match over assigned then unassigned city names, deduplicated."""
        needle = _normalize_text(query)
        if not needle:
            return []
        lang = self._language(language)
        key = self._cache.build_key(SEARCH_CITIES, needle, lang.value)
        result = self._cached(
            key,
            lambda: _unique(
                [
                    city.name(lang)
                    for city in self._dataset.all_cities()
                    if needle in city.name(lang).lower()
                ]
            ),
        )
        return list(result)

    # ── Counts and listings ──

    def count_cities_in_region(self, region_id: str) -> int:
        """Number of cities assigned to ``region_id``.

        Raises:
            InvalidRegionIdError: If no region has this ID.
        """
        key = self._cache.build_key(CITIES_COUNT, region_id)

        def compute() -> int:
            region = self._dataset.find_region(region_id)
            if region is None:
                raise InvalidRegionIdError(region_id)
            return len(region.cities)

        return self._cached(key, compute)

    def list_all_cities(self, language: Any = None) -> list[str]:
        """Every city name, assigned and unassigned, deduplicated and sorted."""
        lang = self._language(language)
        key = self._cache.build_key(ALL_CITIES, lang.value)
        result = self._cached(
            key,
            lambda: sorted(set(city.name(lang) for city in self._dataset.all_cities())),
        )
        return list(result)

    def get_all_regions(self, language: Any = None) -> list[RegionSummary]:
        lang = self._language(language)
        return [self._summary(region, lang) for region in self._dataset.regions()]

    def get_region_cities(self, region_id: str, language: Any = None) -> list[str]:
        """City names of a region; unknown IDs yield []."""
        lang = self._language(language)
        region = self._dataset.find_region(region_id)
        if region is None:
            return []
        return [city.name(lang) for city in region.cities]

    def get_assigned_cities(self, language: Any = None) -> list[str]:
        lang = self._language(language)
        return [city.name(lang) for city in self._dataset.assigned_cities()]

    def get_unassigned_cities(self, language: Any = None) -> list[str]:
        lang = self._language(language)
        return [city.name(lang) for city in self._dataset.unassigned_cities()]

    def count_regions(self) -> int:
        return len(self._dataset.regions())

    def count_region_cities(self, region_id: str) -> int:
        """Lenient count: unknown IDs yield 0."""
        region = self._dataset.find_region(region_id)
        return len(region.cities) if region else 0

    def count_assigned_cities(self) -> int:
        return len(self._dataset.assigned_cities())

    def count_unassigned_cities(self) -> int:
        return len(self._dataset.unassigned_cities())

    def count_all_cities(self) -> int:
        return self.count_assigned_cities() + self.count_unassigned_cities()

    # ── Random sampling ──

    def random_regions(self, count: int, language: Any = None) -> list[RegionSummary]:
        return sample_without_replacement(self.get_all_regions(language), count, self._rng)

    def random_cities(self, count: int, language: Any = None) -> list[str]:
        return sample_without_replacement(self.list_all_cities(language), count, self._rng)


def create_lookup_service(
    dataset: Optional[Dataset] = None,
    config_provider: Optional[ConfigProvider] = None,
    rng: Optional[random.Random] = None,
) -> LookupService:
    """Wire a LookupService with its own in-memory cache.

    Defaults to the bundled dataset and the process-wide config provider.
    """
    config_provider = config_provider or get_config_provider()
    return LookupService(
        dataset=dataset or get_dataset(),
        cache=InMemoryCacheService(config_provider),
        config_provider=config_provider,
        rng=rng,
    )
