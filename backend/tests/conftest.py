"""Shared fixtures: a controllable clock, isolated config and a small dataset."""

import random

import pytest

from morocco_geo.config import ConfigProvider, PackageConfig
from morocco_geo.data import Dataset
from morocco_geo.models import City, LocalizedNames, Region
from morocco_geo.services import InMemoryCacheService, LookupService

NORTH_ID = "11111111-1111-4111-8111-111111111111"
CENTER_ID = "22222222-2222-4222-8222-222222222222"
SOUTH_ID = "33333333-3333-4333-8333-333333333333"


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: int = 1_000_000) -> None:
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance_ms(self, ms: int) -> None:
        self.now_ms += ms


def _city(city_id: int, english: str, french: str, arabic: str) -> City:
    return City(city_id=city_id, names=LocalizedNames(english=english, french=french, arabic=arabic))


def build_sample_dataset() -> Dataset:
    regions = [
        Region(
            region_id=NORTH_ID,
            names=LocalizedNames(english="North Coast", french="Côte Nord", arabic="الساحل الشمالي"),
            cities=(
                _city(1, "Tangier", "Tanger", "طنجة"),
                _city(2, "Tetouan", "Tétouan", "تطوان"),
            ),
        ),
        Region(
            region_id=CENTER_ID,
            names=LocalizedNames(english="Central Plains", french="Plaines Centrales", arabic="السهول الوسطى"),
            cities=(
                _city(3, "Casablanca", "Casablanca", "الدار البيضاء"),
                _city(4, "Settat", "Settat", "سطات"),
                _city(5, "Sidi Bennour", "Sidi Bennour", "سيدي بنور"),
            ),
        ),
        Region(
            region_id=SOUTH_ID,
            names=LocalizedNames(english="Southern Oasis", french="Oasis du Sud", arabic="الواحة الجنوبية"),
            cities=(
                _city(6, "Agadir", "Agadir", "أكادير"),
                _city(7, "Tata", "Tata", "طاطا"),
            ),
        ),
    ]
    unassigned = [
        _city(8, "Azrou", "Azrou", "أزرو"),
        # Same names as city 7: exercises assigned-first precedence and dedup
        _city(9, "Tata", "Tata", "طاطا"),
        _city(10, "Saidia", "Saïdia", "السعيدية"),
    ]
    return Dataset(regions=regions, unassigned_cities=unassigned)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config_provider() -> ConfigProvider:
    return ConfigProvider(PackageConfig(enable_caching=True, cache_timeout=100))


@pytest.fixture
def cache(config_provider: ConfigProvider, clock: FakeClock) -> InMemoryCacheService:
    return InMemoryCacheService(config_provider, clock=clock)


@pytest.fixture
def dataset() -> Dataset:
    return build_sample_dataset()


@pytest.fixture
def lookups(
    dataset: Dataset,
    cache: InMemoryCacheService,
    config_provider: ConfigProvider,
) -> LookupService:
    return LookupService(dataset, cache, config_provider, rng=random.Random(42))
