"""In-memory, read-only view over the regions and cities dataset."""

from typing import Any, Iterable, Optional

from morocco_geo.models import City, LocalizedNames, Region


def _city_from_raw(raw: dict[str, Any]) -> City:
    return City(
        city_id=raw["city_id"],
        names=LocalizedNames(
            english=raw["city_english"],
            french=raw["city_french"],
            arabic=raw["city_arabic"],
        ),
    )


def _region_from_raw(raw: dict[str, Any]) -> Region:
    return Region(
        region_id=raw["region_id"],
        names=LocalizedNames(
            english=raw["region_english"],
            french=raw["region_french"],
            arabic=raw["region_arabic"],
        ),
        cities=tuple(_city_from_raw(city) for city in raw["cities"]),
    )


class Dataset:
    """Regions (each with its assigned cities) plus unassigned cities.

    Populated once and never mutated; every accessor returns tuples in
    dataset order.
    """

    def __init__(self, regions: Iterable[Region], unassigned_cities: Iterable[City] = ()) -> None:
        self._regions = tuple(regions)
        self._unassigned = tuple(unassigned_cities)
        self._by_id = {region.region_id: region for region in self._regions}

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "Dataset":
        """Build a dataset from the snake-case JSON layout of regions.json."""
        return cls(
            regions=[_region_from_raw(region) for region in raw["regions"]],
            unassigned_cities=[_city_from_raw(city) for city in raw["unassigned_cities"]],
        )

    def regions(self) -> tuple[Region, ...]:
        return self._regions

    def unassigned_cities(self) -> tuple[City, ...]:
        return self._unassigned

    def assigned_cities(self) -> tuple[City, ...]:
        return tuple(city for region in self._regions for city in region.cities)

    def all_cities(self) -> tuple[City, ...]:
        """Assigned cities (region order) followed by unassigned ones."""
        return self.assigned_cities() + self._unassigned

    def region_ids(self) -> list[str]:
        return [region.region_id for region in self._regions]

    def find_region(self, region_id: str) -> Optional[Region]:
        return self._by_id.get(region_id)
