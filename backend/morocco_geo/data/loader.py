"""Loading of the bundled regions.json dataset."""

import json
import logging
from pathlib import Path
from typing import Any

from morocco_geo.data.dataset import Dataset
from morocco_geo.validation.data_integrity import validate_data_integrity_strict

logger = logging.getLogger(__name__)

DATA_FILE = Path(__file__).with_name("regions.json")


def load_raw_data(path: Path | str | None = None) -> dict[str, Any]:
    """Read the dataset JSON as plain dicts."""
    with open(path or DATA_FILE, encoding="utf-8") as f:
        return json.load(f)


def load_dataset(path: Path | str | None = None, validate: bool = True) -> Dataset:
    """Load and optionally integrity-check the dataset.

    Raises:
        DataIntegrityError: If ``validate`` is set and the data is malformed.
    """
    raw = load_raw_data(path)
    if validate:
        validate_data_integrity_strict(raw)
    dataset = Dataset.from_raw(raw)
    logger.info(
        f"[DATA] Loaded {len(dataset.regions())} regions, "
        f"{len(dataset.assigned_cities())} assigned and "
        f"{len(dataset.unassigned_cities())} unassigned cities"
    )
    return dataset


_dataset: Dataset | None = None


def get_dataset() -> Dataset:
    global _dataset
    if _dataset is None:
        _dataset = load_dataset()
    return _dataset
