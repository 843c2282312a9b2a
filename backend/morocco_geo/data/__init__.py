"""Bundled dataset of Moroccan regions and cities."""

from .dataset import Dataset
from .loader import DATA_FILE, get_dataset, load_dataset, load_raw_data

__all__ = [
    "DATA_FILE",
    "Dataset",
    "get_dataset",
    "load_dataset",
    "load_raw_data",
]
