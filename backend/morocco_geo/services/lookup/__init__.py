"""Lookup service module.

Cached region/city point lookups, substring search, counts and random
sampling over the bundled dataset.
"""

from .service import (
    LookupService,
    create_lookup_service,
    sample_without_replacement,
)

__all__ = [
    "LookupService",
    "create_lookup_service",
    "sample_without_replacement",
]
