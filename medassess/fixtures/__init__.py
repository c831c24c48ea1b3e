"""Seed data for MedAssess.

Contains:
- The static symptom catalog
- The default protocol and reference library (YAML)
"""

from medassess.fixtures.library import LibraryLoader, load_library, seed_library
from medassess.fixtures.symptom_catalog import (
    SYMPTOM_CATALOG,
    blank_symptoms,
    catalog_size,
    group_by_category,
)

__all__ = [
    "SYMPTOM_CATALOG",
    "blank_symptoms",
    "catalog_size",
    "group_by_category",
    "LibraryLoader",
    "load_library",
    "seed_library",
]
