"""YAML loader for the protocol and reference library, with content hashing."""

import hashlib
import logging
from pathlib import Path
from typing import Any

import yaml

from medassess.store.base import RecordService

logger = logging.getLogger(__name__)

# Default library directory
LIBRARY_DIR = Path(__file__).parent / "library"

# Library file seeding each read-only table
LIBRARY_FILES = {
    "protocol": "protocols.yaml",
    "reference": "references.yaml",
}


def compute_library_hash(content: str) -> str:
    """Compute SHA256 hash of library file content.

    Args:
        content: Raw YAML content string

    Returns:
        SHA256 hex digest
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def load_library(
    filename: str,
    library_dir: Path | None = None,
) -> tuple[dict[str, Any], str]:
    """Load a library YAML file and compute its hash.

    Args:
        filename: Name of the library file (e.g., "protocols.yaml")
        library_dir: Directory containing library files

    Returns:
        Tuple of (parsed library dict, SHA256 hash)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file has no entries list
        yaml.YAMLError: If YAML is invalid
    """
    if library_dir is None:
        library_dir = LIBRARY_DIR

    filepath = library_dir / filename

    if not filepath.exists():
        raise FileNotFoundError(f"Library file not found: {filepath}")

    content = filepath.read_text(encoding="utf-8")
    library_hash = compute_library_hash(content)
    library = yaml.safe_load(content) or {}

    if not isinstance(library.get("entries"), list):
        raise ValueError(f"Library file {filename} has no 'entries' list")

    return library, library_hash


class LibraryLoader:
    """Stateful library loader with caching."""

    def __init__(self, library_dir: Path | None = None) -> None:
        self.library_dir = library_dir or LIBRARY_DIR
        self._cache: dict[str, tuple[dict[str, Any], str]] = {}

    def load(self, filename: str, use_cache: bool = True) -> tuple[dict[str, Any], str]:
        """Load a library file with optional caching."""
        if use_cache and filename in self._cache:
            return self._cache[filename]

        library, library_hash = load_library(filename, self.library_dir)
        self._cache[filename] = (library, library_hash)

        return library, library_hash

    def clear_cache(self) -> None:
        """Clear the library cache."""
        self._cache.clear()

    def entries(self, table: str) -> list[dict[str, Any]]:
        """Return the seed entries for a read-only table."""
        library, _ = self.load(LIBRARY_FILES[table])
        return [dict(entry) for entry in library["entries"]]


async def seed_library(
    record_service: RecordService,
    loader: LibraryLoader | None = None,
) -> dict[str, int]:
    """Seed empty protocol/reference tables from the library files.

    Tables that already hold records are left alone.

    Returns:
        Number of records created per table
    """
    loader = loader or LibraryLoader()
    created: dict[str, int] = {}

    for table, filename in LIBRARY_FILES.items():
        existing = await record_service.fetch_records(table)
        if existing:
            logger.info(f"Table {table} already has {len(existing)} records, skipping seed")
            created[table] = 0
            continue

        library, library_hash = loader.load(filename)
        results = await record_service.create_records(table, loader.entries(table))
        created[table] = sum(1 for result in results if result.success)
        logger.info(
            f"Seeded {created[table]} {table} records from {filename} "
            f"(version={library.get('version', 'unknown')}, hash={library_hash[:12]})"
        )

    return created
