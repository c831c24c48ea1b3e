"""Tests for the protocol/reference library loader."""

from pathlib import Path

import pytest

from medassess.fixtures.library import (
    LIBRARY_DIR,
    LibraryLoader,
    compute_library_hash,
    load_library,
    seed_library,
)
from medassess.services.library import ProtocolService, ReferenceService
from medassess.services.notifications import NotificationFeed
from medassess.store.memory import InMemoryRecordService
from medassess.store.sql import SqlRecordService


class TestLibraryHash:
    """Tests for library content hashing."""

    def test_hash_is_deterministic(self) -> None:
        content = "entries: []"

        assert compute_library_hash(content) == compute_library_hash(content)
        assert len(compute_library_hash(content)) == 64

    def test_different_content_different_hash(self) -> None:
        assert compute_library_hash("entries: []") != compute_library_hash("entries: [1]")


class TestLoadLibrary:
    """Tests for loading the YAML files."""

    def test_bundled_files_load(self) -> None:
        protocols, protocols_hash = load_library("protocols.yaml")
        references, _ = load_library("references.yaml")

        assert protocols["version"] == "1.0.0"
        assert len(protocols["entries"]) == 6
        assert len(references["entries"]) == 7
        assert protocols_hash == compute_library_hash(
            (LIBRARY_DIR / "protocols.yaml").read_text(encoding="utf-8")
        )

    def test_every_entry_has_title(self) -> None:
        for filename in ("protocols.yaml", "references.yaml"):
            library, _ = load_library(filename)
            assert all(entry.get("title") for entry in library["entries"])

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_library("protocols.yaml", tmp_path)

    def test_file_without_entries(self, tmp_path: Path) -> None:
        (tmp_path / "protocols.yaml").write_text("version: '1'\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_library("protocols.yaml", tmp_path)


class TestLibraryLoader:
    """Tests for the caching loader."""

    def test_cache(self, tmp_path: Path) -> None:
        path = tmp_path / "protocols.yaml"
        path.write_text("entries:\n  - title: One\n", encoding="utf-8")
        loader = LibraryLoader(tmp_path)

        first = loader.load("protocols.yaml")
        path.write_text("entries:\n  - title: Two\n", encoding="utf-8")

        assert loader.load("protocols.yaml") == first
        assert loader.load("protocols.yaml", use_cache=False) != first

        loader.clear_cache()
        assert loader.entries("protocol") == [{"title": "Two"}]


class TestSeedLibrary:
    """Tests for seeding empty tables."""

    async def test_seed_empty_store(self, records: InMemoryRecordService) -> None:
        created = await seed_library(records)

        assert created == {"protocol": 6, "reference": 7}
        assert len(await records.fetch_records("reference")) == 7

    async def test_seed_skips_populated_tables(
        self, seeded_records: InMemoryRecordService
    ) -> None:
        created = await seed_library(seeded_records)

        assert created == {"protocol": 0, "reference": 0}
        assert len(await seeded_records.fetch_records("protocol")) == 4

    async def test_seeded_sql_library_is_readable(
        self, sql_records: SqlRecordService, feed: NotificationFeed
    ) -> None:
        await seed_library(sql_records)

        protocols = await ProtocolService(sql_records, feed).list_protocols()
        references = await ReferenceService(sql_records, feed).list_references()

        assert len(protocols) == 6
        assert protocols == sorted(protocols, key=lambda p: p.title.casefold())
        assert sum(1 for r in references if r.usage is None) == 2
