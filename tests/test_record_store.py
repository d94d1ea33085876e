# tests/test_record_store.py

"""Tests for the SQLite record store adapter."""

import sqlite3
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

from catalog.errors import StorageError, StorageUnavailable
from catalog.models.product import Product
from catalog.storage.record_store import RecordStore


def _make_product(product_id: str, category: str = "Home") -> Product:
    return Product(
        id=product_id,
        title=f"Product {product_id}",
        description="Long enough description.",
        image_url=f"https://example.com/{product_id}.jpg",
        external_url=f"https://etsy.com/listing/{product_id}",
        category=category,
        price=10.0,
    )


class TestRecordStore(unittest.IsolatedAsyncioTestCase):
    """Tests for the RecordStore class."""

    async def asyncSetUp(self) -> None:
        """Open a fresh temp-file store for each test."""
        self.tmp_dir = tempfile.mkdtemp()
        self.db_path = Path(self.tmp_dir) / "store.db"
        self.store = await RecordStore.open(self.db_path)

    async def asyncTearDown(self) -> None:
        """Close the store."""
        await self.store.close()

    # ── open ─────────────────────────────────────────────

    async def test_open_creates_file_and_table(self) -> None:
        """Opening a missing file creates it with an empty table."""
        self.assertTrue(self.db_path.exists())
        self.assertEqual(await self.store.get_all(), [])

    async def test_open_creates_parent_directories(self) -> None:
        """Nested directories are created on demand."""
        nested = Path(self.tmp_dir) / "a" / "b" / "nested.db"
        store = await RecordStore.open(nested)
        await store.close()
        self.assertTrue(nested.exists())

    async def test_open_custom_table_name(self) -> None:
        """A custom table name is honoured."""
        store = await RecordStore.open(self.db_path, table="archive")
        await store.put(_make_product("1"))
        await store.close()

        conn = sqlite3.connect(str(self.db_path))
        try:
            count = conn.execute(
                "SELECT COUNT(*) FROM archive"
            ).fetchone()[0]
        finally:
            conn.close()
        self.assertEqual(count, 1)

    async def test_open_unavailable_raises(self) -> None:
        """A path that cannot be created raises StorageUnavailable."""
        blocker = Path(self.tmp_dir) / "blocker"
        blocker.write_text("not a directory")
        with self.assertRaises(StorageUnavailable):
            await RecordStore.open(blocker / "store.db")

    # ── put / get_all ────────────────────────────────────

    async def test_put_then_get_all(self) -> None:
        """Stored products come back with every field intact."""
        product = _make_product("1")
        await self.store.put(product)
        self.assertEqual(await self.store.get_all(), [product])

    async def test_put_overwrites_by_key(self) -> None:
        """A second put with the same id replaces the record."""
        product = _make_product("1")
        await self.store.put(product)
        changed = replace(product, title="Renamed", price=5.5)
        await self.store.put(changed)

        stored = await self.store.get_all()
        self.assertEqual(stored, [changed])

    async def test_records_survive_reopen(self) -> None:
        """Data written before close is readable after reopening."""
        await self.store.put(_make_product("1"))
        await self.store.put(_make_product("2", "Art"))
        await self.store.close()

        self.store = await RecordStore.open(self.db_path)
        ids = {p.id for p in await self.store.get_all()}
        self.assertEqual(ids, {"1", "2"})

    # ── delete_key ───────────────────────────────────────

    async def test_delete_key_removes_record(self) -> None:
        """Only the targeted id disappears."""
        await self.store.put(_make_product("1"))
        await self.store.put(_make_product("2"))
        await self.store.delete_key("1")
        self.assertEqual(
            [p.id for p in await self.store.get_all()], ["2"],
        )

    async def test_delete_missing_key_is_noop(self) -> None:
        """Deleting an unknown id is not an error."""
        await self.store.put(_make_product("1"))
        await self.store.delete_key("missing")
        self.assertEqual(len(await self.store.get_all()), 1)

    # ── clear ────────────────────────────────────────────

    async def test_clear_empties_store(self) -> None:
        """clear removes every record."""
        for i in range(3):
            await self.store.put(_make_product(str(i)))
        await self.store.clear()
        self.assertEqual(await self.store.get_all(), [])

    # ── failures ─────────────────────────────────────────

    async def test_operation_on_closed_store_raises(self) -> None:
        """Using a closed connection surfaces StorageError."""
        await self.store.close()
        with self.assertRaises(StorageError):
            await self.store.get_all()
        self.store = await RecordStore.open(self.db_path)

    async def test_failed_put_leaves_store_unchanged(self) -> None:
        """A write that fails mid-transaction is rolled back."""
        original = _make_product("1")
        await self.store.put(original)

        with patch(
            "catalog.storage.record_store._COLUMNS",
            ("id", "title", "no_such_column"),
        ):
            with self.assertRaises(StorageError):
                await self.store.put(replace(original, title="Broken"))

        self.assertEqual(await self.store.get_all(), [original])

    # ── replace_all ──────────────────────────────────────

    async def test_replace_all_swaps_contents(self) -> None:
        """Old rows go, new rows arrive in the given order."""
        await self.store.put(_make_product("old"))
        fresh = [_make_product("b"), _make_product("a")]
        await self.store.replace_all(fresh)
        self.assertEqual(await self.store.get_all(), fresh)

    async def test_failed_replace_all_keeps_previous_rows(self) -> None:
        """One bad record rolls back the delete and every insert."""
        kept = _make_product("kept")
        await self.store.put(kept)
        # NULL title violates NOT NULL after the first insert succeeded
        bad = replace(_make_product("bad"), title=None)  # type: ignore[arg-type]

        with self.assertRaises(StorageError):
            await self.store.replace_all([_make_product("ok"), bad])

        self.assertEqual(await self.store.get_all(), [kept])


if __name__ == "__main__":
    unittest.main()
