# catalog/storage/record_store.py

"""SQLite-backed local record store holding products keyed by id."""

import asyncio
import logging
import sqlite3
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from catalog.config.settings import Settings
from catalog.errors import StorageError, StorageUnavailable
from catalog.models.product import Product

logger = logging.getLogger("catalog.storage")

_T = TypeVar("_T")

_COLUMNS = (
    "id", "title", "description", "image_url",
    "external_url", "category", "price",
)


def _schema(table: str) -> str:
    return (
        f"CREATE TABLE IF NOT EXISTS {table} (\n"
        "    id           TEXT PRIMARY KEY,\n"
        "    title        TEXT NOT NULL,\n"
        "    description  TEXT NOT NULL,\n"
        "    image_url    TEXT NOT NULL,\n"
        "    external_url TEXT NOT NULL,\n"
        "    category     TEXT NOT NULL,\n"
        "    price        REAL NOT NULL\n"
        ")"
    )


def _row_to_product(row: tuple[object, ...]) -> Product:
    return Product(
        id=str(row[0]),
        title=str(row[1]),
        description=str(row[2]),
        image_url=str(row[3]),
        external_url=str(row[4]),
        category=str(row[5]),
        price=float(str(row[6])),
    )


def _product_to_row(record: Product) -> tuple[object, ...]:
    return (
        record.id, record.title, record.description,
        record.image_url, record.external_url,
        record.category, record.price,
    )


class RecordStore:
    """Durable local store with one table row per product.

    Every operation is a coroutine; the blocking SQLite call runs in a
    worker thread and inside its own transaction, so a failed write
    leaves the file untouched.
    """

    def __init__(
        self, conn: sqlite3.Connection, table: str, path: Path,
    ) -> None:
        self._conn = conn
        self._table = table
        self._path = path
        self._lock = threading.Lock()

    @classmethod
    async def open(
        cls,
        db_path: Path | None = None,
        table: str | None = None,
    ) -> "RecordStore":
        """Open (and create if absent) the store at *db_path*.

        Raises ``StorageUnavailable`` when the file cannot be opened.
        """
        path = db_path or Settings.DB_PATH
        name = table or Settings.STORE_NAME

        def _connect() -> sqlite3.Connection:
            path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(path), check_same_thread=False)
            try:
                with conn:
                    conn.execute(_schema(name))
            except sqlite3.Error:
                conn.close()
                raise
            return conn

        try:
            conn = await asyncio.to_thread(_connect)
        except (sqlite3.Error, OSError) as exc:
            logger.error(
                "Cannot open record store at %s: %s", path, exc,
            )
            raise StorageUnavailable(
                f"Cannot open record store at {path}: {exc}"
            ) from exc

        logger.debug("RecordStore opened at %s (table=%s)", path, name)
        return cls(conn, name, path)

    @property
    def path(self) -> Path:
        """Location of the database file."""
        return self._path

    async def close(self) -> None:
        """Close the database connection."""
        await asyncio.to_thread(self._conn.close)
        logger.debug("RecordStore closed at %s", self._path)

    # ── Operations ───────────────────────────────────────

    async def get_all(self) -> list[Product]:
        """Return every stored product."""
        cols = ", ".join(_COLUMNS)

        def _fetch(conn: sqlite3.Connection) -> list[Product]:
            rows = conn.execute(
                f"SELECT {cols} FROM {self._table} ORDER BY rowid"
            ).fetchall()
            return [_row_to_product(r) for r in rows]

        return await self._run("get_all", _fetch)

    async def put(self, record: Product) -> None:
        """Insert or overwrite a product by its id."""
        cols = ", ".join(_COLUMNS)
        marks = ", ".join("?" for _ in _COLUMNS)
        updates = ", ".join(
            f"{c}=excluded.{c}" for c in _COLUMNS if c != "id"
        )
        values = _product_to_row(record)

        def _write(conn: sqlite3.Connection) -> None:
            conn.execute(
                f"INSERT INTO {self._table} ({cols}) VALUES ({marks}) "
                f"ON CONFLICT(id) DO UPDATE SET {updates}",
                values,
            )

        await self._run("put", _write)
        logger.debug("Stored product id=%s", record.id)

    async def delete_key(self, record_id: str) -> None:
        """Remove one product; absent ids are ignored."""

        def _delete(conn: sqlite3.Connection) -> int:
            cur = conn.execute(
                f"DELETE FROM {self._table} WHERE id = ?",
                (record_id,),
            )
            return cur.rowcount

        removed = await self._run("delete_key", _delete)
        logger.debug(
            "Deleted product id=%s (rows=%d)", record_id, removed,
        )

    async def clear(self) -> None:
        """Remove every stored product."""

        def _clear(conn: sqlite3.Connection) -> None:
            conn.execute(f"DELETE FROM {self._table}")

        await self._run("clear", _clear)
        logger.info("Record store cleared at %s", self._path)

    async def replace_all(self, records: list[Product]) -> None:
        """Swap the whole contents for *records* in one transaction.

        If any insert fails the previous rows are kept.
        """
        cols = ", ".join(_COLUMNS)
        marks = ", ".join("?" for _ in _COLUMNS)
        rows = [_product_to_row(r) for r in records]

        def _swap(conn: sqlite3.Connection) -> None:
            conn.execute(f"DELETE FROM {self._table}")
            conn.executemany(
                f"INSERT INTO {self._table} ({cols}) VALUES ({marks})",
                rows,
            )

        await self._run("replace_all", _swap)
        logger.info(
            "Record store at %s now holds %d products",
            self._path, len(rows),
        )

    # ── Private helpers ──────────────────────────────────

    async def _run(
        self,
        op_name: str,
        op: Callable[[sqlite3.Connection], _T],
    ) -> _T:
        """Run *op* in a worker thread inside a single transaction."""

        def _locked() -> _T:
            with self._lock, self._conn:
                return op(self._conn)

        try:
            return await asyncio.to_thread(_locked)
        except sqlite3.Error as exc:
            logger.error(
                "Record store %s failed: %s", op_name, exc,
                exc_info=True,
            )
            raise StorageError(f"{op_name} failed: {exc}") from exc
