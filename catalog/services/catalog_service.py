# catalog/services/catalog_service.py

"""Catalog service: the single owner of the product set."""

import asyncio
import enum
import logging
from pathlib import Path

from catalog.errors import (
    DuplicateId,
    NotFound,
    StorageError,
    StorageUnavailable,
)
from catalog.filters.category_filter import CategoryFilter
from catalog.models.product import Product
from catalog.storage.record_store import RecordStore
from catalog.storage.seed_data import default_records

logger = logging.getLogger("catalog.service")


class CatalogState(enum.Enum):
    """Lifecycle of the in-memory product cache."""

    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"


class CatalogService:
    """Compose the record store and seed data into catalog operations.

    The service keeps a private cache of the stored products.  Every
    read hands out a fresh list, and the cache only changes after the
    matching storage write has completed.  Loads and mutations hold one
    lock, so a check, its write and the cache update are never
    interleaved with another task's.

    When a load had to fall back to the seed set the cache is marked
    ``degraded``; the next mutation re-reads the store before checking
    ids and fails with the storage error if that read fails again.
    """

    def __init__(self, db_path: Path | None = None) -> None:
        self._db_path = db_path
        self._store: RecordStore | None = None
        self._products: list[Product] = []
        self._lock = asyncio.Lock()
        self.state = CatalogState.UNINITIALIZED
        self.degraded = False

    # ── Loading ──────────────────────────────────────────

    async def load_all(self) -> list[Product]:
        """Return every product, seeding an empty store first.

        Storage failures are logged and answered with the seed set so
        the storefront stays usable.
        """
        async with self._lock:
            try:
                stored = await self._read_store()
                self.degraded = False
            except (StorageUnavailable, StorageError) as exc:
                logger.warning(
                    "Falling back to default products: %s", exc,
                )
                stored = default_records()
                self.degraded = True

            self._products = stored
            self.state = CatalogState.LOADED
            logger.info("Catalog loaded with %d products", len(stored))
            return list(self._products)

    async def reset_to_defaults(self) -> list[Product]:
        """Wipe the store and restore the default products.

        Clearing and re-seeding is one store transaction; on failure
        both the store and the cache keep their previous contents.
        """
        async with self._lock:
            store = await self._get_store()
            seed = default_records()
            await store.replace_all(seed)
            self._products = seed
            self.state = CatalogState.LOADED
            self.degraded = False
            logger.info("Catalog reset to %d defaults", len(seed))
            return list(self._products)

    # ── Mutations ────────────────────────────────────────

    async def add(self, product: Product) -> None:
        """Persist a new product.

        Raises ``DuplicateId`` for an empty or already used id.
        """
        async with self._lock:
            await self._ensure_current()
            if not product.id:
                raise DuplicateId("Product id must not be empty")
            if self._index_of(product.id) is not None:
                raise DuplicateId(
                    f"Product id already exists: {product.id}"
                )

            store = await self._get_store()
            await store.put(product)
            self._products = [*self._products, product]
            logger.info(
                "Added product id=%s (%s)", product.id, product.title,
            )

    async def update(self, product: Product) -> None:
        """Replace an existing product in full.

        Raises ``NotFound`` when no product has ``product.id``.
        """
        async with self._lock:
            await self._ensure_current()
            index = self._index_of(product.id)
            if index is None:
                raise NotFound(f"No product with id: {product.id}")

            store = await self._get_store()
            await store.put(product)
            updated = list(self._products)
            updated[index] = product
            self._products = updated
            logger.info("Updated product id=%s", product.id)

    async def remove(self, product_id: str) -> None:
        """Delete a product; unknown ids are ignored."""
        async with self._lock:
            await self._ensure_current()
            store = await self._get_store()
            await store.delete_key(product_id)
            before = len(self._products)
            self._products = [
                p for p in self._products if p.id != product_id
            ]
            if len(self._products) < before:
                logger.info("Removed product id=%s", product_id)
            else:
                logger.debug("Remove ignored unknown id=%s", product_id)

    # ── Queries ──────────────────────────────────────────

    def products(self) -> list[Product]:
        """Snapshot of the cached products."""
        return list(self._products)

    def get(self, product_id: str) -> Product | None:
        """Return the cached product with *product_id*, if any."""
        index = self._index_of(product_id)
        return None if index is None else self._products[index]

    def list_categories(self) -> list[str]:
        """Distinct categories of the cached products, first-seen order."""
        return CategoryFilter.list_categories(self._products)

    def filter_by_category(self, token: str) -> list[Product]:
        """Products visible under the selected category *token*."""
        return CategoryFilter.filter_by_category(self._products, token)

    async def close(self) -> None:
        """Close the underlying record store, if open."""
        async with self._lock:
            if self._store is not None:
                await self._store.close()
                self._store = None

    # ── Private helpers (call with the lock held) ────────

    async def _get_store(self) -> RecordStore:
        if self._store is None:
            self._store = await RecordStore.open(self._db_path)
        return self._store

    async def _read_store(self) -> list[Product]:
        store = await self._get_store()
        stored = await store.get_all()
        if not stored:
            stored = await self._seed(store)
        return stored

    async def _ensure_current(self) -> None:
        """Load from the store if the cache is empty or only a fallback."""
        if self.state is CatalogState.LOADED and not self.degraded:
            return
        if self.degraded:
            logger.info("Re-reading store before mutating a fallback cache")
        self._products = await self._read_store()
        self.state = CatalogState.LOADED
        self.degraded = False

    async def _seed(self, store: RecordStore) -> list[Product]:
        seed = default_records()
        await store.replace_all(seed)
        logger.info("Seeded empty store with %d products", len(seed))
        return seed

    def _index_of(self, product_id: str) -> int | None:
        for i, product in enumerate(self._products):
            if product.id == product_id:
                return i
        return None
