# catalog/filters/category_filter.py

"""Category derivation and category-based product filtering."""

import logging

from catalog.config.settings import Settings
from catalog.models.product import Product

logger = logging.getLogger("catalog.filters")


class CategoryFilter:
    """Derive categories from a product set and filter by one of them."""

    @staticmethod
    def list_categories(products: list[Product]) -> list[str]:
        """Return each distinct category once, in first-seen order."""
        seen: dict[str, None] = {}
        for product in products:
            seen.setdefault(product.category, None)
        return list(seen)

    @staticmethod
    def filter_by_category(
        products: list[Product],
        token: str,
    ) -> list[Product]:
        """Return the products visible under the selected *token*.

        The ``all`` sentinel keeps everything; any other token keeps
        only exact, case-sensitive category matches.
        """
        if token == Settings.ALL_CATEGORIES:
            return list(products)

        kept = [p for p in products if p.category == token]
        logger.debug(
            "Category '%s' matched %d of %d products",
            token,
            len(kept),
            len(products),
        )
        return kept
