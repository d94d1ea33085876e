# tests/test_seed_data.py

"""Tests for the default product set."""

import unittest

from catalog.filters.product_validator import ProductValidator
from catalog.storage.seed_data import default_records


class TestDefaultRecords(unittest.TestCase):
    """default_records behaviour."""

    def test_has_six_products(self) -> None:
        """The seed set holds exactly six products."""
        self.assertEqual(len(default_records()), 6)

    def test_ids_are_unique(self) -> None:
        """No duplicate ids in the seed set."""
        ids = [p.id for p in default_records()]
        self.assertEqual(len(ids), len(set(ids)))

    def test_deterministic(self) -> None:
        """Repeated calls return equal sequences."""
        self.assertEqual(default_records(), default_records())

    def test_returns_fresh_list(self) -> None:
        """Mutating the returned list does not affect later calls."""
        first = default_records()
        first.clear()
        self.assertEqual(len(default_records()), 6)

    def test_categories_in_catalog_order(self) -> None:
        """Categories appear as Home, Home, Accessories, ..."""
        self.assertEqual(
            [p.category for p in default_records()],
            ["Home", "Home", "Accessories", "Clothing", "Kitchen", "Art"],
        )

    def test_every_record_passes_form_validation(self) -> None:
        """Each seed product would be accepted by the admin form."""
        for product in default_records():
            with self.subTest(product=product.id):
                problems = ProductValidator.find_problems(
                    product.title,
                    product.description,
                    product.image_url,
                    product.external_url,
                    product.category,
                    product.price,
                )
                self.assertEqual(problems, {})


if __name__ == "__main__":
    unittest.main()
