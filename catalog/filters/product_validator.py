# catalog/filters/product_validator.py

"""Product form validation used by the admin screens and the CLI."""

import logging
import math
from urllib.parse import urlparse

from catalog.config.settings import Settings
from catalog.errors import InvalidProduct
from catalog.models.product import Product

logger = logging.getLogger("catalog.filters")


def is_valid_url(raw_url: str) -> bool:
    """Return True when *raw_url* has an http(s) scheme and a host."""
    try:
        parsed = urlparse(raw_url.strip())
    except ValueError:
        return False
    return parsed.scheme in Settings.URL_SCHEMES and bool(parsed.netloc)


class ProductValidator:
    """Check product form input before it reaches the catalog service."""

    @staticmethod
    def find_problems(
        title: str,
        description: str,
        image_url: str,
        external_url: str,
        category: str,
        price: str | float,
    ) -> dict[str, str]:
        """Return a field -> message mapping; empty when input is valid."""
        problems: dict[str, str] = {}

        if len(title.strip()) < Settings.TITLE_MIN_LENGTH:
            problems["title"] = (
                f"must be at least {Settings.TITLE_MIN_LENGTH} characters"
            )
        if len(description.strip()) < Settings.DESCRIPTION_MIN_LENGTH:
            problems["description"] = (
                "must be at least "
                f"{Settings.DESCRIPTION_MIN_LENGTH} characters"
            )
        if not is_valid_url(image_url):
            problems["image_url"] = "must be a valid URL"
        if not is_valid_url(external_url):
            problems["external_url"] = "must be a valid URL"
        if not category.strip():
            problems["category"] = "is required"

        try:
            value = float(price)
        except (TypeError, ValueError):
            problems["price"] = "must be a number"
        else:
            if math.isnan(value) or value < 0:
                problems["price"] = "must be a non-negative number"

        return problems

    @staticmethod
    def build(
        product_id: str,
        title: str,
        description: str,
        image_url: str,
        external_url: str,
        category: str,
        price: str | float,
    ) -> Product:
        """Validate form input and return a complete Product.

        Raises ``InvalidProduct`` listing every failing field.
        """
        problems = ProductValidator.find_problems(
            title, description, image_url, external_url, category, price,
        )
        if problems:
            logger.debug(
                "Rejected product form (id=%s): %s",
                product_id,
                problems,
            )
            raise InvalidProduct(problems)

        return Product(
            id=product_id,
            title=title.strip(),
            description=description.strip(),
            image_url=image_url.strip(),
            external_url=external_url.strip(),
            category=category.strip(),
            price=float(price),
        )
