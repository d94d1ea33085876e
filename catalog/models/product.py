# catalog/models/product.py

"""Product data model shared by storage, service and presentation."""

import time
from dataclasses import dataclass
from typing import Any


def new_product_id() -> str:
    """Return a timestamp-derived id (milliseconds since the epoch)."""
    return str(time.time_ns() // 1_000_000)


@dataclass(frozen=True)
class Product:
    """A single catalog entry linking out to an external marketplace."""

    id: str
    title: str
    description: str
    image_url: str
    external_url: str
    category: str
    price: float

    def to_dict(self) -> dict[str, object]:
        """Serialise to the camelCase layout used in JSON output."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "imageUrl": self.image_url,
            "externalUrl": self.external_url,
            "category": self.category,
            "price": self.price,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a Product from a camelCase mapping.

        Raises ``KeyError`` when a field is missing; partial records
        are never accepted.
        """
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            description=str(data["description"]),
            image_url=str(data["imageUrl"]),
            external_url=str(data["externalUrl"]),
            category=str(data["category"]),
            price=float(data["price"]),
        )
