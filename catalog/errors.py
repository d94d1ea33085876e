# catalog/errors.py

"""Domain exceptions for the product catalog."""


class CatalogError(RuntimeError):
    """Base exception for all catalog failures."""


class StorageUnavailable(CatalogError):
    """Raised when the local record store cannot be opened."""


class StorageError(CatalogError):
    """Raised when a read, write or delete fails on an open store."""


class DuplicateId(CatalogError):
    """Raised when adding a product whose id is empty or already taken."""


class NotFound(CatalogError):
    """Raised when updating a product id that does not exist."""


class InvalidProduct(CatalogError):
    """Raised when product form input fails validation.

    ``problems`` maps each offending field to a human-readable message.
    """

    def __init__(self, problems: dict[str, str]) -> None:
        self.problems = problems
        detail = "; ".join(
            f"{field}: {msg}" for field, msg in problems.items()
        )
        super().__init__(f"Invalid product ({detail})")
