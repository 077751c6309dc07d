"""Error taxonomy for inventory operations."""
from __future__ import annotations


class InventoryError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidInputError(InventoryError):
    """Raised when a required field is missing or blank."""

    def __init__(self, message: str):
        super().__init__(message, 400)


class ItemNotFoundError(InventoryError):
    def __init__(self, item_id: str):
        super().__init__("Not found", 404)
        self.item_id = item_id


class PhotoNotFoundError(InventoryError):
    def __init__(self, reference: str | None = None):
        super().__init__("Photo not found", 404)
        self.reference = reference


class StorageUnavailableError(InventoryError):
    """Raised when the cache directory cannot be written."""

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message, 503)
