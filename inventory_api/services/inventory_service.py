"""Inventory use cases (register, update, photos, search)."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from inventory_api.core.utils import absolute_url
from inventory_api.domain.errors import (
    InvalidInputError,
    ItemNotFoundError,
    PhotoNotFoundError,
)
from inventory_api.domain.items import (
    InventoryItem,
    is_valid_name,
    next_item_id,
    normalize_name,
)
from inventory_api.repositories.json_storage import InventoryRepository
from inventory_api.repositories.photo_store import PhotoStore

logger = logging.getLogger("inventory_api.service")

PHOTO_CONTENT_TYPE = "image/jpeg"


def photo_url(base_url: str, item_id: str) -> str:
    return absolute_url(f"/inventory/{item_id}/photo", base_url)


@dataclass
class SearchResult:
    item: InventoryItem
    description: str

    @property
    def has_photo(self) -> bool:
        return self.item.has_photo


class InventoryService:
    """
    Orchestrates the repository and photo store.

    Mutations load the whole collection, change it and save it back while
    holding ``_lock``, so writers inside this process never overwrite each
    other. Reads skip the lock; saves replace the document atomically.
    """

    def __init__(self, repository: InventoryRepository, photos: PhotoStore) -> None:
        self.repository = repository
        self.photos = photos
        self._lock = threading.Lock()

    # -------------------------------------- helpers --------------------------------------
    @staticmethod
    def _find(items: list[InventoryItem], item_id: str) -> InventoryItem:
        for item in items:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(item_id)

    # -------------------------------------- reads --------------------------------------
    def list_items(self) -> list[InventoryItem]:
        return self.repository.load_all()

    def get_item(self, item_id: str) -> InventoryItem:
        return self._find(self.repository.load_all(), item_id)

    def get_photo(self, item_id: str) -> bytes:
        item = self.get_item(item_id)
        if not item.photo_path:
            raise PhotoNotFoundError()
        return self.photos.retrieve(item.photo_path)

    def search(self, item_id: str, include_photo_note: bool = False, base_url: str = "") -> SearchResult:
        """
        Look up one item. With ``include_photo_note`` the returned description
        carries the photo link; the stored description is left alone.
        """
        item = self.get_item((item_id or "").strip())
        description = item.description
        if include_photo_note and item.has_photo:
            description += f"\nPhoto: {photo_url(base_url, item.id)}"
        return SearchResult(item=item, description=description)

    # -------------------------------------- writes --------------------------------------
    def register(
        self,
        name: Optional[str],
        description: Optional[str] = None,
        photo: Optional[bytes] = None,
    ) -> InventoryItem:
        if not is_valid_name(name):
            raise InvalidInputError("inventory_name is required")
        with self._lock:
            items = self.repository.load_all()
            item = InventoryItem(
                id=next_item_id(items),
                name=normalize_name(name),
                description=description or "",
            )
            if photo is not None:
                item.photo_path = self.photos.store(photo)
            items.append(item)
            self.repository.save_all(items)
        logger.info("Registered item %s (%s)", item.id, item.name)
        return item

    def update_item(
        self,
        item_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> InventoryItem:
        if name is not None and not is_valid_name(name):
            raise InvalidInputError("name must not be empty")
        with self._lock:
            items = self.repository.load_all()
            item = self._find(items, item_id)
            if name is not None:
                item.name = normalize_name(name)
            if description is not None:
                item.description = description
            self.repository.save_all(items)
        logger.info("Updated item %s", item_id)
        return item

    def replace_photo(self, item_id: str, photo: Optional[bytes]) -> InventoryItem:
        with self._lock:
            items = self.repository.load_all()
            item = self._find(items, item_id)
            if photo is None:
                raise InvalidInputError("photo is required")
            previous = item.photo_path
            item.photo_path = self.photos.store(photo)
            self.repository.save_all(items)
        if previous:
            logger.info("Replaced photo of item %s; previous file %s kept", item_id, previous)
        else:
            logger.info("Added photo to item %s", item_id)
        return item

    def delete_item(self, item_id: str) -> InventoryItem:
        with self._lock:
            items = self.repository.load_all()
            removed = self._find(items, item_id)
            items.remove(removed)
            self.repository.save_all(items)
        logger.info("Deleted item %s", item_id)
        return removed
