"""
JSON-backed inventory document.

Every mutation is a whole-document cycle: load all items, change them in
memory, write all items back.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from inventory_api.domain.errors import StorageUnavailableError
from inventory_api.domain.items import InventoryItem

logger = logging.getLogger("inventory_api.storage")

DOCUMENT_NAME = "inventory.json"


class InventoryRepository:
    """Load/replace the full item collection stored in ``<cache_dir>/inventory.json``."""

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = Path(cache_dir)
        self.path = self.cache_dir / DOCUMENT_NAME

    def ensure_initialized(self) -> None:
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.write_text("[]", encoding="utf-8")
                logger.info("Created empty inventory document at %s", self.path)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot initialize {self.path}: {exc}") from exc

    def load_all(self) -> list[InventoryItem]:
        raw = self._read_document()
        if raw is None:
            return []
        items: list[InventoryItem] = []
        for index, entry in enumerate(raw):
            if not isinstance(entry, dict) or entry.get("id") in (None, ""):
                logger.warning("Skipping malformed record #%d in %s", index, self.path)
                continue
            items.append(InventoryItem.from_record(entry))
        return items

    def save_all(self, items: Iterable[InventoryItem]) -> None:
        payload = json.dumps([item.to_record() for item in items], ensure_ascii=False, indent=2)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".inventory-", suffix=".tmp", dir=self.cache_dir)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            logger.error("Failed to write %s: %s", self.path, exc)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageUnavailableError(f"Cannot write {self.path.name}") from exc

    def _read_document(self) -> list | None:
        """Parsed JSON array, or None when the fallback to an empty collection applies."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Inventory document %s missing; using empty collection", self.path)
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s (%s); using empty collection", self.path, exc)
            return None
        try:
            data = json.loads(text)
        except ValueError as exc:
            logger.warning("Invalid JSON in %s (%s); using empty collection", self.path, exc)
            return None
        if not isinstance(data, list):
            logger.warning("%s does not hold a JSON array; using empty collection", self.path)
            return None
        return data
