"""Inventory item record and the rules around ids and names."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional


@dataclass
class InventoryItem:
    id: str
    name: str
    description: str = ""
    photo_path: Optional[str] = None

    @property
    def has_photo(self) -> bool:
        return bool(self.photo_path)

    def to_record(self) -> dict:
        """Shape written to inventory.json."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "photoPath": self.photo_path,
        }

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> "InventoryItem":
        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name") or ""),
            description=str(raw.get("description") or ""),
            photo_path=_photo_reference(raw.get("photoPath")),
        )


def _photo_reference(value: Any) -> Optional[str]:
    # hand-edited documents may hold numbers or objects here
    if isinstance(value, str) and value.strip():
        return value
    return None


def normalize_name(value: str | None) -> str:
    return (value or "").strip()


def is_valid_name(value: str | None) -> bool:
    """Return True when the name has something left after trimming."""
    return bool(normalize_name(value))


def next_item_id(existing: Iterable[InventoryItem], now_ms: int | None = None) -> str:
    """
    Millisecond timestamp id, bumped past the largest numeric id in use so
    two registrations within the same millisecond never collide.
    """
    candidate = int(time.time() * 1000) if now_ms is None else now_ms
    highest = 0
    for item in existing:
        if item.id.isdecimal():
            highest = max(highest, int(item.id))
    if candidate <= highest:
        candidate = highest + 1
    return str(candidate)
