"""Photo bytes stored as individual files under the cache directory."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from inventory_api.domain.errors import PhotoNotFoundError, StorageUnavailableError

logger = logging.getLogger("inventory_api.photos")


class PhotoStore:
    """
    Write-once photo files keyed by an opaque reference.

    The reference is the generated file name. Older documents may hold an
    absolute path instead; those are read as-is. Nothing is ever deleted, so
    replaced photos stay on disk.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def store(self, data: bytes) -> str:
        reference = uuid.uuid4().hex
        dest = self.directory / reference
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(data)
        except OSError as exc:
            logger.error("Failed to store photo %s: %s", dest, exc)
            raise StorageUnavailableError("Cannot store photo") from exc
        logger.debug("Stored photo %s (%d bytes)", reference, len(data))
        return reference

    def retrieve(self, reference: str) -> bytes:
        path = self._resolve(reference)
        if path is None:
            raise PhotoNotFoundError(reference)
        try:
            return path.read_bytes()
        except OSError as exc:
            logger.warning("Photo %s unreadable: %s", path, exc)
            raise PhotoNotFoundError(reference) from exc

    def _resolve(self, reference: str | None) -> Path | None:
        value = (reference or "").strip()
        if not value:
            return None
        candidate = Path(value)
        if candidate.is_absolute():
            return candidate
        # bare names only; anything with separators or ".." stays outside the store
        if candidate.name != value or value in {".", ".."}:
            return None
        return self.directory / value
