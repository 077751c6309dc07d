from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the inventory_api package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory_api.core.config import Settings  # noqa: E402
from inventory_api.repositories.json_storage import InventoryRepository  # noqa: E402
from inventory_api.repositories.photo_store import PhotoStore  # noqa: E402
from inventory_api.services.inventory_service import InventoryService  # noqa: E402


@pytest.fixture()
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture()
def repository(cache_dir):
    repo = InventoryRepository(cache_dir)
    repo.ensure_initialized()
    return repo


@pytest.fixture()
def photos(cache_dir):
    return PhotoStore(cache_dir)


@pytest.fixture()
def service(repository, photos):
    return InventoryService(repository, photos)


@pytest.fixture()
def settings(cache_dir):
    return Settings(host="127.0.0.1", port=3000, cache_dir=cache_dir)
