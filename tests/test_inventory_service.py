from __future__ import annotations

import threading

import pytest

from inventory_api.domain.errors import InvalidInputError, ItemNotFoundError, PhotoNotFoundError
from inventory_api.services.inventory_service import photo_url


def test_register_and_list(service):
    item = service.register("Drill", "cordless")
    items = service.list_items()
    assert len(items) == 1
    assert items[0].id == item.id
    assert items[0].name == "Drill"
    assert items[0].description == "cordless"
    assert items[0].photo_path is None


def test_register_defaults_description_and_trims_name(service):
    item = service.register("  Hammer  ")
    assert item.name == "Hammer"
    assert item.description == ""


@pytest.mark.parametrize("name", [None, "", "   "])
def test_register_requires_name(service, name):
    service.register("Drill")
    with pytest.raises(InvalidInputError):
        service.register(name, "desc")
    assert len(service.list_items()) == 1


def test_ids_are_unique_and_stable(service):
    ids = [service.register(f"item {n}").id for n in range(5)]
    assert len(set(ids)) == 5
    assert [item.id for item in service.list_items()] == ids
    assert service.get_item(ids[2]).name == "item 2"


def test_concurrent_registrations_are_all_kept(service):
    threads = [threading.Thread(target=service.register, args=(f"t{n}",)) for n in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    items = service.list_items()
    assert len(items) == 20
    assert len({item.id for item in items}) == 20


def test_get_unknown_item(service):
    with pytest.raises(ItemNotFoundError):
        service.get_item("nope")


def test_update_only_description_keeps_name(service):
    item = service.register("Drill", "cordless")
    updated = service.update_item(item.id, description="corded")
    assert updated.name == "Drill"
    assert updated.description == "corded"
    assert service.get_item(item.id).description == "corded"


def test_update_name_and_allow_empty_description(service):
    item = service.register("Drill", "cordless")
    updated = service.update_item(item.id, name="Impact driver", description="")
    assert updated.name == "Impact driver"
    assert updated.description == ""


def test_update_rejects_blank_name(service):
    item = service.register("Drill")
    with pytest.raises(InvalidInputError):
        service.update_item(item.id, name="  ")
    assert service.get_item(item.id).name == "Drill"


def test_update_unknown_item(service):
    with pytest.raises(ItemNotFoundError):
        service.update_item("nope", name="x")


def test_photo_lifecycle_keeps_old_files(service, cache_dir):
    item = service.register("Camera", photo=b"first")
    first_ref = service.get_item(item.id).photo_path
    assert service.get_photo(item.id) == b"first"

    service.replace_photo(item.id, b"second")
    assert service.get_photo(item.id) == b"second"
    assert service.get_item(item.id).photo_path != first_ref
    # replaced files stay on disk
    assert (cache_dir / first_ref).read_bytes() == b"first"


def test_get_photo_without_photo(service):
    item = service.register("Tripod")
    with pytest.raises(PhotoNotFoundError):
        service.get_photo(item.id)


def test_replace_photo_checks_item_before_payload(service):
    with pytest.raises(ItemNotFoundError):
        service.replace_photo("nope", None)
    item = service.register("Tripod")
    with pytest.raises(InvalidInputError):
        service.replace_photo(item.id, None)


def test_delete(service, cache_dir):
    keep = service.register("Keep")
    gone = service.register("Gone", photo=b"img")
    ref = service.get_item(gone.id).photo_path

    removed = service.delete_item(gone.id)
    assert removed.id == gone.id
    assert [item.id for item in service.list_items()] == [keep.id]
    assert (cache_dir / ref).exists()


def test_delete_unknown_item_leaves_collection(service):
    service.register("Keep")
    with pytest.raises(ItemNotFoundError):
        service.delete_item("nope")
    assert len(service.list_items()) == 1


def test_search_appends_photo_note_only_in_result(service):
    item = service.register("Camera", "mirrorless", photo=b"img")
    result = service.search(item.id, include_photo_note=True, base_url="http://example.test")
    assert result.has_photo is True
    assert result.description == f"mirrorless\nPhoto: http://example.test/inventory/{item.id}/photo"
    assert service.get_item(item.id).description == "mirrorless"


def test_search_without_photo_leaves_description(service):
    item = service.register("Tripod", "aluminium")
    result = service.search(item.id, include_photo_note=True, base_url="http://example.test")
    assert result.has_photo is False
    assert result.description == "aluminium"


def test_search_unknown_item(service):
    with pytest.raises(ItemNotFoundError):
        service.search("nope")


def test_list_is_idempotent(service):
    service.register("a")
    service.register("b", photo=b"x")
    assert service.list_items() == service.list_items()


def test_photo_url():
    assert photo_url("http://localhost:3000/", "17") == "http://localhost:3000/inventory/17/photo"
