from __future__ import annotations

from inventory_api.domain.items import InventoryItem, is_valid_name, next_item_id


def test_next_item_id_uses_timestamp_when_free():
    assert next_item_id([], now_ms=1700000000000) == "1700000000000"


def test_next_item_id_moves_past_existing_ids():
    existing = [InventoryItem(id="1700000000005", name="a"), InventoryItem(id="legacy", name="b")]
    assert next_item_id(existing, now_ms=1700000000000) == "1700000000006"
    assert next_item_id(existing, now_ms=1700000000005) == "1700000000006"


def test_record_round_trip_keeps_camel_case_photo_key():
    item = InventoryItem(id="1", name="Drill", description="cordless", photo_path="abc")
    record = item.to_record()
    assert record == {"id": "1", "name": "Drill", "description": "cordless", "photoPath": "abc"}
    assert InventoryItem.from_record(record) == item


def test_from_record_fills_missing_fields():
    item = InventoryItem.from_record({"id": 42})
    assert item.id == "42"
    assert item.description == ""
    assert item.photo_path is None
    assert item.has_photo is False


def test_is_valid_name():
    assert is_valid_name("Drill")
    assert not is_valid_name("   ")
    assert not is_valid_name(None)


def test_next_item_id_ignores_non_decimal_ids():
    existing = [InventoryItem(id="²", name="odd"), InventoryItem(id="1700000000003", name="a")]
    assert next_item_id(existing, now_ms=1700000000000) == "1700000000004"


def test_from_record_drops_non_string_photo_reference():
    assert InventoryItem.from_record({"id": "1", "photoPath": 7}).photo_path is None
    assert InventoryItem.from_record({"id": "1", "photoPath": {"x": 1}}).photo_path is None
    assert InventoryItem.from_record({"id": "1", "photoPath": "abc"}).photo_path == "abc"
