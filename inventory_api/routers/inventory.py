from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel

from inventory_api.core.utils import is_truthy, request_base_url
from inventory_api.domain.items import InventoryItem
from inventory_api.services.inventory_service import (
    PHOTO_CONTENT_TYPE,
    InventoryService,
    photo_url,
)

router = APIRouter(tags=["inventory"])


class ItemUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


def _get_inventory_service(request: Request) -> InventoryService:
    svc = getattr(getattr(request.app, "state", None), "inventory_service", None)
    if not svc:
        raise RuntimeError("InventoryService not configured")
    return svc


def _read_upload(upload: UploadFile | None) -> bytes | None:
    # browsers send an empty, nameless part when the file input is left blank
    if upload is None or not upload.filename:
        return None
    return upload.file.read()


def _item_payload(item: InventoryItem, base_url: str) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "description": item.description,
        "photoUrl": photo_url(base_url, item.id) if item.has_photo else None,
    }


@router.post("/register", status_code=201, summary="Register a new item")
def register_item(
    request: Request,
    inventory_name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    photo: UploadFile | None = File(None),
):
    svc = _get_inventory_service(request)
    item = svc.register(inventory_name, description, _read_upload(photo))
    return {"message": "Created", **_item_payload(item, request_base_url(request))}


@router.get("/inventory", summary="List all items")
def list_items(request: Request):
    svc = _get_inventory_service(request)
    base_url = request_base_url(request)
    return [_item_payload(item, base_url) for item in svc.list_items()]


@router.get("/inventory/{item_id}", summary="Get one item")
def get_item(item_id: str, request: Request):
    svc = _get_inventory_service(request)
    return _item_payload(svc.get_item(item_id), request_base_url(request))


@router.put("/inventory/{item_id}", summary="Update name and/or description")
def update_item(item_id: str, request: Request, payload: Optional[ItemUpdate] = None):
    svc = _get_inventory_service(request)
    changes = payload or ItemUpdate()
    item = svc.update_item(item_id, name=changes.name, description=changes.description)
    return {"message": "Updated", "id": item.id, "name": item.name, "description": item.description}


@router.get(
    "/inventory/{item_id}/photo",
    summary="Get the item photo",
    response_class=Response,
    responses={200: {"content": {PHOTO_CONTENT_TYPE: {}}}},
)
def get_item_photo(item_id: str, request: Request):
    svc = _get_inventory_service(request)
    data = svc.get_photo(item_id)
    return Response(content=data, media_type=PHOTO_CONTENT_TYPE, headers={"Content-Disposition": "inline"})


@router.put("/inventory/{item_id}/photo", summary="Replace the item photo")
def replace_item_photo(item_id: str, request: Request, photo: UploadFile | None = File(None)):
    svc = _get_inventory_service(request)
    item = svc.replace_photo(item_id, _read_upload(photo))
    return {"message": "Photo updated", "photoUrl": photo_url(request_base_url(request), item.id)}


@router.delete("/inventory/{item_id}", summary="Delete an item")
def delete_item(item_id: str, request: Request):
    svc = _get_inventory_service(request)
    removed = svc.delete_item(item_id)
    return {"message": "Deleted", "id": removed.id}


@router.post("/search", summary="Find an item by id")
def search_item(request: Request, item_id: str = Form("", alias="id"), has_photo: Optional[str] = Form(None)):
    svc = _get_inventory_service(request)
    result = svc.search(item_id, include_photo_note=is_truthy(has_photo), base_url=request_base_url(request))
    return {
        "id": result.item.id,
        "name": result.item.name,
        "description": result.description,
        "hasPhoto": result.has_photo,
    }
