from __future__ import annotations

import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from inventory_api.core.config import Settings, settings_from_env
from inventory_api.domain.errors import InventoryError
from inventory_api.repositories.json_storage import InventoryRepository
from inventory_api.repositories.photo_store import PhotoStore
from inventory_api.routers import inventory as inventory_router
from inventory_api.routers import pages as pages_router
from inventory_api.services.inventory_service import InventoryService

logger = logging.getLogger("uvicorn.error")
access_logger = logging.getLogger("inventory_api.access")

BASE = os.path.dirname(__file__)
TEMPLATES_DIR = os.path.join(BASE, "templates")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and elapsed time."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response


async def _inventory_error_handler(request: Request, exc: InventoryError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", "invalid value")
    else:
        message = "Invalid request"
    return JSONResponse({"error": message}, status_code=400)


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return PlainTextResponse("Method not allowed", status_code=405, headers=exc.headers)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


def create_app(settings: Settings) -> FastAPI:
    """Build the application around an explicit Settings value."""
    repository = InventoryRepository(settings.cache_dir)
    repository.ensure_initialized()
    photos = PhotoStore(settings.cache_dir)

    app = FastAPI(
        title="Inventory API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.inventory_service = InventoryService(repository, photos)
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(InventoryError, _inventory_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    app.include_router(pages_router.router)
    app.include_router(inventory_router.router)

    logger.info("Inventory document: %s", repository.path)
    return app


def create_app_from_env() -> FastAPI:
    """Factory for ``uvicorn inventory_api.app:create_app_from_env --factory``."""
    return create_app(settings_from_env())
