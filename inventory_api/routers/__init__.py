"""
FastAPI routers for the inventory API.

Each module exposes an APIRouter included by ``inventory_api.app.create_app``.
"""
