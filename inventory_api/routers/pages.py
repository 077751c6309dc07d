"""HTML forms for registering and searching items from a browser."""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter(prefix="", tags=["pages"], include_in_schema=False)


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


@router.get("/RegisterForm.html", response_class=HTMLResponse)
def register_form(request: Request):
    return _templates(request).TemplateResponse(request, "register_form.html", {"title": "Register item"})


@router.get("/SearchForm.html", response_class=HTMLResponse)
def search_form(request: Request):
    return _templates(request).TemplateResponse(request, "search_form.html", {"title": "Search item"})
