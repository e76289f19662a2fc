"""
web/routes.py -- Jinja2 template routes for the Cyber Kittens landing page.

These routes serve server-rendered HTML. They share app.state with the API
routes but return HTML instead of JSON.

Routes:
  GET  /   -- public welcome page listing the API endpoints
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from auth.dependencies import try_get_current_user

logger = logging.getLogger("cyberkittens.web")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
router = APIRouter()

# Endpoint table rendered on the welcome page. Order is display order.
_ENDPOINTS: list[tuple[str, str, str]] = [
    ("POST", "/register", "Create an account and receive a token"),
    ("POST", "/login", "Log in and receive a token"),
    ("GET", "/kittens", "List your kittens"),
    ("GET", "/kittens/1", "Read one of your kittens"),
    ("POST", "/kittens", "Create a kitten"),
    ("DELETE", "/kittens/:id", "Delete one of your kittens"),
]


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request) -> HTMLResponse:
    """Public welcome page. Greets the caller by name when a valid token is sent."""
    user = try_get_current_user(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"endpoints": _ENDPOINTS, "username": user.username if user else None},
    )
