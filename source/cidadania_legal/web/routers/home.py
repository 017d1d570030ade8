from typing import Any

from cidadania_legal.models.navigation import Route
from cidadania_legal.services.screens import VisitorSession
from cidadania_legal.web.dependencies import get_visitor
from cidadania_legal.web.templates_config import templates
from fastapi import APIRouter, Depends, Request

router = APIRouter()


@router.get(Route.HOME.path, name="home")
def home(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Render the home page, leaving whatever screen was active."""
    with visitor.log_context():
        visitor.enter(Route.HOME)
    return templates.TemplateResponse(request, "home.html")
