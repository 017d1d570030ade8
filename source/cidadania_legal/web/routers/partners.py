from typing import Any

from cidadania_legal.models.navigation import Route
from cidadania_legal.services import ContentCatalog
from cidadania_legal.services.screens import VisitorSession
from cidadania_legal.web.dependencies import get_visitor
from cidadania_legal.web.templates_config import templates
from fastapi import APIRouter, Depends, Request

router = APIRouter()


@router.get(Route.PARCEIROS.path, name="partners")
def partners(
    request: Request,
    visitor: VisitorSession = Depends(get_visitor),  # noqa: B008
    catalog: ContentCatalog = Depends(),  # noqa: B008
) -> Any:
    """Render the partners directory with emergency numbers and contact links."""
    with visitor.log_context():
        visitor.enter(Route.PARCEIROS)
    context = {
        "emergency_contacts": catalog.list_emergency_contacts(),
        "partners": catalog.list_partners(),
        "other_organizations": catalog.list_other_organizations(),
    }
    return templates.TemplateResponse(request, "partners.html", context)
