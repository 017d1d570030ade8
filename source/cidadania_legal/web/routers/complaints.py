from typing import Any

from cidadania_legal.constants.messages import COMPLAINT_CONFIRMATION_TEXT, COMPLAINT_CONFIRMATION_TITLE
from cidadania_legal.models.complaints import ViolationType
from cidadania_legal.models.navigation import Route
from cidadania_legal.services.complaints import ComplaintSession
from cidadania_legal.services.screens import VisitorSession
from cidadania_legal.web.dependencies import get_visitor
from cidadania_legal.web.templates_config import templates
from fastapi import APIRouter, Depends, Form, Request

router = APIRouter()


def _render(request: Request, session: ComplaintSession) -> Any:
    context = {
        "session": session,
        "violation_types": list(ViolationType),
        "confirmation_title": COMPLAINT_CONFIRMATION_TITLE,
        "confirmation_text": COMPLAINT_CONFIRMATION_TEXT,
    }
    return templates.TemplateResponse(request, "complaint.html", context)


@router.get(Route.DENUNCIA.path, name="complaint")
def complaint(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Render the anonymous complaint form."""
    with visitor.log_context():
        session: ComplaintSession = visitor.enter(Route.DENUNCIA)
    return _render(request, session)


@router.post(Route.DENUNCIA.path, name="complaint_submit")
def submit(
    request: Request,
    description: str = Form("", alias="descricao"),  # noqa: B008
    violation_type: str = Form(ViolationType.DISCRIMINACAO.value, alias="tipo"),  # noqa: B008
    visitor: VisitorSession = Depends(get_visitor),  # noqa: B008
) -> Any:
    """Register an anonymous complaint and show the confirmation.

    Args:
        request: The request object.
        description: The description of the violation.
        violation_type: The label of the violation type.
        visitor: The visitor's session.

    Returns:
        The rendered confirmation.
    """
    with visitor.log_context():
        session: ComplaintSession = visitor.enter(Route.DENUNCIA)
        session.set_description(description)
        session.select_violation_type(violation_type)
        session.submit()
    return _render(request, session)


@router.post(f"{Route.DENUNCIA.path}/nova", name="complaint_reset")
def reset(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Return to the form to file another complaint."""
    with visitor.log_context():
        session: ComplaintSession = visitor.enter(Route.DENUNCIA)
        session.reset()
    return _render(request, session)
