from typing import Any

from cidadania_legal.models.navigation import Route
from cidadania_legal.services.browsing import FaqScreen
from cidadania_legal.services.screens import VisitorSession
from cidadania_legal.web.dependencies import get_visitor, is_htmx
from cidadania_legal.web.templates_config import templates
from fastapi import APIRouter, Depends, Request

router = APIRouter()


def _render(request: Request, screen: FaqScreen) -> Any:
    context = {"screen": screen}
    if is_htmx(request):
        return templates.TemplateResponse(request, "partials/faq_list.html", context)
    return templates.TemplateResponse(request, "faq.html", context)


@router.get(Route.FAQ.path, name="faq")
def faq(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Render the FAQ list."""
    with visitor.log_context():
        screen: FaqScreen = visitor.enter(Route.FAQ)
    return _render(request, screen)


@router.post(f"{Route.FAQ.path}/{{index}}/alternar", name="faq_toggle")
def toggle(request: Request, index: int, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Expand or collapse one question.

    Args:
        request: The request object.
        index: The position of the question.
        visitor: The visitor's session.

    Returns:
        The rendered FAQ list.
    """
    with visitor.log_context():
        screen: FaqScreen = visitor.enter(Route.FAQ)
        screen.toggle(index)
    return _render(request, screen)
