from typing import Any

from cidadania_legal.models.navigation import Route
from cidadania_legal.services.chat import ChatSession
from cidadania_legal.services.screens import VisitorSession
from cidadania_legal.web.dependencies import get_visitor, is_htmx
from cidadania_legal.web.templates_config import templates
from fastapi import APIRouter, Depends, Form, Request

router = APIRouter()


def _render(request: Request, session: ChatSession) -> Any:
    context = {"session": session, "transcript": session.transcript}
    if is_htmx(request):
        return templates.TemplateResponse(request, "partials/chat_panel.html", context)
    return templates.TemplateResponse(request, "chat.html", context)


@router.get(Route.TIRA_DUVIDAS.path, name="chat")
def chat(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Render the Tira-Dúvidas conversation."""
    with visitor.log_context():
        session: ChatSession = visitor.enter(Route.TIRA_DUVIDAS)
    return _render(request, session)


@router.post(f"{Route.TIRA_DUVIDAS.path}/mensagens", name="chat_submit")
def submit(
    request: Request,
    question: str = Form("", alias="pergunta"),  # noqa: B008
    visitor: VisitorSession = Depends(get_visitor),  # noqa: B008
) -> Any:
    """Send a question to the simulated assistant.

    Blank questions, or questions sent while a reply is pending, are ignored.

    Args:
        request: The request object.
        question: The text typed by the visitor.
        visitor: The visitor's session.

    Returns:
        The rendered conversation.
    """
    with visitor.log_context():
        session: ChatSession = visitor.enter(Route.TIRA_DUVIDAS)
        session.set_input(question)
        session.submit()
    return _render(request, session)


@router.get(f"{Route.TIRA_DUVIDAS.path}/conversa", name="chat_transcript")
def transcript(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Render the current conversation, polled while a reply is pending.

    Polling never starts a new conversation: if the visitor already left the
    chat screen there is nothing to show.
    """
    session: ChatSession | None = visitor.active(Route.TIRA_DUVIDAS)
    if session is None:
        return templates.TemplateResponse(request, "404.html", status_code=404)
    return templates.TemplateResponse(
        request, "partials/chat_panel.html", {"session": session, "transcript": session.transcript}
    )
