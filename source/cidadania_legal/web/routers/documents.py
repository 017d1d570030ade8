from typing import Any

from cidadania_legal.models.documents import DraftField
from cidadania_legal.models.navigation import Route
from cidadania_legal.services.documents import DraftSession
from cidadania_legal.services.screens import VisitorSession
from cidadania_legal.web.dependencies import get_visitor, is_htmx
from cidadania_legal.web.templates_config import templates
from fastapi import APIRouter, Depends, Form, Request

router = APIRouter()


def _render(request: Request, session: DraftSession) -> Any:
    context = {"session": session, "fields": session.fields, "DraftField": DraftField}
    if is_htmx(request):
        return templates.TemplateResponse(request, "partials/draft_panel.html", context)
    return templates.TemplateResponse(request, "documents.html", context)


@router.get(Route.GERADOR_DOCS.path, name="documents")
def documents(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Render the document generator form."""
    with visitor.log_context():
        session: DraftSession = visitor.enter(Route.GERADOR_DOCS)
    return _render(request, session)


@router.post(f"{Route.GERADOR_DOCS.path}/gerar", name="documents_generate")
def generate(
    request: Request,
    nome: str = Form(""),  # noqa: B008
    cidade: str = Form(""),  # noqa: B008
    assunto: str = Form(""),  # noqa: B008
    descricao: str = Form(""),  # noqa: B008
    visitor: VisitorSession = Depends(get_visitor),  # noqa: B008
) -> Any:
    """Store the form values and start the simulated generation.

    Args:
        request: The request object.
        nome: The visitor's full name.
        cidade: The visitor's city.
        assunto: The subject of the letter.
        descricao: The description of the problem.
        visitor: The visitor's session.

    Returns:
        The rendered generator, showing progress while generating.
    """
    with visitor.log_context():
        session: DraftSession = visitor.enter(Route.GERADOR_DOCS)
        values = {
            DraftField.NOME: nome,
            DraftField.CIDADE: cidade,
            DraftField.ASSUNTO: assunto,
            DraftField.DESCRICAO: descricao,
        }
        for field, value in values.items():
            session.set_field(field, value)
        session.generate()
    return _render(request, session)


@router.get(f"{Route.GERADOR_DOCS.path}/rascunho", name="documents_draft")
def draft(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Render the draft panel, polled while the generation is running."""
    session: DraftSession | None = visitor.active(Route.GERADOR_DOCS)
    if session is None:
        return templates.TemplateResponse(request, "404.html", status_code=404)
    context = {"session": session, "fields": session.fields, "DraftField": DraftField}
    return templates.TemplateResponse(request, "partials/draft_panel.html", context)


@router.post(f"{Route.GERADOR_DOCS.path}/limpar", name="documents_reset")
def reset(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
    """Clear the form and discard the draft."""
    with visitor.log_context():
        session: DraftSession = visitor.enter(Route.GERADOR_DOCS)
        session.reset()
    return _render(request, session)
