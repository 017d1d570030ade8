"""Routes of the searchable category screens: rights and glossary.

Both screens share the same behavior (search, independent expansion, modal
detail) and only differ in their content and headings, so their routes are
registered by the same function.
"""

from dataclasses import dataclass
from typing import Any

from cidadania_legal.exceptions.validation import InvalidInputError
from cidadania_legal.models.navigation import Route
from cidadania_legal.services.browsing import CatalogScreen
from cidadania_legal.services.screens import VisitorSession
from cidadania_legal.web import strings
from cidadania_legal.web.dependencies import get_visitor, is_htmx
from cidadania_legal.web.templates_config import templates
from fastapi import APIRouter, Depends, Query, Request

router = APIRouter()


@dataclass(frozen=True)
class CatalogPage:
    """Headings and route of one category screen."""

    route: Route
    title: str
    subtitle: str
    search_placeholder: str


RIGHTS_PAGE = CatalogPage(
    route=Route.MEUS_DIREITOS,
    title=strings.RIGHTS_TITLE,
    subtitle=strings.RIGHTS_SUBTITLE,
    search_placeholder=strings.RIGHTS_SEARCH_PLACEHOLDER,
)

GLOSSARY_PAGE = CatalogPage(
    route=Route.GLOSSARIO,
    title=strings.GLOSSARY_TITLE,
    subtitle=strings.GLOSSARY_SUBTITLE,
    search_placeholder=strings.GLOSSARY_SEARCH_PLACEHOLDER,
)


def _render(request: Request, page: CatalogPage, screen: CatalogScreen) -> Any:
    context = {"page": page, "screen": screen, "categories": screen.view}
    if is_htmx(request):
        return templates.TemplateResponse(request, "partials/catalog_body.html", context)
    return templates.TemplateResponse(request, "catalog.html", context)


def _register(page: CatalogPage) -> None:
    path = page.route.path
    name = page.route.value

    @router.get(path, name=name)
    def show(
        request: Request,
        query: str | None = Query(None, alias="q"),  # noqa: B008
        visitor: VisitorSession = Depends(get_visitor),  # noqa: B008
    ) -> Any:
        """Render the category list, filtered by the search query when one is given."""
        with visitor.log_context():
            screen: CatalogScreen = visitor.enter(page.route)
            if query is not None:
                screen.set_query(query)
        return _render(request, page, screen)

    @router.post(f"{path}/categorias/{{index}}/alternar", name=f"{name}_toggle")
    def toggle(request: Request, index: int, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
        """Expand or collapse one category of the current view."""
        with visitor.log_context():
            screen: CatalogScreen = visitor.enter(page.route)
            view = screen.view
            if not 0 <= index < len(view):
                raise InvalidInputError(f"Category {index} does not exist.")
            screen.toggle(view[index].label)
        return _render(request, page, screen)

    @router.post(f"{path}/itens/{{category_index}}/{{entry_index}}", name=f"{name}_select")
    def select(
        request: Request,
        category_index: int,
        entry_index: int,
        visitor: VisitorSession = Depends(get_visitor),  # noqa: B008
    ) -> Any:
        """Open the detail view of one entry."""
        with visitor.log_context():
            screen: CatalogScreen = visitor.enter(page.route)
            screen.select(category_index, entry_index)
        return _render(request, page, screen)

    @router.post(f"{path}/detalhe/fechar", name=f"{name}_dismiss")
    def dismiss(request: Request, visitor: VisitorSession = Depends(get_visitor)) -> Any:  # noqa: B008
        """Close the detail view, leaving the list as it was."""
        with visitor.log_context():
            screen: CatalogScreen = visitor.enter(page.route)
            screen.dismiss()
        return _render(request, page, screen)


_register(RIGHTS_PAGE)
_register(GLOSSARY_PAGE)
