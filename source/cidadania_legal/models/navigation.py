"""This module defines the navigation targets of the application."""

from enum import StrEnum


class Route(StrEnum):
    """Symbolic names of the screens, independent of how they are served."""

    HOME = "home"
    MEUS_DIREITOS = "meus_direitos"
    TIRA_DUVIDAS = "tira_duvidas"
    GERADOR_DOCS = "gerador_docs"
    FAQ = "faq"
    DENUNCIA = "denuncia"
    PARCEIROS = "parceiros"
    GLOSSARIO = "glossario"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value

    @property
    def path(self) -> str:
        """The URL path the web shell serves this screen under."""
        return ROUTE_PATHS[self]


ROUTE_PATHS: dict[Route, str] = {
    Route.HOME: "/",
    Route.MEUS_DIREITOS: "/meus-direitos",
    Route.TIRA_DUVIDAS: "/tira-duvidas",
    Route.GERADOR_DOCS: "/gerador-documentos",
    Route.FAQ: "/faq",
    Route.DENUNCIA: "/denuncia",
    Route.PARCEIROS: "/parceiros",
    Route.GLOSSARIO: "/glossario",
}
