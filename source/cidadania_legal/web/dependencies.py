"""Request-scoped dependencies of the web shell."""

from cidadania_legal.services import SessionStore, VisitorSession
from fastapi import Depends, Request


def get_session_store(request: Request) -> SessionStore:
    """Returns the session store owned by the application.

    Args:
        request: The request object.

    Returns:
        The application's session store.
    """
    store: SessionStore = request.app.state.session_store
    return store


def get_visitor(request: Request, store: SessionStore = Depends(get_session_store)) -> VisitorSession:  # noqa: B008
    """Returns the session of the visitor making the request.

    The visitor id is assigned by the cookie middleware in `web.main`.

    Args:
        request: The request object.
        store: The session store.

    Returns:
        The visitor's session.
    """
    return store.get(request.state.visitor_id)


def is_htmx(request: Request) -> bool:
    """Whether the request was issued by HTMX and expects a partial."""
    return bool(request.headers.get("HX-Request"))
