"""Main web application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path

from cidadania_legal.exceptions.validation import InvalidInputError
from cidadania_legal.providers.config import ConfigProvider
from cidadania_legal.providers.logging import LoggingProvider
from cidadania_legal.services import SessionStore
from cidadania_legal.web.routers import catalog, chat, complaints, documents, faq, home, partners
from cidadania_legal.web.templates_config import templates
from fastapi import FastAPI, Request, Response
from fastapi.staticfiles import StaticFiles


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Closes every visitor session on shutdown so no timer outlives the app.

    Args:
        app: The application.

    Yields:
        None.
    """
    yield
    app.state.session_store.close_all()


def create_app(session_store: SessionStore | None = None) -> FastAPI:
    """Builds the web application.

    Args:
        session_store: The store holding visitor sessions. A new one is
            created when omitted.

    Returns:
        The configured FastAPI application.
    """
    config = ConfigProvider.get_config()
    logger = LoggingProvider().get_logger()

    app = FastAPI(title="Cidadania Legal", lifespan=lifespan)
    app.state.session_store = session_store if session_store is not None else SessionStore(config=config)

    static_path = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=static_path), name="static")

    @app.middleware("http")
    async def bind_visitor(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        cookie_value = request.cookies.get(config.WEB_SESSION_COOKIE)
        request.state.visitor_id = cookie_value or uuid.uuid4().hex
        response = await call_next(request)
        if cookie_value is None:
            response.set_cookie(config.WEB_SESSION_COOKIE, request.state.visitor_id, httponly=True, samesite="lax")
        return response

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> Response:
        logger.warning(f"Invalid input on {request.url.path}: {exc}")
        return templates.TemplateResponse(request, "404.html", status_code=404)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint.

        Returns:
            Status dictionary.
        """
        return {"status": "ok"}

    app.include_router(home.router)
    app.include_router(catalog.router)
    app.include_router(faq.router)
    app.include_router(chat.router)
    app.include_router(documents.router)
    app.include_router(complaints.router)
    app.include_router(partners.router)
    return app


app = create_app()
