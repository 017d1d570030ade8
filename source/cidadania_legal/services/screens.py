"""This module manages the lifetime of per-screen state.

Each visitor has at most one active screen. Entering a different screen
closes the state of the previous one (cancelling any simulated reply or
generation still pending) and starts a fresh one, so nothing the visitor
typed survives navigation.
"""

import threading
from collections import OrderedDict
from contextlib import AbstractContextManager
from typing import Any, Protocol

from cidadania_legal.models.navigation import Route
from cidadania_legal.providers.config import Config, ConfigProvider
from cidadania_legal.providers.logging import Logger, LoggingProvider
from cidadania_legal.providers.scheduler import Scheduler, ThreadingScheduler
from cidadania_legal.services.browsing import CatalogScreen, FaqScreen
from cidadania_legal.services.catalog import ContentCatalog
from cidadania_legal.services.chat import ChatSession
from cidadania_legal.services.complaints import ComplaintSession
from cidadania_legal.services.documents import DraftSession


class ScreenState(Protocol):
    """State owned by one visit of a screen."""

    def close(self) -> None:
        """Releases the state when the visitor leaves the screen."""


class ScreenFactory:
    """Builds the state object backing each screen."""

    def __init__(self, scheduler: Scheduler, config: Config, catalog: ContentCatalog | None = None):
        self.scheduler = scheduler
        self.config = config
        self.catalog = catalog or ContentCatalog()

    def create(self, route: Route) -> ScreenState | None:
        """Creates fresh state for `route`.

        Args:
            route: The screen being entered.

        Returns:
            The new state, or None for screens without local state.
        """
        match route:
            case Route.MEUS_DIREITOS:
                return CatalogScreen(self.catalog.list_categories())
            case Route.GLOSSARIO:
                return CatalogScreen(self.catalog.list_glossary())
            case Route.FAQ:
                return FaqScreen(self.catalog.list_faq())
            case Route.TIRA_DUVIDAS:
                return ChatSession(scheduler=self.scheduler, config=self.config)
            case Route.GERADOR_DOCS:
                return DraftSession(scheduler=self.scheduler, config=self.config)
            case Route.DENUNCIA:
                return ComplaintSession()
            case _:
                return None


class VisitorSession:
    """Tracks the active screen of a single visitor."""

    def __init__(self, visitor_id: str, factory: ScreenFactory):
        self.visitor_id = visitor_id
        self.factory = factory
        self.logger: Logger = LoggingProvider().get_logger()
        self.route: Route | None = None
        self.state: ScreenState | None = None
        self._lock = threading.Lock()

    def enter(self, route: Route) -> Any:
        """Navigates to `route` and returns its state.

        Re-entering the active screen keeps its state. Entering another one
        closes the current state first.

        Args:
            route: The screen being entered.

        Returns:
            The state of the screen, or None for screens without local state.
        """
        with self._lock:
            if self.route == route:
                return self.state

            self._close_current()
            self.logger.debug(f"Navigating from {self.route} to {route}.")
            self.route = route
            self.state = self.factory.create(route)
            return self.state

    def log_context(self) -> AbstractContextManager[None]:
        """Binds this visitor's id as the correlation ID of log lines."""
        return LoggingProvider().set_correlation_id(self.visitor_id)

    def active(self, route: Route) -> Any:
        """Returns the state of `route` only if it is the active screen.

        Args:
            route: The screen whose state is wanted.

        Returns:
            The state, or None when another screen is active.
        """
        with self._lock:
            if self.route != route:
                return None
            return self.state

    def _close_current(self) -> None:
        if self.state is not None:
            self.state.close()
        self.state = None

    def close(self) -> None:
        """Closes the active screen, leaving the visitor on no screen."""
        with self._lock:
            self._close_current()
            self.route = None


class SessionStore:
    """Keeps the visitor sessions of the web shell in memory.

    The store is bounded: when full, the least recently used session is
    closed and evicted to make room for a new visitor.
    """

    def __init__(self, scheduler: Scheduler | None = None, config: Config | None = None):
        """Initializes an empty store.

        Args:
            scheduler: Shared by the flows of every visitor. Defaults to timer threads.
            config: The application config. Loaded from the environment if omitted.
        """
        self.config = config or ConfigProvider.get_config()
        self.logger: Logger = LoggingProvider().get_logger()
        self.factory = ScreenFactory(scheduler or ThreadingScheduler(), self.config)
        self._sessions: OrderedDict[str, VisitorSession] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, visitor_id: str) -> VisitorSession:
        """Returns the session of a visitor, creating it on first use.

        Args:
            visitor_id: The identifier carried by the visitor's cookie.

        Returns:
            The visitor's session.
        """
        with self._lock:
            session = self._sessions.get(visitor_id)
            if session is not None:
                self._sessions.move_to_end(visitor_id)
                return session

            while len(self._sessions) >= self.config.WEB_MAX_SESSIONS:
                evicted_id, evicted = self._sessions.popitem(last=False)
                evicted.close()
                self.logger.info(f"Evicted idle visitor session {evicted_id}.")

            session = VisitorSession(visitor_id, self.factory)
            self._sessions[visitor_id] = session
            return session

    def close_all(self) -> None:
        """Closes every session, cancelling all pending simulations."""
        with self._lock:
            for session in self._sessions.values():
                session.close()
            self._sessions.clear()
