"""This module initializes the services package.

It re-exports the catalog and the screen flows to provide a simpler, flatter
import structure for the web shell and the CLI.
"""

from cidadania_legal.services.browsing import CatalogScreen, ExpansionState, FaqScreen
from cidadania_legal.services.catalog import ContentCatalog, search
from cidadania_legal.services.chat import ChatSession
from cidadania_legal.services.complaints import ComplaintSession
from cidadania_legal.services.documents import DraftSession
from cidadania_legal.services.screens import SessionStore, VisitorSession

__all__ = [
    "CatalogScreen",
    "ChatSession",
    "ComplaintSession",
    "ContentCatalog",
    "DraftSession",
    "ExpansionState",
    "FaqScreen",
    "SessionStore",
    "VisitorSession",
    "search",
]
