"""This module defines the local state of the list screens.

Rights, glossary and FAQ screens let the user expand items independently
(several may be open at once) and open an entry in a modal detail view. None
of this state touches the catalog: it lives in the screen object and is
discarded with it.
"""

from collections.abc import Hashable, Sequence
from typing import Generic, TypeVar

from cidadania_legal.exceptions.validation import InvalidInputError
from cidadania_legal.models.content import CatalogCategory, CatalogEntry, FaqEntry
from cidadania_legal.services.catalog import pick_entry, search

CategoryT = TypeVar("CategoryT", bound=CatalogCategory)


class ExpansionState:
    """Per-item expanded/collapsed flags, all collapsed by default."""

    def __init__(self) -> None:
        self._expanded: set[Hashable] = set()

    def is_expanded(self, key: Hashable) -> bool:
        return key in self._expanded

    def toggle(self, key: Hashable) -> bool:
        """Flips one item without affecting any other.

        Args:
            key: The identity of the item.

        Returns:
            The new expanded flag of the item.
        """
        if key in self._expanded:
            self._expanded.remove(key)
            return False
        self._expanded.add(key)
        return True


class DetailSelection:
    """The entry currently opened in the modal detail view, if any."""

    def __init__(self) -> None:
        self.selected: CatalogEntry | None = None

    def open(self, entry: CatalogEntry) -> None:
        self.selected = entry

    def dismiss(self) -> None:
        self.selected = None


class CatalogScreen(Generic[CategoryT]):
    """State of a searchable, expandable category list with a detail view.

    Categories are expanded by their label so the flag survives a search
    that changes their position in the list.
    """

    def __init__(self, categories: Sequence[CategoryT]):
        """Initializes the screen over a fixed set of categories.

        Args:
            categories: The full, unfiltered categories.
        """
        self._categories = tuple(categories)
        self.query = ""
        self.expansion = ExpansionState()
        self.detail = DetailSelection()

    @property
    def view(self) -> tuple[CategoryT, ...]:
        """The categories as currently shown, filtered by `query`."""
        return search(self.query, self._categories)

    def set_query(self, query: str) -> None:
        self.query = query

    def toggle(self, category_label: str) -> bool:
        return self.expansion.toggle(category_label)

    def is_expanded(self, category_label: str) -> bool:
        return self.expansion.is_expanded(category_label)

    def select(self, category_index: int, entry_index: int) -> CatalogEntry:
        """Opens the detail view for an entry of the current view.

        Args:
            category_index: The position of the category in `view`.
            entry_index: The position of the entry inside that category.

        Returns:
            The selected entry.

        Raises:
            InvalidInputError: If either position is out of range.
        """
        entry = pick_entry(self.view, category_index, entry_index)
        self.detail.open(entry)
        return entry

    def dismiss(self) -> None:
        self.detail.dismiss()

    def close(self) -> None:
        self.detail.dismiss()


class FaqScreen:
    """State of the FAQ list: one independent expansion flag per question."""

    def __init__(self, entries: Sequence[FaqEntry]):
        self.entries = tuple(entries)
        self.expansion = ExpansionState()

    def toggle(self, index: int) -> bool:
        if not 0 <= index < len(self.entries):
            raise InvalidInputError(f"Question {index} does not exist.")
        return self.expansion.toggle(index)

    def is_expanded(self, index: int) -> bool:
        return self.expansion.is_expanded(index)

    def close(self) -> None:
        pass
