"""This module defines the read-only content catalog and its search.

The catalog serves the static tables from `cidadania_legal.constants.content`.
Searching never touches those tables: it builds filtered copies of the
categories that still have matching entries.
"""

from collections.abc import Sequence
from typing import TypeVar

from cidadania_legal.constants.content import (
    EMERGENCY_CONTACTS,
    FAQ_ENTRIES,
    GLOSSARY_CATEGORIES,
    OTHER_ORGANIZATIONS,
    PARTNER_ORGANIZATIONS,
    RIGHTS_CATEGORIES,
)
from cidadania_legal.exceptions.validation import InvalidInputError
from cidadania_legal.models.content import (
    CatalogCategory,
    CatalogEntry,
    EmergencyContact,
    FaqEntry,
    GlossaryCategory,
    GlossaryTerm,
    PartnerOrganization,
    RightsCategory,
    RightsTopic,
)

CategoryT = TypeVar("CategoryT", bound=CatalogCategory)


def _entry_matches(entry: CatalogEntry, needle: str) -> bool:
    return needle in entry.heading.casefold() or needle in entry.body.casefold()


def search(query: str, categories: Sequence[CategoryT]) -> tuple[CategoryT, ...]:
    """Filters categories down to the entries containing `query`.

    The query is matched as a literal, case-insensitive substring against
    the heading and the body of each entry. Categories left without entries
    are dropped. A blank query returns the categories unchanged.

    Args:
        query: The text typed by the user.
        categories: The categories to filter.

    Returns:
        The filtered categories, in their original order.
    """
    if not query or not query.strip():
        return tuple(categories)

    needle = query.casefold()
    filtered = []
    for category in categories:
        matching = tuple(entry for entry in category.entries if _entry_matches(entry, needle))
        if matching:
            filtered.append(category.with_entries(matching))
    return tuple(filtered)


def pick_entry(categories: Sequence[CatalogCategory], category_index: int, entry_index: int) -> CatalogEntry:
    """Returns the entry at a position of a (possibly filtered) category list.

    Args:
        categories: The categories as currently shown.
        category_index: The position of the category.
        entry_index: The position of the entry inside the category.

    Returns:
        The entry found at that position.

    Raises:
        InvalidInputError: If either position is out of range.
    """
    if not 0 <= category_index < len(categories):
        raise InvalidInputError(f"Category {category_index} does not exist.")
    entries = categories[category_index].entries
    if not 0 <= entry_index < len(entries):
        raise InvalidInputError(f"Entry {entry_index} does not exist in category {category_index}.")
    return entries[entry_index]


class ContentCatalog:
    """Serves the static legal content.

    The tables are shared, immutable and live for the whole process, so a
    catalog instance holds no state of its own.
    """

    def list_categories(self) -> tuple[RightsCategory, ...]:
        """Returns the rights categories, in display order."""
        return RIGHTS_CATEGORIES

    def list_glossary(self) -> tuple[GlossaryCategory, ...]:
        """Returns the glossary categories, in display order."""
        return GLOSSARY_CATEGORIES

    def list_faq(self) -> tuple[FaqEntry, ...]:
        """Returns the FAQ entries, in display order."""
        return FAQ_ENTRIES

    def list_partners(self) -> tuple[PartnerOrganization, ...]:
        """Returns the main partner organizations."""
        return PARTNER_ORGANIZATIONS

    def list_other_organizations(self) -> tuple[str, ...]:
        """Returns the names of other support organizations."""
        return OTHER_ORGANIZATIONS

    def list_emergency_contacts(self) -> tuple[EmergencyContact, ...]:
        """Returns the public emergency numbers."""
        return EMERGENCY_CONTACTS

    def search_categories(self, query: str) -> tuple[RightsCategory, ...]:
        """Searches the rights categories. See `search`."""
        return search(query, RIGHTS_CATEGORIES)

    def search_glossary(self, query: str) -> tuple[GlossaryCategory, ...]:
        """Searches the glossary categories. See `search`."""
        return search(query, GLOSSARY_CATEGORIES)

    def get_topic(self, category_index: int, topic_index: int) -> RightsTopic:
        """Returns the topic at the given position.

        Args:
            category_index: The position of the category.
            topic_index: The position of the topic inside the category.

        Returns:
            The selected topic.

        Raises:
            InvalidInputError: If either position is out of range.
        """
        topic = pick_entry(RIGHTS_CATEGORIES, category_index, topic_index)
        assert isinstance(topic, RightsTopic)
        return topic

    def get_term(self, category_index: int, term_index: int) -> GlossaryTerm:
        """Returns the glossary term at the given position.

        Args:
            category_index: The position of the glossary category.
            term_index: The position of the term inside the category.

        Returns:
            The selected term.

        Raises:
            InvalidInputError: If either position is out of range.
        """
        term = pick_entry(GLOSSARY_CATEGORIES, category_index, term_index)
        assert isinstance(term, GlossaryTerm)
        return term
