"""Unit tests for the content catalog and its search."""

import pytest
from cidadania_legal.constants.content import GLOSSARY_CATEGORIES, RIGHTS_CATEGORIES
from cidadania_legal.exceptions.validation import InvalidInputError
from cidadania_legal.models.content import GlossaryTerm, RightsTopic
from cidadania_legal.services.catalog import ContentCatalog, search


@pytest.fixture
def catalog() -> ContentCatalog:
    """Fixture for the content catalog."""
    return ContentCatalog()


@pytest.mark.parametrize("query", ["", "   ", "\t"])
def test_blank_query_returns_categories_unchanged(query: str) -> None:
    """Tests that a blank query is the identity."""
    assert search(query, RIGHTS_CATEGORIES) == RIGHTS_CATEGORIES


@pytest.mark.parametrize("query", ["direito", "a", "justa", "xyz-não-existe", "Defensoria"])
def test_search_never_returns_empty_categories(query: str) -> None:
    """Tests that every category in a result keeps at least one entry."""
    for categories in (RIGHTS_CATEGORIES, GLOSSARY_CATEGORIES):
        assert all(category.entries for category in search(query, categories))


def test_search_is_case_insensitive() -> None:
    """Tests that the query matches regardless of case."""
    assert search("CONSUMIDOR", RIGHTS_CATEGORIES) == search("consumidor", RIGHTS_CATEGORIES)
    assert search("FGTS", GLOSSARY_CATEGORIES) == search("fgts", GLOSSARY_CATEGORIES)


def test_search_matches_title_and_body() -> None:
    """Tests that entries match by heading or by body."""
    by_title = search("Horas Extras", RIGHTS_CATEGORIES)
    by_body = search("Lei Maria da Penha", RIGHTS_CATEGORIES)

    assert [category.label for category in by_title] == ["Direito Trabalhista"]
    assert [entry.heading for entry in by_title[0].entries] == ["Horas Extras"]
    assert [category.label for category in by_body] == ["Violência Doméstica"]


def test_search_treats_query_as_literal_text() -> None:
    """Tests that regex metacharacters are not interpreted."""
    assert search(".*", RIGHTS_CATEGORIES) == ()
    assert search("(", GLOSSARY_CATEGORIES) != ()


def test_search_does_not_mutate_source() -> None:
    """Tests that filtering leaves the catalog tables untouched."""
    before = [len(category.entries) for category in RIGHTS_CATEGORIES]

    search("demissão", RIGHTS_CATEGORIES)

    assert [len(category.entries) for category in RIGHTS_CATEGORIES] == before


def test_search_without_matches_returns_empty() -> None:
    """Tests that no match is an empty result, not an error."""
    assert search("zzzzzz", RIGHTS_CATEGORIES) == ()


def test_catalog_content(catalog: ContentCatalog) -> None:
    """Tests the fixed tables served by the catalog."""
    assert [category.label for category in catalog.list_categories()] == [
        "Direito do Consumidor",
        "Direito Trabalhista",
        "Violência Doméstica",
    ]
    assert len(catalog.list_glossary()) == 5
    assert len(catalog.list_faq()) == 4
    assert [partner.phone for partner in catalog.list_partners()] == ["129", "151", "180", "100", "127"]
    assert [str(contact) for contact in catalog.list_emergency_contacts()] == [
        "190 - Polícia",
        "193 - Bombeiros",
        "192 - SAMU",
    ]
    assert catalog.list_other_organizations()


def test_catalog_search_methods(catalog: ContentCatalog) -> None:
    """Tests the catalog shortcuts over `search`."""
    assert catalog.search_categories("") == catalog.list_categories()
    assert [category.label for category in catalog.search_glossary("habeas")] == ["Termos Gerais"]


def test_get_topic_and_term(catalog: ContentCatalog) -> None:
    """Tests addressing entries by position."""
    topic = catalog.get_topic(1, 0)
    term = catalog.get_term(1, 2)

    assert isinstance(topic, RightsTopic)
    assert topic.title == "Demissão Sem Justa Causa"
    assert isinstance(term, GlossaryTerm)
    assert term.term == "FGTS"


@pytest.mark.parametrize("category_index, entry_index", [(-1, 0), (3, 0), (0, 99), (0, -1)])
def test_get_topic_out_of_range(catalog: ContentCatalog, category_index: int, entry_index: int) -> None:
    """Tests that out-of-range positions raise InvalidInputError."""
    with pytest.raises(InvalidInputError):
        catalog.get_topic(category_index, entry_index)
