"""Tests for the catalog command group."""

import json

from cidadania_legal.cli import create_cli
from click.testing import CliRunner


def test_categories_text() -> None:
    """Tests listing the rights categories as text."""
    result = CliRunner().invoke(create_cli(), ["catalog", "categories"])

    assert result.exit_code == 0
    assert "Direito do Consumidor" in result.output
    assert "  - Horas Extras" in result.output


def test_categories_glossary_json() -> None:
    """Tests listing the glossary as JSON."""
    result = CliRunner().invoke(create_cli(), ["--output", "json", "catalog", "categories", "--glossario"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [category["name"] for category in payload][0] == "Direito de Família"
    assert payload[0]["icon"] == "family_restroom"


def test_search_json() -> None:
    """Tests that search output only carries matching entries."""
    result = CliRunner().invoke(create_cli(), ["--output", "json", "catalog", "search", "HORAS"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [category["title"] for category in payload] == ["Direito Trabalhista"]
    assert [topic["title"] for topic in payload[0]["topics"]] == ["Horas Extras"]


def test_search_without_results() -> None:
    """Tests the message printed when nothing matches."""
    result = CliRunner().invoke(create_cli(), ["catalog", "search", "zzzz"])

    assert result.exit_code == 0
    assert 'Nenhum termo encontrado para "zzzz"' in result.output


def test_search_without_results_json() -> None:
    """Tests that an empty search is an empty JSON list."""
    result = CliRunner().invoke(create_cli(), ["--output", "json", "catalog", "search", "zzzz"])

    assert result.exit_code == 0
    assert json.loads(result.output) == []


def test_show_topic() -> None:
    """Tests printing a topic by position."""
    result = CliRunner().invoke(create_cli(), ["catalog", "show", "1", "2"])

    assert result.exit_code == 0
    assert result.output.startswith("Horas Extras\n")


def test_show_term_json() -> None:
    """Tests printing a glossary term as JSON."""
    result = CliRunner().invoke(create_cli(), ["--output", "json", "catalog", "show", "--glossario", "1", "2"])

    assert result.exit_code == 0
    assert json.loads(result.output)["heading"] == "FGTS"


def test_show_out_of_range_aborts() -> None:
    """Tests that a missing entry aborts with the error message."""
    result = CliRunner().invoke(create_cli(), ["catalog", "show", "7", "0"])

    assert result.exit_code == 1
    assert "Category 7 does not exist." in result.output


def test_faq() -> None:
    """Tests printing the FAQ."""
    result = CliRunner().invoke(create_cli(), ["catalog", "faq"])

    assert result.exit_code == 0
    assert "O que é a Defensoria Pública?" in result.output


def test_partners_text_and_json() -> None:
    """Tests printing the partners directory in both formats."""
    text = CliRunner().invoke(create_cli(), ["catalog", "partners"])
    as_json = CliRunner().invoke(create_cli(), ["--output", "json", "catalog", "partners"])

    assert "190 - Polícia | 193 - Bombeiros | 192 - SAMU" in text.output
    assert "Telefone: 129" in text.output
    payload = json.loads(as_json.output)
    assert payload["partners"][0]["website"] == "https://www.defensoria.sp.def.br/"
    assert "Casa da Mulher Brasileira" in payload["other_organizations"]
