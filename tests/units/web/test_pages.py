"""Unit tests for web pages."""

from collections.abc import Generator

import pytest
from cidadania_legal.providers.config import Config
from cidadania_legal.services.screens import SessionStore
from cidadania_legal.web.main import create_app
from fastapi.testclient import TestClient

HTMX = {"HX-Request": "true"}


@pytest.fixture
def store(scheduler, config: Config) -> SessionStore:
    """Create a session store driven by the manual scheduler."""
    return SessionStore(scheduler=scheduler, config=config)


@pytest.fixture
def client(store: SessionStore) -> Generator[TestClient, None, None]:
    """Create a test client over a fresh application."""
    with TestClient(create_app(session_store=store)) as client:
        yield client


def test_home(client: TestClient) -> None:
    """Test the home page."""
    response = client.get("/")
    assert response.status_code == 200
    assert "Conheça Seus Direitos" in response.text
    assert 'href="/tira-duvidas"' in response.text


def test_rights_list_starts_collapsed(client: TestClient) -> None:
    """Test the rights page lists categories without their topics."""
    response = client.get("/meus-direitos")
    assert response.status_code == 200
    assert "Direito do Consumidor" in response.text
    assert "Produto com Defeito" not in response.text


def test_rights_search(client: TestClient) -> None:
    """Test the rights search keeps only matching categories."""
    response = client.get("/meus-direitos?q=HORAS")
    assert "Direito Trabalhista" in response.text
    assert "Direito do Consumidor" not in response.text


def test_rights_search_without_results(client: TestClient) -> None:
    """Test the message shown when nothing matches."""
    response = client.get("/meus-direitos?q=zzzz")
    assert "Nenhum termo encontrado" in response.text


def test_rights_search_htmx_renders_partial(client: TestClient) -> None:
    """Test that HTMX requests only receive the list."""
    response = client.get("/meus-direitos?q=horas", headers=HTMX)
    assert response.status_code == 200
    assert "<html" not in response.text
    assert "Direito Trabalhista" in response.text


def test_toggle_category(client: TestClient) -> None:
    """Test expanding and collapsing a category."""
    expanded = client.post("/meus-direitos/categorias/0/alternar", headers=HTMX)
    assert "Produto com Defeito" in expanded.text

    collapsed = client.post("/meus-direitos/categorias/0/alternar", headers=HTMX)
    assert "Produto com Defeito" not in collapsed.text


def test_toggle_unknown_category(client: TestClient) -> None:
    """Test that an unknown category is a 404."""
    response = client.post("/meus-direitos/categorias/9/alternar")
    assert response.status_code == 404
    assert "Página não encontrada" in response.text


def test_topic_detail(client: TestClient) -> None:
    """Test opening and dismissing the detail of a topic."""
    opened = client.post("/meus-direitos/itens/1/2", headers=HTMX)
    assert "50% sobre o valor da hora normal" in opened.text
    assert "FECHAR" in opened.text

    closed = client.post("/meus-direitos/detalhe/fechar", headers=HTMX)
    assert "FECHAR" not in closed.text


def test_glossary(client: TestClient) -> None:
    """Test the glossary page and its search."""
    assert "Direito de Família" in client.get("/glossario").text

    response = client.get("/glossario?q=habeas")
    assert "Termos Gerais" in response.text
    assert "Direito de Família" not in response.text


def test_faq_toggle(client: TestClient) -> None:
    """Test expanding a question of the FAQ."""
    page = client.get("/faq")
    assert "O que é a Defensoria Pública?" in page.text
    assert "assistência jurídica gratuita" not in page.text

    response = client.post("/faq/0/alternar", headers=HTMX)
    assert "assistência jurídica gratuita" in response.text


def test_chat_flow(client: TestClient, scheduler) -> None:
    """Test the question, placeholder and canned reply cycle."""
    page = client.get("/tira-duvidas")
    assert "Faça uma pergunta sobre seus direitos" in page.text

    sent = client.post("/tira-duvidas/mensagens", data={"pergunta": "Fui demitido, quais meus direitos?"}, headers=HTMX)
    assert "Fui demitido, quais meus direitos?" in sent.text
    assert "A pensar..." in sent.text
    assert 'hx-trigger="every 1s"' in sent.text

    scheduler.advance(2.5)

    polled = client.get("/tira-duvidas/conversa")
    assert "A pensar..." not in polled.text
    assert "procurar a Defensoria Pública" in polled.text
    assert 'hx-trigger="every 1s"' not in polled.text


def test_chat_blank_question_is_ignored(client: TestClient, scheduler) -> None:
    """Test that a blank question schedules nothing."""
    client.get("/tira-duvidas")
    response = client.post("/tira-duvidas/mensagens", data={"pergunta": "   "}, headers=HTMX)
    assert response.status_code == 200
    assert scheduler.pending == []


def test_leaving_chat_cancels_reply(client: TestClient, scheduler) -> None:
    """Test that navigating away drops the pending reply and stops polling."""
    client.get("/tira-duvidas")
    client.post("/tira-duvidas/mensagens", data={"pergunta": "Olá"})

    client.get("/")

    assert scheduler.pending == []
    assert client.get("/tira-duvidas/conversa").status_code == 404


def test_document_flow(client: TestClient, scheduler) -> None:
    """Test generating a draft from the form."""
    client.get("/gerador-documentos")
    form = {
        "nome": "Maria Silva",
        "cidade": "São Paulo",
        "assunto": "Cobrança indevida",
        "descricao": "Fui cobrado duas vezes.",
    }

    started = client.post("/gerador-documentos/gerar", data=form, headers=HTMX)
    assert "Gerando..." in started.text

    scheduler.advance(1.5)

    draft = client.get("/gerador-documentos/rascunho")
    assert "Rascunho Gerado:" in draft.text
    assert "Fui cobrado duas vezes." in draft.text
    assert "São Paulo," in draft.text

    cleared = client.post("/gerador-documentos/limpar", headers=HTMX)
    assert "Rascunho Gerado:" not in cleared.text


def test_document_with_blank_field_is_not_generated(client: TestClient, scheduler) -> None:
    """Test that a blank required field does not start a generation."""
    response = client.post("/gerador-documentos/gerar", data={"nome": "Maria Silva"}, headers=HTMX)
    assert response.status_code == 200
    assert "Gerando..." not in response.text
    assert scheduler.pending == []


def test_complaint_flow(client: TestClient) -> None:
    """Test submitting a complaint and starting another one."""
    form = client.get("/denuncia")
    assert "Violência Física/Psicológica" in form.text

    submitted = client.post("/denuncia", data={"descricao": "Fui discriminado.", "tipo": "Outro"})
    assert "Denúncia registrada com sucesso." in submitted.text
    assert "Disque 100" in submitted.text

    again = client.post("/denuncia/nova")
    assert "Enviar Denúncia Anônima" in again.text


def test_complaint_unknown_type(client: TestClient) -> None:
    """Test that an unknown violation type is a 404."""
    response = client.post("/denuncia", data={"descricao": "x", "tipo": "Furto"})
    assert response.status_code == 404


def test_partners(client: TestClient) -> None:
    """Test the partners directory."""
    response = client.get("/parceiros")
    assert response.status_code == 200
    assert "190 - Polícia" in response.text
    assert 'href="tel:129"' in response.text
    assert "https://www.procon.sp.gov.br/" in response.text
    assert "Pastoral Carcerária" in response.text


def test_visitors_have_independent_state(store: SessionStore, scheduler) -> None:
    """Test that two visitors never see each other's conversation."""
    app = create_app(session_store=store)
    with TestClient(app) as first, TestClient(app) as second:
        first.get("/tira-duvidas")
        first.post("/tira-duvidas/mensagens", data={"pergunta": "Pergunta da primeira"})

        response = second.get("/tira-duvidas")
        assert len(store) == 2

    assert "Pergunta da primeira" not in response.text
