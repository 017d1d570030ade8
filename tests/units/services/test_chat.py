"""Unit tests for the simulated Tira-Dúvidas assistant."""

import pytest
from cidadania_legal.constants.messages import CHAT_DISCLAIMER, CHAT_GREETING
from cidadania_legal.models.conversation import ChatState
from cidadania_legal.providers.config import Config
from cidadania_legal.services.chat import ChatSession


@pytest.fixture
def session(scheduler, config: Config) -> ChatSession:
    """Fixture for a chat session driven by the manual scheduler."""
    return ChatSession(scheduler=scheduler, config=config)


def test_transcript_starts_with_greeting(session: ChatSession) -> None:
    """Tests the initial state of the conversation."""
    assert [message.text for message in session.transcript] == [CHAT_GREETING]
    assert session.state == ChatState.IDLE
    assert not session.can_submit


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_blank_submit_is_a_noop(session: ChatSession, scheduler, text: str) -> None:
    """Tests that blank input leaves the transcript and state unchanged."""
    before = session.transcript
    session.set_input(text)

    assert session.submit() is False
    assert session.transcript == before
    assert session.state == ChatState.IDLE
    assert scheduler.pending == []


def test_submit_then_reply(session: ChatSession, scheduler) -> None:
    """Tests the full question and canned reply cycle."""
    before = len(session.transcript)
    session.set_input("Fui demitido, quais meus direitos?")

    assert session.submit() is True

    transcript = session.transcript
    assert session.state == ChatState.AWAITING_REPLY
    assert len(transcript) == before + 2
    assert transcript[-2].text == "Fui demitido, quais meus direitos?"
    assert transcript[-2].from_user
    assert transcript[-1].is_placeholder
    assert session.input_text == ""
    assert [call.due for call in scheduler.pending] == [2.5]

    scheduler.advance(2.5)

    transcript = session.transcript
    assert session.state == ChatState.IDLE
    assert len(transcript) == before + 2
    assert not any(message.is_placeholder for message in transcript)
    assert transcript[-1].text == CHAT_DISCLAIMER
    assert not transcript[-1].from_user


def test_reply_waits_for_delay(session: ChatSession, scheduler) -> None:
    """Tests that the reply is not delivered before the delay elapses."""
    session.set_input("Olá")
    session.submit()

    scheduler.advance(2.4)

    assert session.state == ChatState.AWAITING_REPLY
    assert session.transcript[-1].is_placeholder


def test_second_submit_while_awaiting_is_a_noop(session: ChatSession, scheduler) -> None:
    """Tests that input is locked while a reply is pending."""
    session.set_input("Primeira pergunta")
    session.submit()
    before = session.transcript

    session.set_input("Segunda pergunta")

    assert session.input_text == ""
    assert session.submit() is False
    assert session.transcript == before
    assert session.state == ChatState.AWAITING_REPLY
    assert len(scheduler.pending) == 1


def test_at_most_one_placeholder(session: ChatSession, scheduler) -> None:
    """Tests that consecutive questions never stack placeholders."""
    for question in ("Um", "Dois", "Três"):
        session.set_input(question)
        session.submit()
        assert sum(message.is_placeholder for message in session.transcript) == 1
        scheduler.advance(2.5)
        assert sum(message.is_placeholder for message in session.transcript) == 0

    assert len(session.transcript) == 7


def test_close_while_awaiting_cancels_reply(session: ChatSession, scheduler) -> None:
    """Tests that a reply is never written to a closed session."""
    session.set_input("Fui demitido, quais meus direitos?")
    session.submit()
    before = session.transcript

    session.close()
    scheduler.advance(10)

    assert session.closed
    assert scheduler.pending == []
    assert session.transcript == before


def test_late_reply_after_close_is_dropped(session: ChatSession, scheduler) -> None:
    """Tests that a reply firing despite cancellation leaves the transcript alone."""
    session.set_input("Pergunta")
    session.submit()
    call = scheduler.pending[0]
    before = session.transcript

    session.close()
    call.callback()

    assert session.transcript == before


def test_closed_session_rejects_input(session: ChatSession) -> None:
    """Tests that nothing can be sent after the screen is left."""
    session.close()
    session.set_input("Pergunta")

    assert session.submit() is False
    assert len(session.transcript) == 1


def test_transcript_is_a_snapshot(session: ChatSession) -> None:
    """Tests that callers cannot mutate the conversation."""
    snapshot = session.transcript
    session.set_input("Pergunta")
    session.submit()

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 1


def test_reply_delay_is_configurable(scheduler) -> None:
    """Tests that the reply delay comes from the configuration."""
    session = ChatSession(scheduler=scheduler, config=Config(_env_file=None, CHAT_REPLY_DELAY_SECONDS=1.5))
    session.set_input("Pergunta")
    session.submit()

    scheduler.advance(1.5)

    assert session.state == ChatState.IDLE
