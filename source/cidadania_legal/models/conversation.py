"""This module defines the data models for the Tira-Dúvidas conversation."""

from __future__ import annotations

from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ChatState(StrEnum):
    """The states of the simulated assistant."""

    IDLE = "IDLE"
    AWAITING_REPLY = "AWAITING_REPLY"


class ChatMessage(BaseModel):
    """A single entry of the conversation transcript.

    Messages are never edited. The transcript only grows by appending new
    messages and shrinks by removing a message by its `id`.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    text: str
    from_user: bool = False
    is_placeholder: bool = False

    @classmethod
    def placeholder(cls) -> ChatMessage:
        """Creates the transient "typing" message shown while a reply is pending."""
        return cls(text="", from_user=False, is_placeholder=True)
