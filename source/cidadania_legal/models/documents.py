"""This module defines the data models for the document draft generator."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class DraftField(StrEnum):
    """The free-text fields of the draft form."""

    NOME = "nome"
    CIDADE = "cidade"
    ASSUNTO = "assunto"
    DESCRICAO = "descricao"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value


class DraftState(StrEnum):
    """The states of the simulated generator."""

    IDLE = "IDLE"
    GENERATING = "GENERATING"


class DraftDocument(BaseModel):
    """A generated draft, recomputed wholesale from the form fields."""

    model_config = ConfigDict(frozen=True)

    generated_text: str
