"""This module defines the data models for the anonymous complaint form."""

from enum import StrEnum


class ViolationType(StrEnum):
    """The kinds of rights violation a complaint can be filed under."""

    DISCRIMINACAO = "Discriminação"
    VIOLENCIA = "Violência Física/Psicológica"
    ABUSO_DE_AUTORIDADE = "Abuso de Autoridade"
    OUTRO = "Outro"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value
