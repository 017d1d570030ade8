"""This module defines the data models for the static legal content.

Every model is frozen: the catalog is built once at import time and shared
by every visitor, so nothing downstream may mutate it. Filtering produces new
category instances through `with_entries` instead.
"""

from __future__ import annotations

from abc import abstractmethod
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class CategoryIcon(StrEnum):
    """Symbolic icon tags, resolved to an actual asset by the presentation layer."""

    SHOPPING_CART = "shopping_cart"
    WORK = "work"
    FAVORITE = "favorite"
    FAMILY = "family_restroom"
    POLICE = "local_police"
    GAVEL = "gavel"
    ACCOUNT_BALANCE = "account_balance"
    FEMALE = "female"
    CAMPAIGN = "campaign"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value


class CatalogEntry(BaseModel):
    """Base class for a single item listed inside a category."""

    model_config = ConfigDict(frozen=True)

    @property
    @abstractmethod
    def heading(self) -> str:
        """The short label shown in the list and as the detail title."""

    @property
    @abstractmethod
    def body(self) -> str:
        """The full text shown in the detail view."""


class CatalogCategory(BaseModel):
    """Base class for a titled, non-empty group of catalog entries."""

    model_config = ConfigDict(frozen=True)

    @property
    @abstractmethod
    def label(self) -> str:
        """The category title shown in the list header."""

    @property
    @abstractmethod
    def entries(self) -> tuple[CatalogEntry, ...]:
        """The entries of this category, in display order."""

    @abstractmethod
    def with_entries(self, entries: tuple[CatalogEntry, ...]) -> CatalogCategory:
        """Returns a copy of this category holding only `entries`."""


class RightsTopic(CatalogEntry):
    """A single right explained in plain language."""

    title: str
    description: str

    @property
    def heading(self) -> str:
        return self.title

    @property
    def body(self) -> str:
        return self.description


class RightsCategory(CatalogCategory):
    """An area of law grouping related rights topics."""

    title: str
    icon: CategoryIcon
    topics: tuple[RightsTopic, ...]

    @field_validator("topics")
    @classmethod
    def check_not_empty(cls, value: tuple[RightsTopic, ...]) -> tuple[RightsTopic, ...]:
        """Rejects categories without topics.

        Args:
            value: The topics of the category.

        Returns:
            The validated topics.

        Raises:
            ValueError: If no topic was given.
        """
        if not value:
            raise ValueError("A rights category needs at least one topic.")
        return value

    @property
    def label(self) -> str:
        return self.title

    @property
    def entries(self) -> tuple[RightsTopic, ...]:
        return self.topics

    def with_entries(self, entries: tuple[CatalogEntry, ...]) -> RightsCategory:
        return self.model_copy(update={"topics": tuple(entries)})


class GlossaryTerm(CatalogEntry):
    """A legal term and its translation into everyday language."""

    term: str
    definition: str

    @property
    def heading(self) -> str:
        return self.term

    @property
    def body(self) -> str:
        return self.definition


class GlossaryCategory(CatalogCategory):
    """A group of glossary terms belonging to the same area of law."""

    name: str
    icon: CategoryIcon
    terms: tuple[GlossaryTerm, ...]

    @field_validator("terms")
    @classmethod
    def check_not_empty(cls, value: tuple[GlossaryTerm, ...]) -> tuple[GlossaryTerm, ...]:
        """Rejects categories without terms.

        Args:
            value: The terms of the category.

        Returns:
            The validated terms.

        Raises:
            ValueError: If no term was given.
        """
        if not value:
            raise ValueError("A glossary category needs at least one term.")
        return value

    @property
    def label(self) -> str:
        return self.name

    @property
    def entries(self) -> tuple[GlossaryTerm, ...]:
        return self.terms

    def with_entries(self, entries: tuple[CatalogEntry, ...]) -> GlossaryCategory:
        return self.model_copy(update={"terms": tuple(entries)})


class FaqEntry(BaseModel):
    """A frequently asked question and its answer."""

    model_config = ConfigDict(frozen=True)

    question: str
    answer: str


class PartnerOrganization(BaseModel):
    """An organization that offers support, with optional contact channels."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    icon: CategoryIcon
    phone: str | None = None
    website: str | None = None

    @property
    def dial_uri(self) -> str | None:
        """The URI that opens the phone dialer, when a phone number is known."""
        if self.phone is None:
            return None
        return f"tel:{self.phone}"


class EmergencyContact(BaseModel):
    """A public emergency number."""

    model_config = ConfigDict(frozen=True)

    number: str
    service: str

    def __str__(self) -> str:
        """Returns the contact as shown on the partners screen."""
        return f"{self.number} - {self.service}"
