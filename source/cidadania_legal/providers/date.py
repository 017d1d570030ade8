"""This module provides centralized date-related utilities."""

from datetime import date


class DateProvider:
    """Provides centralized constants and methods for date handling.

    Generated drafts are dated the way a Brazilian letter is signed
    ("19 de outubro de 2026"), independently of the server locale.
    """

    MONTHS_PT_BR = (
        "janeiro",
        "fevereiro",
        "março",
        "abril",
        "maio",
        "junho",
        "julho",
        "agosto",
        "setembro",
        "outubro",
        "novembro",
        "dezembro",
    )

    @staticmethod
    def today() -> date:
        """Returns the current local date."""
        return date.today()

    @classmethod
    def format_long_date(cls, value: date) -> str:
        """Formats a date as "dd de <mês> de yyyy".

        Args:
            value: The date to format.

        Returns:
            The formatted date, with a zero-padded day and the month name in
            lowercase Portuguese.
        """
        return f"{value.day:02d} de {cls.MONTHS_PT_BR[value.month - 1]} de {value.year}"
