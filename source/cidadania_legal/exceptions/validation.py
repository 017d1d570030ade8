"""This module defines the custom exceptions of the application."""


class CidadaniaLegalError(Exception):
    """Base exception for every error raised by the application."""

    pass


class InvalidInputError(CidadaniaLegalError):
    """Raised when a caller refers to something that does not exist.

    Blank form fields are not errors: they only keep the corresponding action
    disabled. This exception covers unknown field names, unknown violation
    types and catalog positions out of range.
    """

    pass
