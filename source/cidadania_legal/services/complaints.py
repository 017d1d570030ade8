"""This module defines the anonymous complaint form.

Complaints are not stored nor transmitted anywhere: submitting one only
switches the screen to a confirmation that points to the official channels.
The description is never logged.
"""

from cidadania_legal.exceptions.validation import InvalidInputError
from cidadania_legal.models.complaints import ViolationType
from cidadania_legal.providers.logging import Logger, LoggingProvider


class ComplaintSession:
    """The complaint form owned by one visit of the complaint screen."""

    logger: Logger
    description: str
    violation_type: ViolationType
    submitted: bool

    def __init__(self) -> None:
        self.logger = LoggingProvider().get_logger()
        self.description = ""
        self.violation_type = ViolationType.DISCRIMINACAO
        self.submitted = False

    def set_description(self, text: str) -> None:
        self.description = text

    def select_violation_type(self, value: str) -> None:
        """Selects the kind of violation being reported.

        Args:
            value: The label of a `ViolationType`.

        Raises:
            InvalidInputError: If `value` is not a known violation type.
        """
        try:
            self.violation_type = ViolationType(value)
        except ValueError as e:
            raise InvalidInputError(f"Unknown violation type: {value!r}") from e

    def submit(self) -> None:
        """Registers the complaint and shows the confirmation."""
        self.logger.info(f"Anonymous complaint registered (type: {self.violation_type}).")
        self.submitted = True
        self.description = ""

    def reset(self) -> None:
        """Returns to the form to file another complaint."""
        self.submitted = False

    def close(self) -> None:
        self.description = ""
