"""This module defines the simulated document draft generator.

The generator fills a fixed letter template with whatever the user typed.
Nothing is validated beyond blankness and nothing is escaped: the values are
inserted verbatim. "Generation" is a fixed delay before the template is
filled, mirroring the chat assistant.
"""

import threading
from collections.abc import Callable
from datetime import date

from cidadania_legal.constants.messages import DRAFT_TEMPLATE
from cidadania_legal.exceptions.validation import InvalidInputError
from cidadania_legal.models.documents import DraftDocument, DraftField, DraftState
from cidadania_legal.providers.config import Config, ConfigProvider
from cidadania_legal.providers.date import DateProvider
from cidadania_legal.providers.logging import Logger, LoggingProvider
from cidadania_legal.providers.scheduler import ScheduledCall, Scheduler, ThreadingScheduler


def render_draft(fields: dict[DraftField, str], today: date) -> DraftDocument:
    """Fills the letter template.

    Args:
        fields: The form values. Missing fields are rendered as empty text.
        today: The date printed next to the signature.

    Returns:
        The generated draft.
    """
    values = {str(field): fields.get(field, "") for field in DraftField}
    text = DRAFT_TEMPLATE.format(data=DateProvider.format_long_date(today), **values)
    return DraftDocument(generated_text=text)


class DraftSession:
    """The draft form owned by one visit of the document generator screen."""

    config: Config
    logger: Logger
    scheduler: Scheduler
    state: DraftState
    draft: DraftDocument | None
    _fields: dict[DraftField, str]
    _pending: ScheduledCall | None
    _generation: int
    _closed: bool
    _lock: threading.Lock

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        config: Config | None = None,
        today: Callable[[], date] = DateProvider.today,
    ):
        """Initializes an empty form.

        Args:
            scheduler: Schedules the end of the generation. Defaults to timer threads.
            config: The application config. Loaded from the environment if omitted.
            today: Returns the date printed on the draft.
        """
        self.config = config or ConfigProvider.get_config()
        self.logger = LoggingProvider().get_logger()
        self.scheduler = scheduler or ThreadingScheduler()
        self._today = today
        self.state = DraftState.IDLE
        self.draft = None
        self._fields = {field: "" for field in DraftField}
        self._pending = None
        self._generation = 0
        self._closed = False
        self._lock = threading.Lock()

    @property
    def fields(self) -> dict[DraftField, str]:
        """A copy of the current form values."""
        return dict(self._fields)

    @property
    def required_fields(self) -> tuple[DraftField, ...]:
        return tuple(self.config.DRAFT_REQUIRED_FIELDS)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def can_generate(self) -> bool:
        """Whether the generate action is enabled."""
        if self._closed or self.state != DraftState.IDLE:
            return False
        return all(self._fields[field].strip() for field in self.required_fields)

    def set_field(self, name: str, value: str) -> None:
        """Updates one form field.

        Args:
            name: The field name, one of `DraftField`.
            value: The text typed by the user.

        Raises:
            InvalidInputError: If `name` is not a form field.
        """
        try:
            field = DraftField(name)
        except ValueError as e:
            raise InvalidInputError(f"Unknown draft field: {name!r}") from e
        with self._lock:
            self._fields[field] = value

    def generate(self) -> bool:
        """Starts the simulated generation.

        Blank required fields, a generation in progress or a closed session
        make this a no-op.

        Returns:
            True if the generation started, False otherwise.
        """
        with self._lock:
            if not self.can_generate:
                return False
            self.state = DraftState.GENERATING
            self._generation += 1
            generation = self._generation
            snapshot = dict(self._fields)

        pending = self.scheduler.call_later(
            self.config.DRAFT_GENERATION_DELAY_SECONDS,
            lambda: self._finish(generation, snapshot),
        )
        with self._lock:
            if self.state == DraftState.GENERATING and generation == self._generation and not self._closed:
                self._pending = pending

        self.logger.debug(f"Draft generation started; ready in {self.config.DRAFT_GENERATION_DELAY_SECONDS}s.")
        return True

    def _finish(self, generation: int, fields: dict[DraftField, str]) -> None:
        with self._lock:
            if self._closed or self.state != DraftState.GENERATING or generation != self._generation:
                return
            self.draft = render_draft(fields, self._today())
            self._pending = None
            self.state = DraftState.IDLE

        self.logger.debug("Draft generated.")

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def reset(self) -> None:
        """Clears the form and discards the draft."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            self._fields = {field: "" for field in DraftField}
            self.draft = None
            self.state = DraftState.IDLE

    def close(self) -> None:
        """Tears the session down, cancelling a generation in progress."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._pending is not None:
                self.logger.debug("Document screen left during generation; generation cancelled.")
            self._cancel_pending()
