"""This module defines the simulated Tira-Dúvidas assistant.

The assistant does not understand questions. Each submission appends the
user's message and a "typing" placeholder, waits a fixed delay, then swaps
the placeholder for the same disclaimer pointing to the Defensoria Pública.
"""

import threading

from cidadania_legal.constants.messages import CHAT_DISCLAIMER, CHAT_GREETING
from cidadania_legal.models.conversation import ChatMessage, ChatState
from cidadania_legal.providers.config import Config, ConfigProvider
from cidadania_legal.providers.logging import Logger, LoggingProvider
from cidadania_legal.providers.scheduler import ScheduledCall, Scheduler, ThreadingScheduler


class ChatSession:
    """The conversation owned by one visit of the chat screen.

    The transcript starts with a single greeting and holds at most one
    placeholder, present exactly while the session is `AWAITING_REPLY`.
    Callers only ever receive tuple snapshots of it. Once `close` is called
    the session stops accepting input and a reply still in flight is
    dropped.
    """

    config: Config
    logger: Logger
    scheduler: Scheduler
    state: ChatState
    input_text: str
    _transcript: list[ChatMessage]
    _pending: ScheduledCall | None
    _placeholder: ChatMessage | None
    _closed: bool
    _lock: threading.Lock

    def __init__(self, scheduler: Scheduler | None = None, config: Config | None = None):
        """Initializes the session with the greeting message.

        Args:
            scheduler: Schedules the delayed reply. Defaults to timer threads.
            config: The application config. Loaded from the environment if omitted.
        """
        self.config = config or ConfigProvider.get_config()
        self.logger = LoggingProvider().get_logger()
        self.scheduler = scheduler or ThreadingScheduler()
        self.state = ChatState.IDLE
        self.input_text = ""
        self._transcript = [ChatMessage(text=CHAT_GREETING, from_user=False)]
        self._pending = None
        self._placeholder = None
        self._closed = False
        self._lock = threading.Lock()

    @property
    def transcript(self) -> tuple[ChatMessage, ...]:
        """A read-only snapshot of the conversation."""
        with self._lock:
            return tuple(self._transcript)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def can_submit(self) -> bool:
        """Whether the send action is enabled."""
        return not self._closed and self.state == ChatState.IDLE and bool(self.input_text.strip())

    def set_input(self, text: str) -> None:
        """Updates the input field, unless a reply is pending.

        Args:
            text: The current content of the input field.
        """
        if self.state == ChatState.IDLE and not self._closed:
            self.input_text = text

    def submit(self) -> bool:
        """Sends the current input and schedules the canned reply.

        Blank input, a pending reply or a closed session make this a no-op.

        Returns:
            True if the message was sent, False otherwise.
        """
        with self._lock:
            if not self.can_submit:
                return False

            self._transcript.append(ChatMessage(text=self.input_text, from_user=True))
            self.input_text = ""
            self._placeholder = ChatMessage.placeholder()
            self._transcript.append(self._placeholder)
            self.state = ChatState.AWAITING_REPLY

        pending = self.scheduler.call_later(self.config.CHAT_REPLY_DELAY_SECONDS, self._deliver_reply)
        with self._lock:
            if self.state == ChatState.AWAITING_REPLY and not self._closed:
                self._pending = pending

        self.logger.debug(f"Question received; reply due in {self.config.CHAT_REPLY_DELAY_SECONDS}s.")
        return True

    def _deliver_reply(self) -> None:
        with self._lock:
            if self._closed or self.state != ChatState.AWAITING_REPLY:
                return

            self._transcript = [message for message in self._transcript if message is not self._placeholder]
            self._transcript.append(ChatMessage(text=CHAT_DISCLAIMER, from_user=False))
            self._placeholder = None
            self._pending = None
            self.state = ChatState.IDLE

        self.logger.debug("Canned reply delivered.")

    def close(self) -> None:
        """Tears the session down, cancelling a reply still in flight."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None
                self.logger.debug("Chat screen left while a reply was pending; reply cancelled.")
