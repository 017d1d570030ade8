"""This module defines the configuration management for the application.

It uses Pydantic's BaseSettings to create a strongly-typed configuration
class that reads from environment variables and .env files. The simulated
assistant delays and the draft form's required fields live here so they can
be tuned without touching the flows themselves.
"""

from cidadania_legal.models.documents import DraftField
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """A Pydantic model for managing application settings.

    It automatically loads configuration from environment variables and .env files.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    CHAT_REPLY_DELAY_SECONDS: float = 2.5
    DRAFT_GENERATION_DELAY_SECONDS: float = 1.5
    DRAFT_REQUIRED_FIELDS: list[DraftField] = [
        DraftField.NOME,
        DraftField.CIDADE,
        DraftField.ASSUNTO,
        DraftField.DESCRICAO,
    ]

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000
    WEB_SESSION_COOKIE: str = "cidadania_sessao"
    WEB_MAX_SESSIONS: int = 1000

    @field_validator("CHAT_REPLY_DELAY_SECONDS", "DRAFT_GENERATION_DELAY_SECONDS")
    @classmethod
    def check_non_negative_delay(cls, value: float) -> float:
        """Rejects negative simulation delays.

        Args:
            value: The configured delay, in seconds.

        Returns:
            The validated delay.

        Raises:
            ValueError: If the delay is negative.
        """
        if value < 0:
            raise ValueError("Simulation delays must be non-negative.")
        return value

    @field_validator("WEB_MAX_SESSIONS")
    @classmethod
    def check_positive_session_limit(cls, value: int) -> int:
        """Ensures at least one visitor session can be kept.

        Args:
            value: The configured session limit.

        Returns:
            The validated limit.

        Raises:
            ValueError: If the limit is lower than one.
        """
        if value < 1:
            raise ValueError("WEB_MAX_SESSIONS must be at least 1.")
        return value


class ConfigProvider:
    """A provider class that acts as a factory for the application's configuration.

    It does not hold state but provides a method to create fresh config instances.
    """

    @staticmethod
    def get_config() -> Config:
        """Factory method that instantiates and returns a new Config object.

        Calling this function will always create a new instance of the Config model,
        which forces Pydantic to reload and re-validate all settings from the
        current environment variables. This ensures the configuration is always fresh.

        Returns:
            A new, validated Config object.
        """
        return Config()
