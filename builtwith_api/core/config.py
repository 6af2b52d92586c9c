"""
Client configuration using pydantic-settings.
Values come from BUILTWITH_* environment variables or a local .env file.
"""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from builtwith_api.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """BuiltWith client settings loaded from environment variables."""

    # Required
    api_key: str
    response_format: str

    # Seconds; None leaves requests without a client-side timeout
    timeout: float | None = None

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api_key must not be empty")
        return value

    model_config = {
        "env_prefix": "BUILTWITH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def get_settings(**overrides) -> Settings:
    """
    Load settings from the environment.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a required value is missing or invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid BuiltWith settings: {e}") from e
