"""Configuration module for Redmine API interactions."""

import os
from dataclasses import dataclass

from ..utils.env import is_env_ssl_verify
from .constants import (
    ENV_REDMINE_API_KEY,
    ENV_REDMINE_PASSWORD,
    ENV_REDMINE_SSL_VERIFY,
    ENV_REDMINE_URL,
    ENV_REDMINE_USERNAME,
    REQUIRED_ENV_VARS,
)


@dataclass(frozen=True)
class RedmineConfig:
    """Redmine API configuration.

    Redmine is called with the API key header and HTTP basic credentials on
    every request, so all four credentials are mandatory.
    """

    url: str  # Base URL for Redmine
    api_key: str  # Sent as X-Redmine-API-Key
    username: str  # Basic auth username
    password: str  # Basic auth password
    ssl_verify: bool = True  # Whether to verify SSL certificates

    def __post_init__(self) -> None:
        missing = [
            field_name
            for field_name in ("url", "api_key", "username", "password")
            if not getattr(self, field_name)
        ]
        if missing:
            raise ValueError(
                f"Redmine configuration is incomplete, missing: {', '.join(missing)}"
            )
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "RedmineConfig":
        """Create configuration from environment variables.

        Returns:
            RedmineConfig with values from environment variables

        Raises:
            ValueError: If any required environment variable is missing
        """
        missing = get_missing_env_vars()
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        return cls(
            url=os.environ[ENV_REDMINE_URL],
            api_key=os.environ[ENV_REDMINE_API_KEY],
            username=os.environ[ENV_REDMINE_USERNAME],
            password=os.environ[ENV_REDMINE_PASSWORD],
            ssl_verify=is_env_ssl_verify(ENV_REDMINE_SSL_VERIFY),
        )


def get_missing_env_vars() -> list[str]:
    """Return the required Redmine environment variables that are unset or empty."""
    return [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
