"""Constants for the Redmine integration."""

from typing import Final

# Environment variable names
ENV_REDMINE_URL: Final[str] = "REDMINE_URL"
ENV_REDMINE_API_KEY: Final[str] = "REDMINE_API_KEY"
ENV_REDMINE_USERNAME: Final[str] = "REDMINE_USERNAME"
ENV_REDMINE_PASSWORD: Final[str] = "REDMINE_PASSWORD"
ENV_REDMINE_SSL_VERIFY: Final[str] = "REDMINE_SSL_VERIFY"

REQUIRED_ENV_VARS: Final[tuple[str, ...]] = (
    ENV_REDMINE_URL,
    ENV_REDMINE_API_KEY,
    ENV_REDMINE_USERNAME,
    ENV_REDMINE_PASSWORD,
)

# Request headers
API_KEY_HEADER: Final[str] = "X-Redmine-API-Key"

# Issue detail always expands history, attachments and relations
ISSUE_DETAIL_INCLUDE: Final[str] = "journals,attachments,relations"

# Pagination
DEFAULT_LIMIT: Final[int] = 25
MAX_LIMIT: Final[int] = 100
DEFAULT_OFFSET: Final[int] = 0
