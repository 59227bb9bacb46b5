"""Redmine API module for mcp_redmine.

This module provides the async Redmine client used by the MCP tools.
"""

from .client import RedmineClient
from .config import RedmineConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .time_entries import TimeEntriesMixin
from .users import UsersMixin


class RedmineFetcher(IssuesMixin, ProjectsMixin, UsersMixin, TimeEntriesMixin):
    """
    The main Redmine client class providing access to all Redmine operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Issue listing, detail, search and writes
    - ProjectsMixin: Projects, memberships and versions
    - UsersMixin: Users derived from project memberships
    - TimeEntriesMixin: Time entries and activities

    Every method issues exactly one request to Redmine.
    """

    pass


__all__ = ["RedmineFetcher", "RedmineConfig", "RedmineClient"]
