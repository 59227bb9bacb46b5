"""Module for Redmine time tracking operations."""

import logging
from typing import Any

from ..utils.decorators import handle_redmine_api_errors
from .client import RedmineClient
from .constants import DEFAULT_LIMIT, DEFAULT_OFFSET

logger = logging.getLogger("mcp-redmine.redmine")

TIME_ENTRY_FIELDS = frozenset(
    {"issue_id", "project_id", "activity_id", "comments", "spent_on"}
)


class TimeEntriesMixin(RedmineClient):
    """Mixin for Redmine time entry operations."""

    @handle_redmine_api_errors("list time entries")
    async def get_time_entries(
        self,
        project_id: int | None = None,
        user_id: int | None = None,
        from_date: str | None = None,
        to_date: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> dict[str, Any]:
        """
        Get a page of time entries.

        Args:
            project_id: Only entries of this project
            user_id: Only entries of this user
            from_date: Earliest spent_on date (YYYY-MM-DD)
            to_date: Latest spent_on date (YYYY-MM-DD)
            limit: Page size
            offset: Page offset

        Returns:
            The Redmine envelope: ``time_entries``, ``total_count``, ...
        """
        params: dict[str, Any] = {"limit": limit, "offset": offset}
        if project_id is not None:
            params["project_id"] = project_id
        if user_id is not None:
            params["user_id"] = user_id
        if from_date is not None:
            params["from"] = from_date
        if to_date is not None:
            params["to"] = to_date

        data = await self._request("GET", "time_entries.json", params=params)
        return self._envelope(data, "time_entries")

    @handle_redmine_api_errors("log time")
    async def log_time(self, hours: float, **fields: Any) -> dict[str, Any]:
        """
        Log spent time on an issue or a project.

        Redmine needs an issue_id or a project_id; when both are missing its
        validation error is returned to the caller as is.

        Args:
            hours: Hours spent, strictly positive
            **fields: issue_id, project_id, activity_id, comments, spent_on

        Returns:
            The created time entry
        """
        unknown = sorted(set(fields) - TIME_ENTRY_FIELDS)
        if unknown:
            raise ValueError(f"Unsupported time entry fields: {', '.join(unknown)}")

        time_entry = {**fields, "hours": hours}
        data = await self._request(
            "POST", "time_entries.json", json={"time_entry": time_entry}
        )
        return self._unwrap(data, "time_entry")

    @handle_redmine_api_errors("list time entry activities")
    async def get_time_entry_activities(self) -> dict[str, Any]:
        """
        Get the time entry activities (e.g. Design, Development).

        Returns:
            The Redmine envelope: ``time_entry_activities``
        """
        data = await self._request("GET", "enumerations/time_entry_activities.json")
        return self._envelope(data, "time_entry_activities")
