"""Module for Redmine issue operations."""

import logging
from typing import Any

from ..utils.decorators import handle_redmine_api_errors
from .client import RedmineClient
from .constants import DEFAULT_LIMIT, DEFAULT_OFFSET, ISSUE_DETAIL_INCLUDE

logger = logging.getLogger("mcp-redmine.redmine")

# Fields accepted by the issue envelope on create and update
ISSUE_FIELDS = frozenset(
    {
        "project_id",
        "subject",
        "description",
        "tracker_id",
        "status_id",
        "priority_id",
        "assigned_to_id",
        "start_date",
        "due_date",
        "done_ratio",
    }
)
ISSUE_UPDATE_FIELDS = ISSUE_FIELDS | {"notes"}


def build_issue_patch(fields: dict[str, Any], allowed: frozenset[str]) -> dict[str, Any]:
    """Build an issue envelope body from the fields the caller supplied.

    Presence of a key is what counts: ``done_ratio=0`` or an empty
    description are kept, keys never passed are never sent.

    Raises:
        ValueError: If a field is not part of the issue envelope
    """
    unknown = sorted(set(fields) - allowed)
    if unknown:
        raise ValueError(f"Unsupported issue fields: {', '.join(unknown)}")
    return dict(fields)


class IssuesMixin(RedmineClient):
    """Mixin for Redmine issue operations."""

    @handle_redmine_api_errors("list issues")
    async def get_issues(
        self,
        project_id: int | None = None,
        status_id: int | str | None = None,
        assigned_to_id: int | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> dict[str, Any]:
        """
        Get a page of issues with optional filters.

        Filters left as None are not sent, since Redmine treats the presence
        of a filter parameter as activating it.

        Args:
            project_id: Only issues of this project
            status_id: Status ID, or "open", "closed", "*"
            assigned_to_id: Only issues assigned to this user
            limit: Page size
            offset: Page offset

        Returns:
            The Redmine envelope: ``issues``, ``total_count``, ``limit``, ``offset``
        """
        params: dict[str, Any] = {"limit": limit, "offset": offset}
        if project_id is not None:
            params["project_id"] = project_id
        if status_id is not None:
            params["status_id"] = status_id
        if assigned_to_id is not None:
            params["assigned_to_id"] = assigned_to_id

        data = await self._request("GET", "issues.json", params=params)
        return self._envelope(data, "issues")

    @handle_redmine_api_errors("get issue", resource="Issue", id_param="issue_id")
    async def get_issue(self, issue_id: int) -> dict[str, Any]:
        """
        Get a single issue, expanded with journals, attachments and relations.

        Args:
            issue_id: The issue ID

        Returns:
            The issue object
        """
        data = await self._request(
            "GET",
            f"issues/{issue_id}.json",
            params={"include": ISSUE_DETAIL_INCLUDE},
        )
        return self._unwrap(data, "issue")

    @handle_redmine_api_errors("search issues")
    async def search_issues(
        self,
        query: str,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> dict[str, Any]:
        """
        Find issues whose subject contains ``query``.

        Redmine has no full-text search in its issues API, so this is a
        substring filter on the subject field only (``subject=~query``).
        Results are not ranked and descriptions or comments are not searched.

        Args:
            query: Substring to look for in subjects
            limit: Page size
            offset: Page offset

        Returns:
            The Redmine issues envelope
        """
        params = {"subject": f"~{query}", "limit": limit, "offset": offset}
        data = await self._request("GET", "issues.json", params=params)
        return self._envelope(data, "issues")

    @handle_redmine_api_errors("create issue", resource="Project", id_param="project_id")
    async def create_issue(
        self, project_id: int, subject: str, **fields: Any
    ) -> dict[str, Any]:
        """
        Create a new issue.

        Only the optional fields actually passed are sent; Redmine applies its
        own defaults to the rest.

        Args:
            project_id: Project to create the issue in
            subject: Issue subject
            **fields: Optional issue fields (description, tracker_id, ...)

        Returns:
            The created issue
        """
        issue = {
            "project_id": project_id,
            "subject": subject,
            **build_issue_patch(fields, ISSUE_FIELDS),
        }
        data = await self._request("POST", "issues.json", json={"issue": issue})
        created = self._unwrap(data, "issue")
        logger.info(f"Created issue {created.get('id')} in project {project_id}")
        return created

    @handle_redmine_api_errors("update issue", resource="Issue", id_param="issue_id")
    async def update_issue(self, issue_id: int, **fields: Any) -> dict[str, Any]:
        """
        Update an issue with a sparse patch.

        Args:
            issue_id: The issue ID
            **fields: Only the fields to change, plus optional ``notes``

        Returns:
            Dictionary with the result of the operation
        """
        patch = build_issue_patch(fields, ISSUE_UPDATE_FIELDS)
        await self._request("PUT", f"issues/{issue_id}.json", json={"issue": patch})
        return {
            "success": True,
            "message": f"Issue {issue_id} updated successfully",
        }

    @handle_redmine_api_errors("add comment", resource="Issue", id_param="issue_id")
    async def add_comment(self, issue_id: int, notes: str) -> dict[str, Any]:
        """
        Add a note to an issue without touching any other field.

        Args:
            issue_id: The issue ID
            notes: Comment text

        Returns:
            Dictionary with the result of the operation
        """
        # Only the note is sent, never any other issue field
        payload = {"issue": {"notes": notes}}
        await self._request("PUT", f"issues/{issue_id}.json", json=payload)
        return {
            "success": True,
            "message": f"Comment added to issue {issue_id}",
        }

    @handle_redmine_api_errors("delete issue", resource="Issue", id_param="issue_id")
    async def delete_issue(self, issue_id: int) -> dict[str, Any]:
        """
        Delete an issue. This cannot be undone.

        Args:
            issue_id: The issue ID

        Returns:
            Dictionary with the result of the operation
        """
        await self._request("DELETE", f"issues/{issue_id}.json")
        logger.info(f"Deleted issue {issue_id}")
        return {
            "success": True,
            "message": f"Issue {issue_id} deleted successfully",
        }
