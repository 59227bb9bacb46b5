"""Module for Redmine project operations."""

import logging
from typing import Any

from ..utils.decorators import handle_redmine_api_errors
from .client import RedmineClient
from .constants import DEFAULT_LIMIT, DEFAULT_OFFSET

logger = logging.getLogger("mcp-redmine.redmine")


class ProjectsMixin(RedmineClient):
    """Mixin for Redmine project operations."""

    @handle_redmine_api_errors("list projects")
    async def get_projects(
        self, limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET
    ) -> dict[str, Any]:
        """
        Get a page of projects.

        Args:
            limit: Page size
            offset: Page offset

        Returns:
            The Redmine envelope: ``projects``, ``total_count``, ``limit``, ``offset``
        """
        params = {"limit": limit, "offset": offset}
        data = await self._request("GET", "projects.json", params=params)
        return self._envelope(data, "projects")

    @handle_redmine_api_errors("get project", resource="Project", id_param="project_id")
    async def get_project(self, project_id: int) -> dict[str, Any]:
        """
        Get a single project.

        Args:
            project_id: The project ID

        Returns:
            The project object

        Raises:
            RedmineNotFoundError: If the project does not exist
        """
        data = await self._request("GET", f"projects/{project_id}.json")
        return self._unwrap(data, "project")

    @handle_redmine_api_errors(
        "list project members", resource="Project", id_param="project_id"
    )
    async def get_project_members(
        self,
        project_id: int,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> dict[str, Any]:
        """
        Get the raw membership records of a project.

        Args:
            project_id: The project ID
            limit: Page size
            offset: Page offset

        Returns:
            The Redmine envelope: ``memberships``, ``total_count``, ...
        """
        params = {"limit": limit, "offset": offset}
        data = await self._request(
            "GET", f"projects/{project_id}/memberships.json", params=params
        )
        return self._envelope(data, "memberships")

    @handle_redmine_api_errors(
        "list project versions", resource="Project", id_param="project_id"
    )
    async def get_project_versions(self, project_id: int) -> dict[str, Any]:
        """
        Get the versions (milestones) shared with a project.

        Args:
            project_id: The project ID

        Returns:
            Dictionary with ``versions`` and ``total_count``
        """
        data = await self._request("GET", f"projects/{project_id}/versions.json")
        versions = self._envelope(data, "versions")["versions"]
        return {
            "versions": versions,
            "total_count": data.get("total_count", len(versions)),
        }
