"""Module for Redmine user operations."""

import logging
from typing import Any

from pydantic import ValidationError

from ..exceptions import RedmineApiError, ToolValidationError
from ..models.users import ProjectUser
from ..utils.decorators import handle_redmine_api_errors
from .client import RedmineClient
from .constants import DEFAULT_LIMIT, DEFAULT_OFFSET

logger = logging.getLogger("mcp-redmine.redmine")


class UsersMixin(RedmineClient):
    """Mixin for Redmine user operations."""

    @handle_redmine_api_errors("list users", resource="Project", id_param="project_id")
    async def get_users(
        self,
        project_id: int | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> dict[str, Any]:
        """
        Get the users of a project together with their roles.

        Redmine has no "users of a project" endpoint, so the project's
        memberships are listed and each membership's user is projected out.
        Group memberships carry no user and are skipped.

        Args:
            project_id: The project ID (required)
            limit: Page size of the membership listing
            offset: Page offset of the membership listing

        Returns:
            Dictionary with ``users``, ``total_count``, ``limit``, ``offset``

        Raises:
            ToolValidationError: If project_id is missing
            RedmineNotFoundError: If the project does not exist
        """
        if project_id is None:
            raise ToolValidationError(
                "project_id is required to list users", tool_name="get_users"
            )

        data = await self._request(
            "GET",
            f"projects/{project_id}/memberships.json",
            params={"limit": limit, "offset": offset},
        )
        memberships = self._envelope(data, "memberships")["memberships"]

        users = []
        for membership in memberships:
            try:
                user = ProjectUser.from_membership(membership)
            except (ValidationError, KeyError, TypeError, AttributeError) as e:
                raise RedmineApiError(
                    f"Malformed response: invalid membership {membership!r}"
                ) from e
            if user is not None:
                users.append(user.to_simplified_dict())

        logger.debug(
            f"Derived {len(users)} users from {len(memberships)} memberships "
            f"of project {project_id}"
        )
        return {
            "users": users,
            "total_count": data.get("total_count", len(memberships)),
            "limit": limit,
            "offset": offset,
        }
