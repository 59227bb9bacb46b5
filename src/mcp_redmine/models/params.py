"""Validated parameter models for the Redmine tools.

Each tool's argument bag is validated once by one of these models before the
Redmine adapter is called. The JSON schema advertised to MCP clients is
generated from the same models.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..redmine.constants import DEFAULT_LIMIT, DEFAULT_OFFSET, MAX_LIMIT

IssueStatusFilter = int | Literal["open", "closed", "*"]


class ToolParams(BaseModel):
    """Base model for tool arguments.

    Unknown keys are dropped, and an explicit ``null`` is treated the same as
    an omitted field. Values are not coerced: booleans and numeric strings are
    rejected for integer fields, and ``hours`` must be a finite number.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        strict=True,
        allow_inf_nan=False,
    )

    def to_arguments(self) -> dict[str, Any]:
        """Return the supplied, non-null arguments keyed by Python name.

        Fields with defaults (pagination) are always included.
        """
        return self.model_dump(exclude_none=True)


class PaginationParams(ToolParams):
    """Pagination arguments shared by every list tool."""

    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        le=MAX_LIMIT,
        description=f"Number of results to return (1-{MAX_LIMIT}, default: {DEFAULT_LIMIT})",
    )
    offset: int = Field(
        default=DEFAULT_OFFSET,
        ge=0,
        description="Offset for pagination (default: 0)",
    )


class GetIssuesParams(PaginationParams):
    project_id: int | None = Field(None, description="Filter issues by project ID")
    status_id: IssueStatusFilter | None = Field(
        None,
        description='Filter by status ID, or use "open", "closed", or "*" for all',
    )
    assigned_to_id: int | None = Field(
        None, description="Filter issues assigned to specific user ID"
    )


class GetIssueParams(ToolParams):
    issue_id: int = Field(description="The ID of the issue to retrieve")


class GetProjectsParams(PaginationParams):
    pass


class GetProjectParams(ToolParams):
    project_id: int = Field(description="The ID of the project to retrieve")


class GetProjectMembersParams(PaginationParams):
    project_id: int = Field(description="The ID of the project whose members to list")


class GetProjectVersionsParams(ToolParams):
    project_id: int = Field(
        description="The ID of the project whose versions to list"
    )


class GetUsersParams(PaginationParams):
    project_id: int = Field(
        description="The ID of the project whose users to list (required)"
    )


class SearchIssuesParams(PaginationParams):
    query: str = Field(
        min_length=1,
        description="Text to match as a substring of issue subjects",
    )


class GetTimeEntriesParams(PaginationParams):
    project_id: int | None = Field(None, description="Filter by project ID")
    user_id: int | None = Field(None, description="Filter by user ID")
    from_date: str | None = Field(
        None, alias="from", description="Start date in YYYY-MM-DD format"
    )
    to_date: str | None = Field(
        None, alias="to", description="End date in YYYY-MM-DD format"
    )


class CreateIssueParams(ToolParams):
    project_id: int = Field(description="The ID of the project to create the issue in")
    subject: str = Field(min_length=1, description="The title/subject of the issue")
    description: str | None = Field(
        None, description="Detailed description of the issue"
    )
    tracker_id: int | None = Field(
        None, description="The tracker type ID (e.g., Bug, Feature, Support)"
    )
    status_id: int | None = Field(
        None, description="The status ID (e.g., New, In Progress, Resolved)"
    )
    priority_id: int | None = Field(
        None, description="The priority ID (e.g., Low, Normal, High, Urgent)"
    )
    assigned_to_id: int | None = Field(
        None, description="The user ID to assign the issue to"
    )
    start_date: str | None = Field(None, description="Start date in YYYY-MM-DD format")
    due_date: str | None = Field(None, description="Due date in YYYY-MM-DD format")
    done_ratio: int | None = Field(
        None, ge=0, le=100, description="Percentage of completion (0-100)"
    )


class UpdateIssueParams(ToolParams):
    issue_id: int = Field(description="The ID of the issue to update")
    project_id: int | None = Field(None, description="Move issue to a different project")
    subject: str | None = Field(None, description="Update the title/subject of the issue")
    description: str | None = Field(None, description="Update the detailed description")
    tracker_id: int | None = Field(None, description="Change the tracker type")
    status_id: int | None = Field(None, description="Change the status")
    priority_id: int | None = Field(None, description="Change the priority")
    assigned_to_id: int | None = Field(
        None, description="Reassign the issue to a different user"
    )
    start_date: str | None = Field(
        None, description="Update start date in YYYY-MM-DD format"
    )
    due_date: str | None = Field(None, description="Update due date in YYYY-MM-DD format")
    done_ratio: int | None = Field(
        None, ge=0, le=100, description="Update percentage of completion (0-100)"
    )
    notes: str | None = Field(None, description="Add notes/comments about this update")


class AddCommentParams(ToolParams):
    issue_id: int = Field(description="The ID of the issue to comment on")
    notes: str = Field(min_length=1, description="The comment text to add")


class DeleteIssueParams(ToolParams):
    issue_id: int = Field(description="The ID of the issue to delete")


class LogTimeParams(ToolParams):
    issue_id: int | None = Field(None, description="The ID of the issue to log time for")
    project_id: int | None = Field(
        None, description="The ID of the project to log time for"
    )
    hours: float = Field(gt=0, description="The number of hours to log")
    activity_id: int | None = Field(
        None, description="The ID of the activity (optional)"
    )
    comments: str | None = Field(None, description="Short comment for the time entry")
    spent_on: str | None = Field(
        None, description="Date the time was spent (YYYY-MM-DD)"
    )


class GetTimeEntryActivitiesParams(ToolParams):
    pass
