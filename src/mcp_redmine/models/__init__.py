"""Pydantic models for MCP Redmine tool arguments and derived resources."""

from .params import (
    AddCommentParams,
    CreateIssueParams,
    DeleteIssueParams,
    GetIssueParams,
    GetIssuesParams,
    GetProjectMembersParams,
    GetProjectParams,
    GetProjectsParams,
    GetProjectVersionsParams,
    GetTimeEntriesParams,
    GetTimeEntryActivitiesParams,
    GetUsersParams,
    LogTimeParams,
    PaginationParams,
    SearchIssuesParams,
    ToolParams,
    UpdateIssueParams,
)
from .users import MembershipRole, ProjectUser

__all__ = [
    "AddCommentParams",
    "CreateIssueParams",
    "DeleteIssueParams",
    "GetIssueParams",
    "GetIssuesParams",
    "GetProjectMembersParams",
    "GetProjectParams",
    "GetProjectVersionsParams",
    "GetProjectsParams",
    "GetTimeEntriesParams",
    "GetTimeEntryActivitiesParams",
    "GetUsersParams",
    "LogTimeParams",
    "MembershipRole",
    "PaginationParams",
    "ProjectUser",
    "SearchIssuesParams",
    "ToolParams",
    "UpdateIssueParams",
]
