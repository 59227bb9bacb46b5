"""Declarative registry of the Redmine tools exposed over MCP."""

from dataclasses import dataclass
from typing import Any

from mcp.types import Tool
from pydantic import BaseModel

from mcp_redmine.exceptions import UnknownToolError
from mcp_redmine.models import params


@dataclass(frozen=True)
class ToolDefinition:
    """One named operation: its description, argument schema and handler."""

    name: str
    description: str
    params_model: type[BaseModel]
    handler: str  # RedmineFetcher method name
    read_only: bool = True

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema advertised to MCP clients, generated from params_model."""
        schema = self.params_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.pop("description", None)
        schema.setdefault("properties", {})
        return schema


TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="get_issues",
        description=(
            "Get a list of Redmine issues/tickets with optional filters. Returns "
            "paginated results with issue details including status, priority, "
            "assignee, and more."
        ),
        params_model=params.GetIssuesParams,
        handler="get_issues",
    ),
    ToolDefinition(
        name="get_issue",
        description=(
            "Get detailed information about a specific Redmine issue/ticket by ID. "
            "Includes journals (history), attachments, and relations."
        ),
        params_model=params.GetIssueParams,
        handler="get_issue",
    ),
    ToolDefinition(
        name="get_projects",
        description=(
            "Get a list of all Redmine projects. Returns paginated results with "
            "project details."
        ),
        params_model=params.GetProjectsParams,
        handler="get_projects",
    ),
    ToolDefinition(
        name="get_project",
        description="Get detailed information about a specific Redmine project by ID.",
        params_model=params.GetProjectParams,
        handler="get_project",
    ),
    ToolDefinition(
        name="get_project_members",
        description=(
            "Get the membership records of a Redmine project: each user or group "
            "with the roles it holds in the project."
        ),
        params_model=params.GetProjectMembersParams,
        handler="get_project_members",
    ),
    ToolDefinition(
        name="get_project_versions",
        description="Get the versions (milestones) available to a Redmine project.",
        params_model=params.GetProjectVersionsParams,
        handler="get_project_versions",
    ),
    ToolDefinition(
        name="get_users",
        description=(
            "Get the users of a Redmine project, each with their project roles. "
            "project_id is required. Returns paginated results."
        ),
        params_model=params.GetUsersParams,
        handler="get_users",
    ),
    ToolDefinition(
        name="search_issues",
        description=(
            "Search for Redmine issues/tickets whose subject contains the query "
            "text. This is a plain substring match on the subject field only: "
            "descriptions and comments are not searched and results are not "
            "ranked by relevance. Returns paginated results."
        ),
        params_model=params.SearchIssuesParams,
        handler="search_issues",
    ),
    ToolDefinition(
        name="get_time_entries",
        description=(
            "Get time entries logged in Redmine. Can be filtered by project, user, "
            "and date range."
        ),
        params_model=params.GetTimeEntriesParams,
        handler="get_time_entries",
    ),
    ToolDefinition(
        name="get_time_entry_activities",
        description="Get list of time entry activities (e.g. Design, Development).",
        params_model=params.GetTimeEntryActivitiesParams,
        handler="get_time_entry_activities",
    ),
    ToolDefinition(
        name="create_issue",
        description=(
            "Create a new issue/ticket in Redmine. Returns the created issue with "
            "its ID and details."
        ),
        params_model=params.CreateIssueParams,
        handler="create_issue",
        read_only=False,
    ),
    ToolDefinition(
        name="update_issue",
        description=(
            "Update an existing Redmine issue/ticket. Only provided fields will "
            "be updated."
        ),
        params_model=params.UpdateIssueParams,
        handler="update_issue",
        read_only=False,
    ),
    ToolDefinition(
        name="add_comment",
        description=(
            "Add a comment/note to an existing Redmine issue. Only the note is "
            "sent; no other issue field is changed."
        ),
        params_model=params.AddCommentParams,
        handler="add_comment",
        read_only=False,
    ),
    ToolDefinition(
        name="delete_issue",
        description="Delete a Redmine issue/ticket by ID. This cannot be undone.",
        params_model=params.DeleteIssueParams,
        handler="delete_issue",
        read_only=False,
    ),
    ToolDefinition(
        name="log_time",
        description=(
            "Log time spent on an issue or project. Provide issue_id or "
            "project_id."
        ),
        params_model=params.LogTimeParams,
        handler="log_time",
        read_only=False,
    ),
)

_TOOLS_BY_NAME: dict[str, ToolDefinition] = {
    definition.name: definition for definition in TOOL_DEFINITIONS
}
if len(_TOOLS_BY_NAME) != len(TOOL_DEFINITIONS):
    raise RuntimeError("Duplicate tool names in TOOL_DEFINITIONS")


def list_operations() -> list[ToolDefinition]:
    """Return every registered tool in advertised order."""
    return list(TOOL_DEFINITIONS)


def get_tool_definition(name: str) -> ToolDefinition:
    """Look up a tool by name.

    Raises:
        UnknownToolError: If no tool of that name is registered
    """
    try:
        return _TOOLS_BY_NAME[name]
    except KeyError:
        raise UnknownToolError(name) from None


def schema_for(name: str) -> type[BaseModel]:
    """Return the validation model of a registered tool.

    Raises:
        UnknownToolError: If no tool of that name is registered
    """
    return get_tool_definition(name).params_model


def to_mcp_tools(definitions: list[ToolDefinition]) -> list[Tool]:
    """Convert registry entries into MCP tool descriptors."""
    return [
        Tool(
            name=definition.name,
            description=definition.description,
            inputSchema=definition.input_schema,
        )
        for definition in definitions
    ]
