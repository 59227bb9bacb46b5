"""MCP server building blocks for Redmine."""

from .registry import (
    TOOL_DEFINITIONS,
    ToolDefinition,
    get_tool_definition,
    list_operations,
    schema_for,
    to_mcp_tools,
)

__all__ = [
    "TOOL_DEFINITIONS",
    "ToolDefinition",
    "get_tool_definition",
    "list_operations",
    "schema_for",
    "to_mcp_tools",
]
