"""Tool filtering utilities for MCP Redmine."""

import logging
import os

logger = logging.getLogger("mcp-redmine.utils.tools")


def get_enabled_tools() -> list[str] | None:
    """Read the ENABLED_TOOLS allow-list from the environment.

    Returns:
        List of tool names, or None when every tool is enabled
    """
    enabled_tools_str = os.getenv("ENABLED_TOOLS")
    if not enabled_tools_str:
        logger.debug("ENABLED_TOOLS not set, all tools enabled")
        return None

    tools = [tool.strip() for tool in enabled_tools_str.split(",") if tool.strip()]
    logger.debug(f"Enabled tools: {tools}")
    return tools or None


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check whether a tool passes the allow-list."""
    if enabled_tools is None:
        return True
    return tool_name in enabled_tools
