class MCPRedmineError(Exception):
    """Base exception for MCP-Redmine errors."""

    pass


class ToolValidationError(MCPRedmineError, ValueError):
    """Raised when tool arguments fail validation before any remote call."""

    def __init__(self, message: str, tool_name: str | None = None) -> None:
        super().__init__(message)
        self.tool_name = tool_name


class UnknownToolError(MCPRedmineError, LookupError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolNotAvailableError(MCPRedmineError):
    """Raised when a registered tool is disabled for this server instance."""

    pass


class RedmineApiError(MCPRedmineError):
    """Raised when a call to the Redmine REST API fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RedmineNotFoundError(RedmineApiError):
    """Raised when Redmine answers 404 for an identified resource."""

    pass


class MCPRedmineAuthenticationError(RedmineApiError):
    """Raised when Redmine API authentication fails (401/403)."""

    pass
