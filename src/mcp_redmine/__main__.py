"""Entry point for running the MCP Redmine server."""

from mcp_redmine import main

if __name__ == "__main__":
    main()
