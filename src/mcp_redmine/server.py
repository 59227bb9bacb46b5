import json
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool
from pydantic import ValidationError

from .exceptions import ToolNotAvailableError, ToolValidationError
from .logging_config import log_operation
from .redmine import RedmineFetcher
from .redmine.config import RedmineConfig
from .servers.registry import (
    ToolDefinition,
    get_tool_definition,
    list_operations,
    to_mcp_tools,
)
from .utils.io import is_read_only_mode
from .utils.logging import log_config_param
from .utils.tools import get_enabled_tools, should_include_tool

# Configure logging
logger = logging.getLogger("mcp-redmine")


@dataclass(frozen=True)
class AppContext:
    """Application context for MCP Redmine."""

    redmine: RedmineFetcher
    read_only: bool = False
    enabled_tools: list[str] | None = None


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Initialize and clean up application resources.

    Raises:
        ValueError: If the Redmine configuration is incomplete; the server
            does not start with partial credentials.
    """
    logger.info("Starting MCP Redmine server")

    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")

    config = RedmineConfig.from_env()
    log_config_param(logger, "Redmine", "URL", config.url)
    log_config_param(logger, "Redmine", "Username", config.username)
    log_config_param(logger, "Redmine", "API Key", config.api_key, sensitive=True)
    log_config_param(logger, "Redmine", "Password", config.password, sensitive=True)
    log_config_param(logger, "Redmine", "SSL Verify", str(config.ssl_verify))

    redmine = RedmineFetcher(config=config)
    logger.info("Redmine client initialized successfully.")
    try:
        yield AppContext(
            redmine=redmine, read_only=read_only, enabled_tools=enabled_tools
        )
    finally:
        await redmine.close()
        logger.info("MCP Redmine server shut down.")


def is_tool_available(definition: ToolDefinition, ctx: AppContext) -> bool:
    """Check the tool against read-only mode and the enabled tools filter."""
    if ctx.read_only and not definition.read_only:
        return False
    return should_include_tool(definition.name, ctx.enabled_tools)


def format_validation_error(tool_name: str, error: ValidationError) -> str:
    """Render pydantic errors as one line per offending field."""
    problems = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "arguments"
        problems.append(f"{field}: {detail['msg']}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(problems)


async def invoke(
    redmine: RedmineFetcher, name: str, arguments: dict[str, Any] | None
) -> Any:
    """Validate the arguments of a tool and run it against Redmine.

    Args:
        redmine: The Redmine adapter
        name: Registered tool name
        arguments: Raw argument bag from the caller

    Returns:
        The JSON-serializable result of the tool

    Raises:
        UnknownToolError: If the tool is not registered
        ToolValidationError: If the arguments fail validation; Redmine is not called
        RedmineApiError: If the Redmine call fails
    """
    definition = get_tool_definition(name)

    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ToolValidationError(
            f"Invalid arguments for {name}: expected an object", tool_name=name
        )

    try:
        validated = definition.params_model.model_validate(arguments)
    except ValidationError as e:
        raise ToolValidationError(
            format_validation_error(name, e), tool_name=name
        ) from e

    handler = getattr(redmine, definition.handler)
    with log_operation(logger, name):
        return await handler(**validated.to_arguments())


# Create server instance
app = Server("mcp-redmine", lifespan=server_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List the Redmine tools available on this server."""
    ctx: AppContext | None = app.request_context.lifespan_context
    if ctx is None:
        return []

    definitions = [
        definition
        for definition in list_operations()
        if is_tool_available(definition, ctx)
    ]
    return to_mcp_tools(definitions)


@app.call_tool()
async def call_tool(name: str, arguments: Any) -> Sequence[TextContent]:
    """Handle tool calls for Redmine operations.

    Errors propagate; the MCP layer reports them to the caller as an error
    result tied to this call.
    """
    ctx: AppContext = app.request_context.lifespan_context

    definition = get_tool_definition(name)
    if not is_tool_available(definition, ctx):
        if ctx.read_only and not definition.read_only:
            message = f"Tool '{name}' is not available in read-only mode."
        else:
            message = f"Tool '{name}' is not enabled on this server."
        logger.warning(message)
        raise ToolNotAvailableError(message)

    try:
        result = await invoke(ctx.redmine, name, arguments)
    except Exception as e:
        logger.error(f"Error executing {name}: {str(e)}")
        raise

    return [
        TextContent(
            type="text",
            text=json.dumps(result, indent=2, ensure_ascii=False),
        )
    ]


async def run_server(
    transport: str = "stdio", host: str = "0.0.0.0", port: int = 8000  # noqa: S104
) -> None:
    """Run the MCP Redmine server with the specified transport."""
    if transport == "sse":
        import uvicorn
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.responses import JSONResponse, Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )
            return Response()

        async def health_check(request: Request) -> JSONResponse:
            return JSONResponse({"status": "ok"})

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Route("/healthz", endpoint=health_check),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        config = uvicorn.Config(starlette_app, host=host, port=port)
        server = uvicorn.Server(config)
        # Use server.serve() instead of run() to stay in the same event loop
        await server.serve()
    elif transport == "stdio":
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )
    else:
        raise ValueError(f"Unknown transport: {transport}")
