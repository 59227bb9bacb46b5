import asyncio
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .logging_config import log_operation, setup_logger

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default="stdio",
    help="Transport type (stdio or sse)",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind for SSE transport",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option("--redmine-url", help="Redmine URL (e.g., https://redmine.example.com)")
@click.option("--redmine-api-key", help="Redmine REST API key")
@click.option("--redmine-username", help="Redmine username for basic auth")
@click.option("--redmine-password", help="Redmine password for basic auth")
@click.option(
    "--redmine-ssl-verify/--no-redmine-ssl-verify",
    default=None,
    help="Verify SSL certificates for Redmine (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Disable all write tools (create, update, comment, delete, log time)",
)
@click.option(
    "--enabled-tools",
    help="Comma-separated list of tools to enable (default: all)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    host: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    redmine_url: str | None,
    redmine_api_key: str | None,
    redmine_username: str | None,
    redmine_password: str | None,
    redmine_ssl_verify: bool | None,
    read_only: bool,
    enabled_tools: str | None,
) -> None:
    """MCP Redmine Server - Redmine issue tracking functionality for MCP"""
    logging_level = "DEBUG" if verbose >= 2 else "INFO"
    setup_logger(level=logging_level, log_to_file=log_to_file, log_dir=log_dir)

    with log_operation(logger, "application_startup", app_version=__version__):
        # Load environment variables from file if specified, otherwise try default .env
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments take precedence over the environment
        if redmine_url:
            os.environ["REDMINE_URL"] = redmine_url
        if redmine_api_key:
            os.environ["REDMINE_API_KEY"] = redmine_api_key
        if redmine_username:
            os.environ["REDMINE_USERNAME"] = redmine_username
        if redmine_password:
            os.environ["REDMINE_PASSWORD"] = redmine_password
        if redmine_ssl_verify is not None:
            os.environ["REDMINE_SSL_VERIFY"] = str(redmine_ssl_verify).lower()
        if read_only:
            os.environ["READ_ONLY_MODE"] = "true"
        if enabled_tools:
            os.environ["ENABLED_TOOLS"] = enabled_tools
        if log_dir:
            os.environ["LOG_DIR"] = log_dir

        from .redmine.config import get_missing_env_vars

        missing = get_missing_env_vars()
        if missing:
            click.echo("Error: Missing required environment variables:", err=True)
            for name in missing:
                click.echo(f"  - {name}", err=True)
            click.echo(
                "\nPlease create a .env file with all required variables.", err=True
            )
            click.echo("See .env.example for reference.", err=True)
            sys.exit(1)

        from . import server

        logger.info(f"Starting MCP Redmine v{__version__} with {transport} transport")

    asyncio.run(server.run_server(transport=transport, host=host, port=port))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
