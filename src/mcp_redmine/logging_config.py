"""Logging configuration for MCP Redmine."""

import logging
import os
import sys
import time
import types
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

# Default logger configuration
DEFAULT_LOGGER_NAME = "mcp-redmine"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

# Per-task context; each asyncio task sees its own copy
_log_context: ContextVar[dict[str, Any]] = ContextVar("mcp_redmine_log_context")


def get_context() -> dict[str, Any]:
    """Return a copy of the logging context of the current task."""
    return dict(_log_context.get({}))


def get_context_str() -> str:
    """Format the current context as ``key=value`` pairs."""
    context_data = _log_context.get({})
    if not context_data:
        return "no-context"

    # Format context as: operation=X,trace_id=Y,...
    return ",".join(f"{k}={v}" for k, v in context_data.items())


class ContextFilter(logging.Filter):
    """Attaches the current logging context to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = get_context_str()
        return True


class LoggingContextManager:
    """Context manager for logging with tracking."""

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Logger receiving the start/end records
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.start_time = time.monotonic()

        # Generates a trace_id if not provided
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])
        self._token: Any = None

    def __enter__(self) -> "LoggingContextManager":
        """Starts the logging context."""
        self.start_time = time.monotonic()
        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        self._token = _log_context.set({**_log_context.get({}), **self.context})

        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Finalizes the logging context."""
        duration = time.monotonic() - self.start_time

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        _log_context.reset(self._token)


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """
    Configures and returns a logger carrying operation context.

    Records go to stderr; stdout is reserved for the stdio MCP transport.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.)
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Reconfiguring replaces previously installed handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    context_filter = ContextFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY)
        Path(log_directory).mkdir(parents=True, exist_ok=True)

        log_file = Path(log_directory) / f"{name}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    # Prevents propagation to the root logger
    logger.propagate = False

    return logger


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger receiving the records
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
