import inspect
import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from mcp_redmine.exceptions import (
    MCPRedmineAuthenticationError,
    RedmineApiError,
    RedmineNotFoundError,
)

logger = logging.getLogger(__name__)


F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_redmine_api_errors(
    operation: str,
    resource: str | None = None,
    id_param: str | None = None,
) -> Callable[[F], F]:
    """
    Decorator normalizing Redmine API failures raised by an adapter method.

    Args:
        operation: Human-readable operation name (e.g., "get issue").
        resource: Resource name used for 404 translation (e.g., "Project").
            Without it a 404 stays a plain RedmineApiError.
        id_param: Name of the argument holding the resource identifier.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return await func(self, *args, **kwargs)
            except RedmineApiError as api_err:
                if isinstance(
                    api_err, RedmineNotFoundError | MCPRedmineAuthenticationError
                ):
                    raise

                identifier = None
                if id_param:
                    bound = signature.bind_partial(self, *args, **kwargs)
                    identifier = bound.arguments.get(id_param)
                target = f" {identifier}" if identifier is not None else ""

                if api_err.status_code in (401, 403):
                    error_msg = (
                        f"Authentication failed for Redmine API "
                        f"({api_err.status_code}) while trying to {operation}. "
                        "Please verify the API key and credentials."
                    )
                    logger.error(error_msg)
                    raise MCPRedmineAuthenticationError(
                        error_msg, status_code=api_err.status_code, body=api_err.body
                    ) from api_err

                if api_err.status_code == 404 and resource:
                    error_msg = f"{resource}{target} not found"
                    logger.warning(f"{operation} failed: {error_msg}")
                    raise RedmineNotFoundError(
                        error_msg, status_code=404, body=api_err.body
                    ) from api_err

                subject = f" for {resource.lower()}{target}" if resource else target
                error_msg = f"Failed to {operation}{subject}: {api_err}"
                logger.error(error_msg)
                raise RedmineApiError(
                    error_msg, status_code=api_err.status_code, body=api_err.body
                ) from api_err

        return wrapper  # type: ignore

    return decorator
