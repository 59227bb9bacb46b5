"""Base client module for Redmine API interactions."""

import logging
from typing import Any

import httpx

from ..exceptions import RedmineApiError
from .config import RedmineConfig
from .constants import API_KEY_HEADER

# Configure logging
logger = logging.getLogger("mcp-redmine.redmine")


class RedmineClient:
    """Base client for Redmine REST API interactions.

    One ``httpx.AsyncClient`` is created per client and only read afterwards,
    so concurrent tool calls can share it.
    """

    def __init__(
        self,
        config: RedmineConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Redmine client with a given configuration.

        Args:
            config: Redmine configuration object. If None, will be loaded from
                environment variables.
            transport: Optional httpx transport, used to route requests
                somewhere other than the network.

        Raises:
            ValueError: If the configuration is missing required values.
        """
        self.config = config or RedmineConfig.from_env()
        self.session = self._create_session(transport)

    def _create_session(
        self, transport: httpx.AsyncBaseTransport | None = None
    ) -> httpx.AsyncClient:
        """Create the HTTP session carrying the API key and basic credentials.

        Returns:
            Authenticated HTTP session
        """
        return httpx.AsyncClient(
            base_url=f"{self.config.url}/",
            headers={
                "Content-Type": "application/json",
                API_KEY_HEADER: self.config.api_key,
            },
            auth=(self.config.username, self.config.password),
            verify=self.config.ssl_verify,
            transport=transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request to the Redmine API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the base URL (e.g. ``issues.json``)
            params: Query parameters; callers pass only the keys to send
            json: JSON request body

        Returns:
            Parsed JSON response, or None when the response has no body

        Raises:
            RedmineApiError: If the request fails or the body is not JSON
        """
        logger.debug(f"Sending {method} request to {path}")

        try:
            response = await self.session.request(
                method, path, params=params, json=json
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            body = e.response.text
            logger.error(f"HTTP error {status_code} for {method} {path}: {body}")
            raise RedmineApiError(
                f"HTTP error: {status_code} - {body}",
                status_code=status_code,
                body=body,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error for {method} {path}: {str(e)}")
            raise RedmineApiError(f"Request error: {str(e)}") from e

        if not response.content or not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Malformed JSON response for {method} {path}")
            raise RedmineApiError(
                f"Malformed response: {str(e)}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    @staticmethod
    def _unwrap(data: Any, key: str) -> Any:
        """Return the object Redmine wraps under ``key`` in a response.

        Raises:
            RedmineApiError: If the response does not carry that envelope
        """
        if not isinstance(data, dict) or key not in data:
            raise RedmineApiError(f"Malformed response: missing '{key}' envelope")
        return data[key]

    @staticmethod
    def _envelope(data: Any, key: str) -> dict[str, Any]:
        """Check a listing response and return it whole.

        Raises:
            RedmineApiError: If the response has no ``key`` list
        """
        if not isinstance(data, dict) or not isinstance(data.get(key), list):
            raise RedmineApiError(f"Malformed response: missing '{key}' list")
        return data

    async def close(self) -> None:
        """Close HTTP session."""
        await self.session.aclose()
