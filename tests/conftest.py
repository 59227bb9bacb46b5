"""Shared pytest fixtures for MCP Redmine tests."""

import os
from unittest.mock import patch

import pytest

from mcp_redmine.redmine import RedmineFetcher
from mcp_redmine.redmine.config import RedmineConfig
from tests.utils.redmine_server import FakeRedmine


@pytest.fixture
def mock_env_vars():
    """Mock the required Redmine environment variables."""
    with patch.dict(
        os.environ,
        {
            "REDMINE_URL": "https://redmine.example.com",
            "REDMINE_API_KEY": "test-api-key",
            "REDMINE_USERNAME": "test-user",
            "REDMINE_PASSWORD": "test-password",
        },
    ):
        yield


@pytest.fixture
def redmine_config():
    """Create a RedmineConfig instance for tests."""
    return RedmineConfig(
        url="https://redmine.example.com",
        api_key="test-api-key",
        username="test-user",
        password="test-password",
    )


@pytest.fixture
def fake_redmine():
    """Create an in-process Redmine API recording every request."""
    return FakeRedmine()


@pytest.fixture
def redmine_fetcher(redmine_config, fake_redmine):
    """Create a RedmineFetcher whose requests go to the fake Redmine."""
    return RedmineFetcher(config=redmine_config, transport=fake_redmine.transport)
