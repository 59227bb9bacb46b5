"""Tests for the Redmine API error decorator."""

import pytest

from mcp_redmine.exceptions import (
    MCPRedmineAuthenticationError,
    RedmineApiError,
    RedmineNotFoundError,
)
from mcp_redmine.utils.decorators import handle_redmine_api_errors


class DummyAdapter:
    def __init__(self, error=None):
        self.error = error

    @handle_redmine_api_errors("get widget", resource="Widget", id_param="widget_id")
    async def get_widget(self, widget_id, verbose=False):
        if self.error:
            raise self.error
        return {"id": widget_id}

    @handle_redmine_api_errors("list widgets")
    async def list_widgets(self):
        if self.error:
            raise self.error
        return []


@pytest.mark.anyio
async def test_passes_through_return_value():
    assert await DummyAdapter().get_widget(3) == {"id": 3}


@pytest.mark.anyio
@pytest.mark.parametrize("status_code", [401, 403])
async def test_auth_errors(status_code):
    adapter = DummyAdapter(RedmineApiError("HTTP error", status_code=status_code))

    with pytest.raises(MCPRedmineAuthenticationError) as excinfo:
        await adapter.get_widget(3)

    assert excinfo.value.status_code == status_code
    assert f"({status_code}) while trying to get widget" in str(excinfo.value)


@pytest.mark.anyio
async def test_not_found_positional_identifier():
    adapter = DummyAdapter(RedmineApiError("HTTP error: 404", status_code=404))

    with pytest.raises(RedmineNotFoundError) as excinfo:
        await adapter.get_widget(12)

    assert str(excinfo.value) == "Widget 12 not found"
    assert isinstance(excinfo.value.__cause__, RedmineApiError)


@pytest.mark.anyio
async def test_not_found_keyword_identifier():
    adapter = DummyAdapter(RedmineApiError("HTTP error: 404", status_code=404))

    with pytest.raises(RedmineNotFoundError, match="Widget 12 not found"):
        await adapter.get_widget(widget_id=12, verbose=True)


@pytest.mark.anyio
async def test_not_found_without_resource_stays_generic():
    adapter = DummyAdapter(RedmineApiError("HTTP error: 404", status_code=404))

    with pytest.raises(RedmineApiError) as excinfo:
        await adapter.list_widgets()

    assert not isinstance(excinfo.value, RedmineNotFoundError)
    assert str(excinfo.value) == "Failed to list widgets: HTTP error: 404"
    assert excinfo.value.status_code == 404


@pytest.mark.anyio
async def test_other_errors_are_annotated():
    adapter = DummyAdapter(
        RedmineApiError("HTTP error: 500 - oops", status_code=500, body="oops")
    )

    with pytest.raises(RedmineApiError) as excinfo:
        await adapter.get_widget(4)

    assert str(excinfo.value) == (
        "Failed to get widget for widget 4: HTTP error: 500 - oops"
    )
    assert excinfo.value.body == "oops"


@pytest.mark.anyio
async def test_translated_errors_are_not_rewrapped():
    original = RedmineNotFoundError("Widget 1 not found", status_code=404)
    adapter = DummyAdapter(original)

    with pytest.raises(RedmineNotFoundError) as excinfo:
        await adapter.get_widget(1)

    assert excinfo.value is original


@pytest.mark.anyio
async def test_unrelated_errors_propagate():
    adapter = DummyAdapter(ValueError("bad field"))

    with pytest.raises(ValueError, match="bad field"):
        await adapter.get_widget(1)
