"""Tests for tools.py — tool registration and error boundaries.

These tests verify that:
1. Tools catch all exceptions and return 'Error: ...' strings
2. Tools produce correct output for happy paths
"""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from miniflux_mcp.errors import APIError
from miniflux_mcp.models import Category, Entry, EntryResultSet, Feed, FeedCounters
from miniflux_mcp.tools import _summarize_entry, register_tools

# We don't need a real FastMCP server — we just need to capture the
# registered tool functions so we can call them directly.


class FakeMCP:
    """Minimal stand-in that captures tool registrations."""

    def __init__(self):
        self.tools: dict[str, object] = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn

        return decorator


@pytest.fixture
def tools(client):
    """Register tools on a fake MCP and return them as a dict."""
    fake_mcp = FakeMCP()
    register_tools(fake_mcp, client)
    return fake_mcp.tools


SAMPLE_FEEDS = [
    Feed(id=10, title="Feed A", feed_url="https://a.com/rss", category=Category(id=1, title="Tech")),
    Feed(id=20, title="Feed B", feed_url="https://b.com/rss"),
]

SAMPLE_ENTRIES = EntryResultSet(
    total=2,
    entries=[
        Entry(id=1, feed_id=10, status="unread", title="Entry 1", content="<p>one</p>"),
        Entry(id=2, feed_id=20, status="unread", title="Entry 2", starred=True),
    ],
)


def test_all_tools_registered(tools):
    assert set(tools) == {
        "list_feeds",
        "get_unread_entries",
        "search_entries",
        "get_entry",
        "mark_as_read",
        "mark_as_unread",
        "toggle_bookmark",
        "mark_feed_as_read",
        "refresh_all_feeds",
        "list_categories",
        "server_status",
    }


def test_summarize_entry_drops_content():
    summary = _summarize_entry(SAMPLE_ENTRIES.entries[0])
    assert "content" not in summary
    assert summary["title"] == "Entry 1"
    assert summary["feed_title"] is None


# --- Feeds ---


@pytest.mark.asyncio
async def test_list_feeds_happy_path(tools, client):
    client.get_feeds = AsyncMock(return_value=SAMPLE_FEEDS)
    client.get_counters = AsyncMock(return_value=FeedCounters(unreads={10: 5}))

    result = json.loads(await tools["list_feeds"]())

    assert result[0]["title"] == "Feed A"
    assert result[0]["category"] == "Tech"
    assert result[0]["unread_count"] == 5
    assert result[1]["unread_count"] == 0


@pytest.mark.asyncio
async def test_list_feeds_error_returns_string(tools, client):
    client.get_feeds = AsyncMock(side_effect=APIError("Access Unauthorized", 401))

    result = await tools["list_feeds"]()
    assert result == "Error: Access Unauthorized"


@pytest.mark.asyncio
async def test_mark_feed_as_read(tools, client):
    client.mark_feed_as_read = AsyncMock(return_value=None)

    assert await tools["mark_feed_as_read"](feed_id=10) == "OK"
    client.mark_feed_as_read.assert_awaited_once_with(10)


@pytest.mark.asyncio
async def test_refresh_all_feeds_error(tools, client):
    client.refresh_all_feeds = AsyncMock(side_effect=RuntimeError("timeout"))

    result = await tools["refresh_all_feeds"]()
    assert result.startswith("Error:")


# --- Entries ---


@pytest.mark.asyncio
async def test_get_unread_entries_all(tools, client):
    client.get_entries = AsyncMock(return_value=SAMPLE_ENTRIES)

    result = json.loads(await tools["get_unread_entries"](limit=5))

    assert result["total"] == 2
    assert [e["title"] for e in result["entries"]] == ["Entry 1", "Entry 2"]
    entry_filter = client.get_entries.call_args[0][0]
    assert entry_filter.status == ["unread"]
    assert entry_filter.limit == 5


@pytest.mark.asyncio
async def test_get_unread_entries_by_feed(tools, client):
    client.get_feed_entries = AsyncMock(return_value=SAMPLE_ENTRIES)

    await tools["get_unread_entries"](feed_id=10)

    assert client.get_feed_entries.call_args[0][0] == 10


@pytest.mark.asyncio
async def test_get_unread_entries_by_category(tools, client):
    client.get_category_entries = AsyncMock(return_value=SAMPLE_ENTRIES)

    await tools["get_unread_entries"](category_id=1)

    assert client.get_category_entries.call_args[0][0] == 1


@pytest.mark.asyncio
async def test_get_unread_entries_error(tools, client):
    client.get_entries = AsyncMock(side_effect=RuntimeError("connection lost"))

    result = await tools["get_unread_entries"]()
    assert result.startswith("Error:")
    assert "connection lost" in result


@pytest.mark.asyncio
async def test_search_entries(tools, client):
    client.search_entries = AsyncMock(return_value=SAMPLE_ENTRIES)

    result = json.loads(await tools["search_entries"](query="entry", limit=3))

    assert len(result) == 2
    client.search_entries.assert_awaited_once_with("entry", 3)


@pytest.mark.asyncio
async def test_search_entries_no_match(tools, client):
    client.search_entries = AsyncMock(return_value=EntryResultSet(total=0))

    assert await tools["search_entries"](query="nothing") == "[]"


@pytest.mark.asyncio
async def test_get_entry_includes_content_and_link(tools, client):
    body = {"id": 1, "feed_id": 10, "status": "read", "title": "Entry 1", "content": "<p>one</p>"}
    mock = AsyncMock(return_value=httpx.Response(200, json=body))
    with patch.object(client._client, "request", mock):
        result = json.loads(await tools["get_entry"](entry_id=1))

    assert result["content"] == "<p>one</p>"
    assert result["web_url"] == "http://localhost:8080/history/entry/1"
    assert mock.await_count == 1


@pytest.mark.asyncio
async def test_get_entry_not_found(tools, client):
    client.get_entry = AsyncMock(side_effect=APIError("resource not found", 404))

    assert await tools["get_entry"](entry_id=999) == "Error: resource not found"


@pytest.mark.asyncio
async def test_mark_as_read_empty_list(tools, client):
    client.update_entries_status = AsyncMock()

    assert await tools["mark_as_read"](entry_ids=[]) == "OK"
    client.update_entries_status.assert_not_awaited()


@pytest.mark.asyncio
async def test_mark_as_read_success(tools, client):
    client.update_entries_status = AsyncMock(return_value=None)

    assert await tools["mark_as_read"](entry_ids=[1, 2, 3]) == "OK"
    client.update_entries_status.assert_awaited_once_with([1, 2, 3], "read")


@pytest.mark.asyncio
async def test_mark_as_unread_success(tools, client):
    client.update_entries_status = AsyncMock(return_value=None)

    assert await tools["mark_as_unread"](entry_ids=[4]) == "OK"
    client.update_entries_status.assert_awaited_once_with([4], "unread")


@pytest.mark.asyncio
async def test_mark_as_read_error(tools, client):
    client.update_entries_status = AsyncMock(side_effect=RuntimeError("server error"))

    result = await tools["mark_as_read"](entry_ids=[1])
    assert result.startswith("Error:")


@pytest.mark.asyncio
async def test_toggle_bookmark(tools, client):
    client.toggle_bookmark = AsyncMock(return_value=None)

    assert await tools["toggle_bookmark"](entry_id=42) == "OK"


@pytest.mark.asyncio
async def test_toggle_bookmark_error(tools, client):
    client.toggle_bookmark = AsyncMock(side_effect=RuntimeError("denied"))

    assert (await tools["toggle_bookmark"](entry_id=42)).startswith("Error:")


# --- Categories and system ---


@pytest.mark.asyncio
async def test_list_categories(tools, client):
    client.get_categories = AsyncMock(return_value=[Category(id=1, title="Tech")])

    result = json.loads(await tools["list_categories"]())
    assert result == [{"id": 1, "title": "Tech"}]


@pytest.mark.asyncio
async def test_server_status(tools, client):
    client.healthcheck = AsyncMock(return_value="OK")
    client.get_version = AsyncMock(return_value="2.2.0\n")

    result = json.loads(await tools["server_status"]())
    assert result == {"health": "OK", "version": "2.2.0"}


@pytest.mark.asyncio
async def test_server_status_error(tools, client):
    client.healthcheck = AsyncMock(side_effect=APIError("Failed to parse error response", 503))

    result = await tools["server_status"]()
    assert result == "Error: Failed to parse error response"
