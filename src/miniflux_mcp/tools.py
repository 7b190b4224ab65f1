"""MCP tool definitions for Miniflux.

Each tool does exactly one thing. All exceptions are caught at the
tool boundary and returned as "Error: ..." strings so the MCP protocol
never sees an uncaught exception.
"""

import json
import logging

from fastmcp import FastMCP

from .client import MinifluxClient
from .filters import Filter
from .models import Entry

logger = logging.getLogger(__name__)


def _summarize_entry(entry: Entry) -> dict:
    """Keep the entry fields worth showing to a model, drop the HTML body."""
    return {
        "id": entry.id,
        "feed_id": entry.feed_id,
        "title": entry.title,
        "url": entry.url,
        "status": entry.status,
        "starred": entry.starred,
        "published_at": entry.published_at,
        "feed_title": entry.feed.title if entry.feed else None,
    }


def register_tools(mcp: FastMCP, client: MinifluxClient) -> None:
    """Register all Miniflux tools on the given MCP server instance."""

    @mcp.tool()
    async def list_feeds() -> str:
        """List all subscribed feeds with unread counts.

        Returns a JSON-formatted list of objects with id, title, site_url,
        feed_url, category and unread_count fields.
        """
        try:
            feeds = await client.get_feeds()
            counters = await client.get_counters()
            result = [
                {
                    "id": feed.id,
                    "title": feed.title,
                    "site_url": feed.site_url,
                    "feed_url": feed.feed_url,
                    "category": feed.category.title if feed.category else None,
                    "unread_count": counters.unreads.get(feed.id, 0),
                }
                for feed in feeds
            ]
            return json.dumps(result)
        except Exception as e:
            logger.error("list_feeds failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def get_unread_entries(
        limit: int = 20,
        feed_id: int | None = None,
        category_id: int | None = None,
    ) -> str:
        """Get unread entries, newest first.

        Args:
            limit: Maximum number of entries to return (default 20).
            feed_id: Optional feed ID to restrict to.
            category_id: Optional category ID to restrict to.

        Returns a JSON object with the total unread count and the entries.
        """
        try:
            entry_filter = Filter(
                status=["unread"],
                limit=limit,
                order="published_at",
                direction="desc",
            )
            if feed_id is not None:
                result = await client.get_feed_entries(feed_id, entry_filter)
            elif category_id is not None:
                result = await client.get_category_entries(category_id, entry_filter)
            else:
                result = await client.get_entries(entry_filter)
            return json.dumps(
                {"total": result.total, "entries": [_summarize_entry(e) for e in result.entries]}
            )
        except Exception as e:
            logger.error("get_unread_entries failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def search_entries(query: str, limit: int = 10) -> str:
        """Full-text search across all entries.

        Args:
            query: Search terms.
            limit: Maximum number of matching entries to return (default 10).

        Returns a JSON-formatted list of matching entries.
        """
        try:
            result = await client.search_entries(query, limit)
            return json.dumps([_summarize_entry(e) for e in result.entries])
        except Exception as e:
            logger.error("search_entries failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def get_entry(entry_id: int) -> str:
        """Get a single entry with its content and web UI link.

        Args:
            entry_id: ID of the entry.
        """
        try:
            entry = await client.get_entry(entry_id)
            data = _summarize_entry(entry)
            data["content"] = entry.content or ""
            data["web_url"] = client.entry_web_url(entry)
            return json.dumps(data)
        except Exception as e:
            logger.error("get_entry failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def mark_as_read(entry_ids: list[int]) -> str:
        """Mark entries as read.

        Args:
            entry_ids: List of entry IDs to mark as read.

        Returns "OK" on success or an error message.
        """
        try:
            if not entry_ids:
                return "OK"
            await client.update_entries_status(entry_ids, "read")
            return "OK"
        except Exception as e:
            logger.error("mark_as_read failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def mark_as_unread(entry_ids: list[int]) -> str:
        """Mark entries as unread.

        Args:
            entry_ids: List of entry IDs to mark as unread.

        Returns "OK" on success or an error message.
        """
        try:
            if not entry_ids:
                return "OK"
            await client.update_entries_status(entry_ids, "unread")
            return "OK"
        except Exception as e:
            logger.error("mark_as_unread failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def toggle_bookmark(entry_id: int) -> str:
        """Star or unstar an entry.

        Args:
            entry_id: ID of the entry.
        """
        try:
            await client.toggle_bookmark(entry_id)
            return "OK"
        except Exception as e:
            logger.error("toggle_bookmark failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def mark_feed_as_read(feed_id: int) -> str:
        """Mark every entry of a feed as read.

        Args:
            feed_id: ID of the feed.
        """
        try:
            await client.mark_feed_as_read(feed_id)
            return "OK"
        except Exception as e:
            logger.error("mark_feed_as_read failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def refresh_all_feeds() -> str:
        """Ask the server to poll every feed in the background."""
        try:
            await client.refresh_all_feeds()
            return "OK"
        except Exception as e:
            logger.error("refresh_all_feeds failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def list_categories() -> str:
        """List all categories as a JSON array of id/title objects."""
        try:
            categories = await client.get_categories()
            return json.dumps([{"id": c.id, "title": c.title} for c in categories])
        except Exception as e:
            logger.error("list_categories failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def server_status() -> str:
        """Report server health and version."""
        try:
            health = await client.healthcheck()
            version = await client.get_version()
            return json.dumps({"health": health.strip(), "version": version.strip()})
        except Exception as e:
            logger.error("server_status failed: %s", e, exc_info=True)
            return f"Error: {e}"
