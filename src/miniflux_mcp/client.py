"""Miniflux REST API client."""

import logging
from typing import Any

import httpx

from . import endpoints
from .auth import Auth, resolve_auth
from .config import Config
from .endpoints import Endpoint
from .errors import APIError
from .filters import EntryStatus, Filter, encode_query
from .models import (
    Category,
    Enclosure,
    Entry,
    EntryResultSet,
    Feed,
    FeedCounters,
    FeedIcon,
    User,
)

logger = logging.getLogger(__name__)

USER_AGENT = "Miniflux Python Client"


class MinifluxClient:
    """Async client for the Miniflux v1 REST API.

    Credentials are validated and turned into a fixed set of default headers
    when the client is created; there is no login round trip and no token
    refresh. Every operation goes through ``_request``, one round trip per
    call (``create_feed`` may chain a ``get_feed``), and either returns a
    value or raises.
    """

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None):
        self._config = config
        self.auth: Auth = resolve_auth(config)

        base_url = config.miniflux_url
        self.base_url = base_url[:-1] if base_url.endswith("/") else base_url

        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            "Content-Type": "application/json",
            **self.auth.headers(),
        }
        self._client = httpx.AsyncClient(
            headers=headers,
            timeout=config.request_timeout,
            follow_redirects=True,
            limits=httpx.Limits(max_keepalive_connections=0),
            transport=transport,
        )

    async def __aenter__(self) -> "MinifluxClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        is_json: bool = True,
    ) -> Any:
        """Perform one HTTP round trip and classify the outcome.

        Args:
            method: HTTP verb
            path: Path relative to the base URL, including any query string
            body: JSON body, or None to send no body
            is_json: Decode a 200/201 body as JSON rather than returning text

        Returns:
            None for 202/204, decoded JSON or text for 200/201

        Raises:
            APIError: For any other status code
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)

        response = await self._client.request(method, url, json=body)

        if response.status_code in (202, 204):
            return None
        if response.status_code in (200, 201):
            return response.json() if is_json else response.text

        raise APIError(self._error_message(response), response.status_code)

    async def _call(
        self,
        endpoint: Endpoint,
        *,
        body: dict[str, Any] | None = None,
        query: str = "",
        **path_params: object,
    ) -> Any:
        path = endpoint.render(query, **path_params)
        return await self._request(endpoint.method, path, body=body, is_json=endpoint.is_json)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pick the most useful message out of an error response."""
        text = response.text
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error_message"):
            return str(data["error_message"])
        return text or "Failed to parse error response"

    @staticmethod
    def _compact(body: dict[str, Any]) -> dict[str, Any]:
        """Drop unset keys so partial updates only send what changed."""
        return {key: value for key, value in body.items() if value is not None}

    # Feeds

    async def get_feeds(self) -> list[Feed]:
        """List all feeds."""
        data = await self._call(endpoints.GET_FEEDS)
        feeds = [Feed.model_validate(item) for item in data]
        logger.info("Retrieved %d feeds", len(feeds))
        return feeds

    async def get_feed(self, feed_id: int) -> Feed:
        data = await self._call(endpoints.GET_FEED, feed_id=feed_id)
        return Feed.model_validate(data)

    async def create_feed(self, feed_url: str, category_id: int | None = None) -> Feed:
        """Subscribe to a feed.

        Miniflux answers with only the new feed's id, in which case the full
        feed is fetched before returning.
        """
        body = self._compact({"feed_url": feed_url, "category_id": category_id})
        data = await self._call(endpoints.CREATE_FEED, body=body)
        if isinstance(data, dict) and set(data) == {"feed_id"}:
            return await self.get_feed(data["feed_id"])
        return Feed.model_validate(data)

    async def update_feed(self, feed_id: int, changes: dict[str, Any]) -> Feed:
        """Update a feed with a partial set of fields."""
        data = await self._call(endpoints.UPDATE_FEED, body=self._compact(changes), feed_id=feed_id)
        return Feed.model_validate(data)

    async def delete_feed(self, feed_id: int) -> None:
        await self._call(endpoints.DELETE_FEED, feed_id=feed_id)

    async def refresh_feed(self, feed_id: int) -> None:
        await self._call(endpoints.REFRESH_FEED, feed_id=feed_id)

    async def refresh_all_feeds(self) -> None:
        await self._call(endpoints.REFRESH_ALL_FEEDS)

    async def get_feed_icon(self, feed_id: int) -> FeedIcon:
        data = await self._call(endpoints.GET_FEED_ICON, feed_id=feed_id)
        return FeedIcon.model_validate(data)

    async def get_feed_entries(self, feed_id: int, filter: Filter | None = None) -> EntryResultSet:
        data = await self._call(
            endpoints.GET_FEED_ENTRIES, query=encode_query(filter), feed_id=feed_id
        )
        return EntryResultSet.model_validate(data)

    async def mark_feed_as_read(self, feed_id: int) -> None:
        await self._call(endpoints.MARK_FEED_AS_READ, feed_id=feed_id)

    async def get_counters(self) -> FeedCounters:
        """Get read and unread counts per feed."""
        data = await self._call(endpoints.GET_FEED_COUNTERS)
        return FeedCounters.model_validate(data)

    # Entries

    async def get_entries(self, filter: Filter | None = None) -> EntryResultSet:
        """List entries across all feeds matching the filter."""
        data = await self._call(endpoints.GET_ENTRIES, query=encode_query(filter))
        result = EntryResultSet.model_validate(data)
        logger.info("Retrieved %d of %d entries", len(result.entries), result.total)
        return result

    async def search_entries(self, query: str, limit: int | None = None) -> EntryResultSet:
        """Full-text search over entries."""
        params = [("search", query)]
        if limit is not None:
            params.append(("limit", str(limit)))
        data = await self._call(endpoints.GET_ENTRIES, query=str(httpx.QueryParams(params)))
        return EntryResultSet.model_validate(data)

    async def get_entry(self, entry_id: int) -> Entry:
        data = await self._call(endpoints.GET_ENTRY, entry_id=entry_id)
        return Entry.model_validate(data)

    async def update_entry_status(self, entry_id: int, status: EntryStatus) -> None:
        await self._call(endpoints.UPDATE_ENTRY, body={"status": status}, entry_id=entry_id)

    async def update_entries_status(self, entry_ids: list[int], status: EntryStatus) -> None:
        """Change the status of several entries in one request."""
        await self._call(endpoints.UPDATE_ENTRIES, body={"entry_ids": entry_ids, "status": status})

    async def update_entry(
        self,
        entry_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Entry:
        body = self._compact({"title": title, "content": content})
        data = await self._call(endpoints.UPDATE_ENTRY, body=body, entry_id=entry_id)
        return Entry.model_validate(data)

    async def toggle_bookmark(self, entry_id: int) -> None:
        await self._call(endpoints.TOGGLE_BOOKMARK, entry_id=entry_id)

    async def fetch_content(self, entry_id: int) -> str:
        """Download the original article content through the server's scraper."""
        data = await self._call(endpoints.FETCH_CONTENT, entry_id=entry_id)
        return data["content"]

    async def save_entry(self, entry_id: int) -> None:
        """Send an entry to the configured third-party integrations.

        Raises APIError when no integration is enabled.
        """
        await self._call(endpoints.SAVE_ENTRY, entry_id=entry_id)

    async def get_miniflux_entry_url(self, entry_id: int) -> str:
        """Build the web UI URL of an entry.

        Read entries live under ``history``; unread and removed entries under
        a segment named after their status.
        """
        entry = await self.get_entry(entry_id)
        return self.entry_web_url(entry)

    def entry_web_url(self, entry: Entry) -> str:
        """Web UI URL of an already fetched entry."""
        segment = "history" if entry.status == "read" else entry.status
        return f"{self.base_url}/{segment}/entry/{entry.id}"

    # Categories

    async def get_categories(self) -> list[Category]:
        data = await self._call(endpoints.GET_CATEGORIES)
        return [Category.model_validate(item) for item in data]

    async def create_category(self, title: str) -> Category:
        data = await self._call(endpoints.CREATE_CATEGORY, body={"title": title})
        return Category.model_validate(data)

    async def update_category(self, category_id: int, title: str) -> Category:
        data = await self._call(
            endpoints.UPDATE_CATEGORY, body={"title": title}, category_id=category_id
        )
        return Category.model_validate(data)

    async def delete_category(self, category_id: int) -> None:
        await self._call(endpoints.DELETE_CATEGORY, category_id=category_id)

    async def refresh_category_feeds(self, category_id: int) -> None:
        await self._call(endpoints.REFRESH_CATEGORY_FEEDS, category_id=category_id)

    async def get_category_entries(
        self, category_id: int, filter: Filter | None = None
    ) -> EntryResultSet:
        data = await self._call(
            endpoints.GET_CATEGORY_ENTRIES, query=encode_query(filter), category_id=category_id
        )
        return EntryResultSet.model_validate(data)

    async def mark_category_as_read(self, category_id: int) -> None:
        await self._call(endpoints.MARK_CATEGORY_AS_READ, category_id=category_id)

    # Enclosures

    async def get_enclosure(self, enclosure_id: int) -> Enclosure:
        data = await self._call(endpoints.GET_ENCLOSURE, enclosure_id=enclosure_id)
        return Enclosure.model_validate(data)

    async def update_enclosure(self, enclosure_id: int, media_progression: int) -> None:
        """Store the playback position of a media enclosure."""
        await self._call(
            endpoints.UPDATE_ENCLOSURE,
            body={"media_progression": media_progression},
            enclosure_id=enclosure_id,
        )

    # Users

    async def get_me(self) -> User:
        """Get the user owning the configured credentials."""
        data = await self._call(endpoints.GET_ME)
        return User.model_validate(data)

    async def get_users(self) -> list[User]:
        """List all users. Admin only."""
        data = await self._call(endpoints.GET_USERS)
        return [User.model_validate(item) for item in data]

    async def get_user(self, user_id: int) -> User:
        data = await self._call(endpoints.GET_USER, user_id=user_id)
        return User.model_validate(data)

    async def create_user(self, username: str, password: str, is_admin: bool = False) -> User:
        """Create a user. Admin only."""
        body = {"username": username, "password": password, "is_admin": is_admin}
        data = await self._call(endpoints.CREATE_USER, body=body)
        return User.model_validate(data)

    async def update_user(self, user_id: int, changes: dict[str, Any]) -> User:
        data = await self._call(endpoints.UPDATE_USER, body=self._compact(changes), user_id=user_id)
        return User.model_validate(data)

    async def delete_user(self, user_id: int) -> None:
        """Delete a user. Admin only."""
        await self._call(endpoints.DELETE_USER, user_id=user_id)

    async def mark_user_as_read(self, user_id: int) -> None:
        await self._call(endpoints.MARK_USER_AS_READ, user_id=user_id)

    # System

    async def healthcheck(self) -> str:
        """Returns the literal ``OK`` when the server is healthy."""
        return await self._call(endpoints.HEALTHCHECK)

    async def get_version(self) -> str:
        return await self._call(endpoints.VERSION)

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
