"""Declarative table of Miniflux API endpoints.

Each endpoint binds an HTTP verb to a path template. Path parameters use
``str.format`` placeholders; the client fills them in and appends any query
string before handing the request to its single request primitive.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    is_json: bool = True

    def render(self, query: str = "", **path_params: object) -> str:
        """Return the concrete path, with ``?query`` appended when non-empty."""
        path = self.path.format(**path_params)
        return f"{path}?{query}" if query else path


# Feeds
GET_FEEDS = Endpoint("GET", "/v1/feeds")
GET_FEED = Endpoint("GET", "/v1/feeds/{feed_id}")
CREATE_FEED = Endpoint("POST", "/v1/feeds")
UPDATE_FEED = Endpoint("PUT", "/v1/feeds/{feed_id}")
DELETE_FEED = Endpoint("DELETE", "/v1/feeds/{feed_id}")
REFRESH_FEED = Endpoint("PUT", "/v1/feeds/{feed_id}/refresh")
REFRESH_ALL_FEEDS = Endpoint("PUT", "/v1/feeds/refresh")
GET_FEED_ICON = Endpoint("GET", "/v1/feeds/{feed_id}/icon")
GET_FEED_ENTRIES = Endpoint("GET", "/v1/feeds/{feed_id}/entries")
MARK_FEED_AS_READ = Endpoint("PUT", "/v1/feeds/{feed_id}/mark-all-as-read")
GET_FEED_COUNTERS = Endpoint("GET", "/v1/feeds/counters")

# Entries
GET_ENTRIES = Endpoint("GET", "/v1/entries")
UPDATE_ENTRIES = Endpoint("PUT", "/v1/entries")
GET_ENTRY = Endpoint("GET", "/v1/entries/{entry_id}")
UPDATE_ENTRY = Endpoint("PUT", "/v1/entries/{entry_id}")
TOGGLE_BOOKMARK = Endpoint("PUT", "/v1/entries/{entry_id}/bookmark")
FETCH_CONTENT = Endpoint("GET", "/v1/entries/{entry_id}/fetch-content")
SAVE_ENTRY = Endpoint("POST", "/v1/entries/{entry_id}/save")

# Categories
GET_CATEGORIES = Endpoint("GET", "/v1/categories")
CREATE_CATEGORY = Endpoint("POST", "/v1/categories")
UPDATE_CATEGORY = Endpoint("PUT", "/v1/categories/{category_id}")
DELETE_CATEGORY = Endpoint("DELETE", "/v1/categories/{category_id}")
REFRESH_CATEGORY_FEEDS = Endpoint("PUT", "/v1/categories/{category_id}/refresh")
GET_CATEGORY_ENTRIES = Endpoint("GET", "/v1/categories/{category_id}/entries")
MARK_CATEGORY_AS_READ = Endpoint("PUT", "/v1/categories/{category_id}/mark-all-as-read")

# Enclosures
GET_ENCLOSURE = Endpoint("GET", "/v1/enclosures/{enclosure_id}")
UPDATE_ENCLOSURE = Endpoint("PUT", "/v1/enclosures/{enclosure_id}")

# Users
GET_ME = Endpoint("GET", "/v1/me")
GET_USERS = Endpoint("GET", "/v1/users")
GET_USER = Endpoint("GET", "/v1/users/{user_id}")
CREATE_USER = Endpoint("POST", "/v1/users")
UPDATE_USER = Endpoint("PUT", "/v1/users/{user_id}")
DELETE_USER = Endpoint("DELETE", "/v1/users/{user_id}")
MARK_USER_AS_READ = Endpoint("PUT", "/v1/users/{user_id}/mark-all-as-read")

# System (plain-text responses)
HEALTHCHECK = Endpoint("GET", "/healthcheck", is_json=False)
VERSION = Endpoint("GET", "/version", is_json=False)
