"""Data models for Miniflux resources.

These mirror the JSON objects returned by the Miniflux API. Unknown fields
are kept rather than rejected so newer server versions still parse.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MinifluxModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class Category(MinifluxModel):
    id: int
    user_id: int | None = None
    title: str
    hide_globally: bool = False


class FeedIconRef(MinifluxModel):
    """Icon reference embedded in a feed."""

    feed_id: int
    icon_id: int


class FeedIcon(MinifluxModel):
    """Icon payload, ``data`` is a ``mime/type;base64,...`` string."""

    id: int
    data: str
    mime_type: str


class Feed(MinifluxModel):
    id: int
    user_id: int | None = None
    title: str
    site_url: str = ""
    feed_url: str
    category: Category | None = None
    icon: FeedIconRef | None = None
    etag_header: str | None = None
    last_modified_header: str | None = None
    crawler: bool = False
    checked_at: str | None = None
    parsing_error_count: int = 0
    parsing_error_message: str | None = None
    scraper_rules: str | None = None
    rewrite_rules: str | None = None
    blocklist_rules: str | None = None
    keeplist_rules: str | None = None
    user_agent: str | None = None
    cookie: str | None = None
    username: str | None = None
    password: str | None = None
    disabled: bool = False
    ignore_http_cache: bool = False
    allow_self_signed_certificates: bool = False
    fetch_via_proxy: bool = False
    hide_globally: bool = False


class Enclosure(MinifluxModel):
    id: int
    user_id: int | None = None
    entry_id: int
    url: str
    mime_type: str = ""
    size: int = 0
    media_progression: int = 0


class Entry(MinifluxModel):
    id: int
    user_id: int | None = None
    feed_id: int
    status: Literal["unread", "read", "removed"]
    title: str = ""
    url: str = ""
    comments_url: str | None = None
    published_at: str | None = None
    created_at: str | None = None
    changed_at: str | None = None
    content: str | None = None
    author: str | None = None
    share_code: str | None = None
    starred: bool = False
    reading_time: int | None = None
    enclosures: list[Enclosure] | None = None
    feed: Feed | None = None
    category: Category | None = None
    tags: list[str] | None = None


class EntryResultSet(MinifluxModel):
    total: int
    entries: list[Entry] = Field(default_factory=list)


class User(MinifluxModel):
    id: int
    username: str
    is_admin: bool = False
    theme: str | None = None
    language: str | None = None
    timezone: str | None = None
    entry_direction: str | None = None
    entries_per_page: int | None = None
    keyboard_shortcuts: bool | None = None
    show_reading_time: bool | None = None
    entry_swipe: bool | None = None
    stylesheet: str | None = None
    google_id: str | None = None
    openid_connect_id: str | None = None
    entries_status_filter: str | None = None
    default_reading_speed: int | None = None
    cjk_reading_speed: int | None = None
    default_home_page: str | None = None
    categories_sorting_order: str | None = None


class FeedCounters(MinifluxModel):
    """Read and unread entry counts keyed by feed id."""

    reads: dict[int, int] = Field(default_factory=dict)
    unreads: dict[int, int] = Field(default_factory=dict)
