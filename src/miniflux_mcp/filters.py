"""Entry filters and their query-string encoding."""

from dataclasses import dataclass, fields
from typing import Literal

import httpx

EntryStatus = Literal["unread", "read", "removed"]
SortOrder = Literal["id", "status", "published_at", "category_title", "category_id"]
SortDirection = Literal["asc", "desc"]


@dataclass
class Filter:
    """Query options for the entry listing endpoints.

    Every field is optional; unset fields are left out of the query string.
    Timestamps are Unix seconds.
    """

    status: list[EntryStatus] | None = None
    offset: int | None = None
    limit: int | None = None
    order: SortOrder | None = None
    direction: SortDirection | None = None
    before: int | None = None
    after: int | None = None
    published_before: int | None = None
    published_after: int | None = None
    changed_before: int | None = None
    changed_after: int | None = None
    before_entry_id: int | None = None
    after_entry_id: int | None = None
    starred: bool | None = None
    search: str | None = None
    category_id: int | None = None
    feed_id: int | None = None
    globally_visible: bool | None = None

    def to_params(self) -> list[tuple[str, str]]:
        """Flatten into ordered key/value pairs, one pair per list element."""
        params: list[tuple[str, str]] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                params.extend((f.name, _format_value(v)) for v in value)
            else:
                params.append((f.name, _format_value(value)))
        return params


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(filter: Filter | None) -> str:
    """Encode a filter as a query string, without the leading ``?``.

    Returns an empty string when no filter field is set.
    """
    if filter is None:
        return ""
    return str(httpx.QueryParams(filter.to_params()))
