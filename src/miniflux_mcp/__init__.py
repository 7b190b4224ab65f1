"""Miniflux MCP — async Miniflux API client and MCP server.

The server entry point lives in ``miniflux_mcp.server`` so that importing
the client leaves logging configuration alone.
"""

from .client import MinifluxClient
from .config import Config
from .errors import APIError, ConfigurationError, MinifluxError
from .filters import Filter
from .models import Category, Enclosure, Entry, EntryResultSet, Feed, FeedCounters, User

__all__ = [
    "MinifluxClient",
    "Config",
    "Filter",
    "MinifluxError",
    "ConfigurationError",
    "APIError",
    "Category",
    "Enclosure",
    "Entry",
    "EntryResultSet",
    "Feed",
    "FeedCounters",
    "User",
]

__version__ = "0.1.0"
