import os

import pytest

from miniflux_mcp.client import MinifluxClient
from miniflux_mcp.config import Config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove all MINIFLUX/MCP env vars before each test."""
    for key in list(os.environ):
        if key.startswith(("MINIFLUX_", "MCP_SERVER_")):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config():
    return Config(
        MINIFLUX_URL="http://localhost:8080",
        MINIFLUX_API_KEY="test-api-key",
    )


@pytest.fixture
def client(config):
    return MinifluxClient(config)
