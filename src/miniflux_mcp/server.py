"""MCP Server entry point for Miniflux.

Runs FastMCP with Streamable HTTP transport so MCP clients can discover
and call tools via HTTP POST to /mcp.
"""

import asyncio
import logging
import sys

from fastmcp import FastMCP

from .client import MinifluxClient
from .config import load_config
from .tools import register_tools

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the Miniflux MCP server until it is interrupted.

    The transport owns the event loop and handles SIGINT/SIGTERM itself;
    the HTTP client is closed once ``mcp.run`` has returned and its loop
    is gone.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = load_config()
    client = MinifluxClient(config)

    mcp = FastMCP("miniflux-mcp")
    register_tools(mcp, client)

    logger.info(
        "Serving %s on %s:%d (streamable-http)",
        client.base_url,
        config.server_host,
        config.server_port,
    )
    try:
        mcp.run(
            transport="streamable-http",
            host=config.server_host,
            port=config.server_port,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        logger.info("Closing Miniflux connections")
        asyncio.run(client.aclose())


if __name__ == "__main__":
    main()
