"""Command line entry point listing every collection of an MCP server."""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from .client import McpClient
from .config import Settings, get_settings
from .errors import McpClientError, ProtocolError
from .transport import HttpTransport

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format
    )


async def list_server(url: str, settings: Settings) -> int:
    """List all collections of the server at ``url`` and print them."""
    async with HttpTransport(url=url, settings=settings) as transport:
        client = McpClient(transport, max_pages=settings.max_pages)
        try:
            collections = await client.list_everything()
        except ProtocolError as e:
            logger.error(f"Server violated the pagination contract: {e}")
            return 2
        except McpClientError as e:
            logger.error(f"Failed to list collections: {e}")
            return 1

    for name, items in collections.items():
        print(f"{name} ({len(items)})")
        for item in items:
            print(f"  {item.name}")
    return 0


def positive_int(value: str) -> int:
    """Argparse type accepting integers of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, configure logging and list the server."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="List the collections of an MCP server")
    parser.add_argument("url", nargs="?", default=settings.server_url, help="Server endpoint")
    parser.add_argument("--max-pages", type=positive_int, default=settings.max_pages, help="Page limit per collection")
    args = parser.parse_args(argv)

    settings = settings.model_copy(update={"max_pages": args.max_pages})
    configure_logging(settings)
    return asyncio.run(list_server(args.url, settings))


if __name__ == "__main__":
    sys.exit(run())
