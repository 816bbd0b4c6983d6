"""Traversal of cursor-paginated collections."""

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable, Generic, List, Optional, TypeVar

from ..config import get_settings
from .cursor import CursorGuard, Page, normalize_cursor

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchPage = Callable[[Optional[str]], Awaitable[Page[T]]]


class Paginator(Generic[T]):
    """Drives the fetch, normalize, admit loop over a paginated collection.

    Each call to ``list_all`` or ``enumerate`` is an independent traversal with
    its own ``CursorGuard``; a paginator can therefore be shared between
    concurrent tasks.

    Args:
        fetch_page: Coroutine function returning the page for a cursor
            (``None`` for the first page)
        max_pages: Maximum number of cursors admitted per traversal,
            defaults to the configured ``max_pages``
        cancel_event: Optional event checked before every fetch
        name: Collection name used in log messages
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        max_pages: Optional[int] = None,
        cancel_event: Optional[asyncio.Event] = None,
        name: str = "collection"
    ):
        self.fetch_page = fetch_page
        self.max_pages = max_pages if max_pages is not None else get_settings().max_pages
        self.cancel_event = cancel_event
        self.name = name

    async def _pages(self) -> AsyncIterator[Page[T]]:
        """Yield pages in order, validating each next cursor on resume."""
        guard = CursorGuard(self.max_pages)
        cursor: Optional[str] = None
        page_number = 0

        while True:
            if self.cancel_event is not None and self.cancel_event.is_set():
                logger.info(f"Traversal of {self.name} cancelled after {page_number} pages")
                raise asyncio.CancelledError()

            page = await self.fetch_page(cursor)
            page_number += 1
            next_cursor = normalize_cursor(page.next_cursor)
            logger.debug(
                f"Fetched {self.name} page {page_number} with {len(page.items)} items, "
                f"next cursor {next_cursor!r}"
            )

            yield page

            if next_cursor is None:
                return

            guard.admit(next_cursor)
            cursor = next_cursor

    async def list_all(self) -> List[T]:
        """Fetch every page and return all items in order.

        Raises:
            ProtocolError: If the server violates the cursor contract
            TransportError: Passed through from ``fetch_page``
        """
        items: List[T] = []
        async for page in self._pages():
            items.extend(page.items)

        logger.info(f"Listed {len(items)} {self.name}")
        return items

    async def enumerate(self) -> AsyncIterator[T]:
        """Yield items one at a time, fetching a page only when needed.

        If the traversal fails, items already yielded stay delivered and the
        error is raised to the consumer on its next request.
        """
        pages = self._pages()
        try:
            async for page in pages:
                for item in page.items:
                    yield item
        finally:
            await pages.aclose()
