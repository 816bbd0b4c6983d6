"""Cursor handling for client-side pagination traversals."""

import logging
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Set, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..errors.client_errors import DuplicateCursorError, PageLimitExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_PAGES = 10000


class Page(BaseModel, Generic[T]):
    """One page of a paginated collection as returned by the server."""

    items: List[T] = Field(default_factory=list, description="Items in server order")
    next_cursor: Optional[str] = Field(
        default=None,
        alias="nextCursor",
        description="Opaque cursor for the next page, absent or empty on the last page"
    )

    model_config = ConfigDict(populate_by_name=True)


def normalize_cursor(raw: Optional[str]) -> Optional[str]:
    """Map a raw next-cursor value to its canonical form.

    Args:
        raw: Cursor exactly as returned by the server

    Returns:
        None if the cursor is absent or empty, otherwise the cursor unchanged
    """
    if not raw:
        return None
    return raw


@dataclass
class PaginationState:
    """Per-traversal record of admitted cursors and pages."""

    max_pages: int = DEFAULT_MAX_PAGES
    seen: Set[str] = field(default_factory=set)
    pages_admitted: int = 0


class CursorGuard:
    """Admits or rejects the next cursor of a traversal.

    A guard is created for a single traversal and must not be reused.
    """

    def __init__(self, max_pages: int = DEFAULT_MAX_PAGES):
        if max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self.state = PaginationState(max_pages=max_pages)

    def admit(self, cursor: str) -> None:
        """Admit a non-empty cursor as the next page to fetch.

        The page counter is checked before the seen-set, so the limit bounds
        the number of pages even when the server repeats cursors.

        Raises:
            PageLimitExceededError: If admitting would exceed max_pages
            DuplicateCursorError: If the cursor was already admitted
        """
        state = self.state
        state.pages_admitted += 1
        if state.pages_admitted > state.max_pages:
            logger.warning(f"Page limit of {state.max_pages} exceeded")
            raise PageLimitExceededError(state.max_pages)

        if cursor in state.seen:
            logger.warning(f"Server repeated cursor {cursor!r} after {len(state.seen)} pages")
            raise DuplicateCursorError(cursor)

        state.seen.add(cursor)
