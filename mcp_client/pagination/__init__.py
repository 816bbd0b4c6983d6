"""Pagination module for cursor-based collection traversal."""

from .cursor import (
    DEFAULT_MAX_PAGES,
    Page,
    PaginationState,
    CursorGuard,
    normalize_cursor
)
from .paginator import Paginator

__all__ = [
    "DEFAULT_MAX_PAGES",
    "Page",
    "PaginationState",
    "CursorGuard",
    "normalize_cursor",
    "Paginator"
]
