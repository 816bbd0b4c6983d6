"""Unit tests for cursor normalization and the cursor guard."""

import pytest

from mcp_client.pagination import (
    DEFAULT_MAX_PAGES,
    CursorGuard,
    Page,
    PaginationState,
    normalize_cursor
)
from mcp_client.errors import DuplicateCursorError, PageLimitExceededError, ProtocolError


class TestNormalizeCursor:
    """Test normalize_cursor function."""

    def test_absent_cursor(self):
        """Test None stays None."""
        assert normalize_cursor(None) is None

    def test_empty_string_is_absent(self):
        """Test empty string is treated as no further pages."""
        assert normalize_cursor("") is None

    def test_cursor_returned_unchanged(self):
        """Test non-empty cursors are passed through as-is."""
        assert normalize_cursor("c1") == "c1"
        assert normalize_cursor(" ") == " "
        assert normalize_cursor("eyJvIjogMTB9") == "eyJvIjogMTB9"


class TestPageModel:
    """Test Page Pydantic model."""

    def test_page_defaults(self):
        """Test a page with no fields is an empty last page."""
        page = Page()
        assert page.items == []
        assert page.next_cursor is None

    def test_page_from_wire_format(self):
        """Test the camelCase wire name populates next_cursor."""
        page = Page.model_validate({"items": [1, 2], "nextCursor": "abc"})
        assert page.items == [1, 2]
        assert page.next_cursor == "abc"

    def test_page_by_field_name(self):
        """Test construction by Python field name."""
        page = Page(items=["A"], next_cursor="")
        assert page.next_cursor == ""

    def test_page_null_cursor(self):
        """Test explicit null cursor."""
        page = Page.model_validate({"items": [], "nextCursor": None})
        assert page.next_cursor is None


class TestCursorGuard:
    """Test CursorGuard admission rules."""

    def test_fresh_state(self):
        """Test guard starts with empty state."""
        guard = CursorGuard()
        assert guard.state == PaginationState(max_pages=DEFAULT_MAX_PAGES)
        assert guard.state.seen == set()
        assert guard.state.pages_admitted == 0

    def test_default_max_pages(self):
        """Test the default page limit."""
        assert DEFAULT_MAX_PAGES == 10000
        assert CursorGuard().state.max_pages == 10000

    def test_admit_distinct_cursors(self):
        """Test distinct cursors are admitted and recorded."""
        guard = CursorGuard()
        guard.admit("c1")
        guard.admit("c2")

        assert guard.state.seen == {"c1", "c2"}
        assert guard.state.pages_admitted == 2

    def test_duplicate_cursor_rejected(self):
        """Test a repeated cursor raises DuplicateCursorError."""
        guard = CursorGuard()
        guard.admit("c1")

        with pytest.raises(DuplicateCursorError) as exc_info:
            guard.admit("c1")

        assert exc_info.value.cursor == "c1"
        assert isinstance(exc_info.value, ProtocolError)

    def test_cursor_comparison_is_exact(self):
        """Test cursors differing only in case or whitespace are distinct."""
        guard = CursorGuard()
        guard.admit("abc")
        guard.admit("ABC")
        guard.admit("abc ")

        assert len(guard.state.seen) == 3

    def test_page_limit(self):
        """Test admission fails once the counter exceeds max_pages."""
        guard = CursorGuard(max_pages=2)
        guard.admit("c1")
        guard.admit("c2")

        with pytest.raises(PageLimitExceededError) as exc_info:
            guard.admit("c3")

        assert exc_info.value.max_pages == 2
        assert "c3" not in guard.state.seen

    def test_page_limit_checked_before_duplicate(self):
        """Test the page limit wins over duplicate detection."""
        guard = CursorGuard(max_pages=1)
        guard.admit("c1")

        with pytest.raises(PageLimitExceededError):
            guard.admit("c1")

    def test_rejected_duplicate_still_counts(self):
        """Test the counter bounds attempts regardless of duplication."""
        guard = CursorGuard(max_pages=5)
        guard.admit("c1")

        with pytest.raises(DuplicateCursorError):
            guard.admit("c1")

        assert guard.state.pages_admitted == 2

    def test_invalid_max_pages(self):
        """Test max_pages must be positive."""
        with pytest.raises(ValueError, match="max_pages must be at least 1"):
            CursorGuard(max_pages=0)

    def test_guards_do_not_share_state(self):
        """Test each guard owns its own seen-set."""
        first = CursorGuard()
        second = CursorGuard()
        first.admit("c1")

        second.admit("c1")

        assert first.state.seen is not second.state.seen
