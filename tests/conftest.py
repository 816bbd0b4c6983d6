"""Pytest configuration and shared fixtures for the MCP collection client tests."""

import logging
from unittest.mock import patch

import pytest

from mcp_client.config import Settings
from mcp_client.pagination import Page
from tests.fakes import ScriptedServer


# Disable logging for cleaner test output
logging.getLogger("asyncio").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)


@pytest.fixture
def test_settings() -> Settings:
    """Override settings for testing."""
    return Settings(
        server_url="http://testserver/mcp",
        request_timeout=5.0,
        max_pages=10000,
        log_level="ERROR",  # Reduce log noise during tests
    )


@pytest.fixture
def mock_settings(test_settings: Settings):
    """Patch the settings accessor used by the paginator."""
    with patch('mcp_client.pagination.paginator.get_settings', return_value=test_settings):
        yield test_settings


@pytest.fixture
def two_page_server() -> ScriptedServer:
    """Pages [A, B] -> "c1" -> [C] -> ""."""
    return ScriptedServer([
        Page(items=["A", "B"], next_cursor="c1"),
        Page(items=["C"], next_cursor=""),
    ])
