"""Client for listing paginated collections of MCP servers."""

from .client import McpClient
from .pagination import Page, Paginator

__all__ = ["McpClient", "Page", "Paginator"]
