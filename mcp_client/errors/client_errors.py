"""Error taxonomy for the MCP collection client.

Two families are kept apart so callers can tell a broken peer from a broken
network: ``ProtocolError`` for pagination contract violations detected while
traversing, and ``TransportError`` for everything the transport raises.
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Structured, loggable view of a client error."""

    code: str = Field(description="Stable machine-readable error code")
    title: str = Field(description="A short, human-readable summary of the problem type")
    detail: Optional[str] = Field(default=None, description="Explanation specific to this occurrence")

    # Allow additional properties for extensions
    model_config = {"extra": "allow"}


class McpClientError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        code: str,
        title: str,
        detail: Optional[str] = None,
        **extensions: Any
    ):
        self.code = code
        self.title = title
        self.detail = detail
        self.extensions = extensions
        super().__init__(detail or title)

    def to_error_detail(self) -> ErrorDetail:
        """Convert to ErrorDetail model."""
        error = ErrorDetail(
            code=self.code,
            title=self.title,
            detail=self.detail
        )

        # Add any extensions
        for key, value in self.extensions.items():
            setattr(error, key, value)

        return error


class ProtocolError(McpClientError):
    """The peer violated the pagination contract."""


class DuplicateCursorError(ProtocolError):
    """The peer returned a cursor already seen in this traversal."""

    def __init__(self, cursor: str, **extensions: Any):
        self.cursor = cursor
        super().__init__(
            code="duplicate_cursor",
            title="Duplicate Cursor",
            detail=f"Server returned cursor {cursor!r} more than once in the same traversal",
            cursor=cursor,
            **extensions
        )


class PageLimitExceededError(ProtocolError):
    """More pages were requested than the configured maximum."""

    def __init__(self, max_pages: int, **extensions: Any):
        self.max_pages = max_pages
        super().__init__(
            code="page_limit_exceeded",
            title="Page Limit Exceeded",
            detail=f"Traversal exceeded the maximum of {max_pages} pages",
            max_pages=max_pages,
            **extensions
        )


class TransportError(McpClientError):
    """The transport failed to deliver a page."""

    def __init__(self, detail: str, code: str = "transport_error", title: str = "Transport Error", **extensions: Any):
        super().__init__(
            code=code,
            title=title,
            detail=detail,
            **extensions
        )


class ConnectionFailedError(TransportError):
    """The server could not be reached."""

    def __init__(self, detail: str = "Could not connect to server", **extensions: Any):
        super().__init__(
            detail=detail,
            code="connection_failed",
            title="Connection Failed",
            **extensions
        )


class HttpStatusError(TransportError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, status: int, detail: Optional[str] = None, **extensions: Any):
        self.status = status
        super().__init__(
            detail=detail or f"Server responded with HTTP {status}",
            code="http_status",
            title="HTTP Error",
            status=status,
            **extensions
        )


class MalformedResponseError(TransportError):
    """The server response could not be parsed."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            detail=detail,
            code="malformed_response",
            title="Malformed Response",
            **extensions
        )


class JsonRpcError(TransportError):
    """The server answered the request with a JSON-RPC error object."""

    def __init__(self, rpc_code: int, message: str, data: Any = None, **extensions: Any):
        self.rpc_code = rpc_code
        self.data = data
        if data is not None:
            extensions["data"] = data
        super().__init__(
            detail=message,
            code="jsonrpc_error",
            title="JSON-RPC Error",
            rpc_code=rpc_code,
            **extensions
        )
