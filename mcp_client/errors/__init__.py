"""Error handling module for the MCP collection client."""

from .client_errors import (
    ErrorDetail,
    McpClientError,
    ProtocolError,
    DuplicateCursorError,
    PageLimitExceededError,
    TransportError,
    ConnectionFailedError,
    HttpStatusError,
    MalformedResponseError,
    JsonRpcError
)
from .handlers import translate_transport_errors

__all__ = [
    "ErrorDetail",
    "McpClientError",
    "ProtocolError",
    "DuplicateCursorError",
    "PageLimitExceededError",
    "TransportError",
    "ConnectionFailedError",
    "HttpStatusError",
    "MalformedResponseError",
    "JsonRpcError",
    "translate_transport_errors"
]
