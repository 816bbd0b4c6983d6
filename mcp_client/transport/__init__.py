"""Transports that carry JSON-RPC requests to a server."""

from .http import HttpTransport

__all__ = ["HttpTransport"]
