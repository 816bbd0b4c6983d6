"""JSON-RPC over HTTP POST transport."""

import itertools
import logging
from typing import Optional, Dict, Any

import httpx
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..errors.client_errors import JsonRpcError, MalformedResponseError
from ..errors.handlers import translate_transport_errors
from ..middleware.request_logging import event_hooks
from ..models.jsonrpc import JsonRpcRequest, JsonRpcResponse

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
JSON_CONTENT_TYPE_UTF8 = "application/json; charset=utf-8"


class HttpTransport:
    """Sends JSON-RPC requests as POST bodies and returns their results.

    Args:
        url: Server endpoint, defaults to the configured ``server_url``
        client: Optional pre-configured ``httpx.AsyncClient``; when omitted the
            transport creates one and closes it on ``aclose``
        settings: Settings override
    """

    def __init__(
        self,
        url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or get_settings()
        self.url = url or self.settings.server_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.settings.request_timeout,
            event_hooks=event_hooks()
        )
        self._ids = itertools.count(1)

    @property
    def content_type(self) -> str:
        """Content-Type sent with every POST body."""
        # Some servers reject "application/json; charset=utf-8"
        if self.settings.omit_content_type_charset:
            return JSON_CONTENT_TYPE
        return JSON_CONTENT_TYPE_UTF8

    def build_request(self, method: str, params: Optional[Dict[str, Any]] = None) -> JsonRpcRequest:
        """Create the next JSON-RPC request message."""
        return JsonRpcRequest(id=next(self._ids), method=method, params=params)

    async def request(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send one JSON-RPC request and return its ``result`` member.

        Raises:
            ConnectionFailedError: If the server cannot be reached
            HttpStatusError: If the server answers with an error status
            MalformedResponseError: If the body is not a matching JSON-RPC response
            JsonRpcError: If the server returns a JSON-RPC error object
        """
        message = self.build_request(method, params)
        body = message.model_dump_json(exclude_none=True).encode("utf-8")
        headers = {
            "Content-Type": self.content_type,
            "Accept": JSON_CONTENT_TYPE,
            "MCP-Protocol-Version": self.settings.protocol_version,
        }

        async with translate_transport_errors(method):
            response = await self._client.post(self.url, content=body, headers=headers)
            response.raise_for_status()

        try:
            rpc_response = JsonRpcResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise MalformedResponseError(f"Invalid JSON-RPC response to {method}: {e}")

        if rpc_response.id != message.id:
            raise MalformedResponseError(
                f"Response id {rpc_response.id!r} does not match request id {message.id!r}"
            )

        if rpc_response.error is not None:
            error = rpc_response.error
            logger.info(f"Server returned JSON-RPC error {error.code} for {method}: {error.message}")
            raise JsonRpcError(error.code, error.message, error.data)

        if rpc_response.result is None:
            raise MalformedResponseError(f"Response to {method} has neither result nor error")

        return rpc_response.result

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
