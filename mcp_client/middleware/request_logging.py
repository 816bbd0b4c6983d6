"""Request logging hooks for debugging."""

import logging
import json

import httpx

logger = logging.getLogger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Log outgoing JSON-RPC requests."""
    body_bytes = request.content
    if not body_bytes:
        logger.debug(f"{request.method} {request.url} (empty body)")
        return

    try:
        body_json = json.loads(body_bytes.decode('utf-8'))
        logger.debug(
            f"{request.method} {request.url} -> {body_json.get('method')} (id={body_json.get('id')})"
        )
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        logger.debug(f"{request.method} {request.url} (raw body, {len(body_bytes)} bytes)")


async def log_response(response: httpx.Response) -> None:
    """Log response status for every request."""
    request = response.request
    if response.is_success:
        logger.debug(f"{request.method} {request.url} <- {response.status_code}")
    else:
        logger.info(f"{request.method} {request.url} <- {response.status_code}")


def event_hooks() -> dict:
    """Event hooks to pass to ``httpx.AsyncClient``."""
    return {"request": [log_request], "response": [log_response]}
