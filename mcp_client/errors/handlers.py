"""Exception translation for the HTTP transport."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from .client_errors import (
    McpClientError,
    ConnectionFailedError,
    HttpStatusError,
    TransportError
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_transport_errors(method: str) -> AsyncIterator[None]:
    """Map httpx exceptions raised inside the block onto TransportError types.

    Errors that are already client errors pass through untouched.
    """
    try:
        yield
    except McpClientError:
        raise
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.info(
            f"HTTP error for {method}: {status}",
            extra={"method": method, "status_code": status}
        )
        raise HttpStatusError(status, f"{method} failed with HTTP {status}") from e
    except (httpx.ConnectError, httpx.TimeoutException) as e:
        logger.warning(
            f"Connection error for {method}: {type(e).__name__} - {e}",
            extra={"method": method, "exception_type": type(e).__name__}
        )
        raise ConnectionFailedError(f"{method} could not reach server: {e}") from e
    except httpx.HTTPError as e:
        logger.error(
            f"Transport error for {method}: {type(e).__name__} - {e}",
            extra={"method": method, "exception_type": type(e).__name__}
        )
        raise TransportError(f"{method} failed: {e}") from e
