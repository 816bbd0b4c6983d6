"""Client for enumerating the collections an MCP server exposes."""

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, List, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors.client_errors import MalformedResponseError
from .models.collections import Prompt, Resource, ResourceTemplate, Tool
from .pagination import Page, Paginator

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)


class RequestTransport(Protocol):
    """Anything able to send a JSON-RPC request and return its result."""

    async def request(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...


class McpClient:
    """Lists tools, prompts, resources and resource templates page by page.

    Every ``list_*`` and ``iter_*`` call runs its own traversal, so calls can
    be awaited concurrently on the same client.
    """

    def __init__(
        self,
        transport: RequestTransport,
        max_pages: Optional[int] = None,
        cancel_event: Optional[asyncio.Event] = None
    ):
        self.transport = transport
        self.max_pages = max_pages
        self.cancel_event = cancel_event

    def paginator(self, method: str, result_key: str, model: Type[ItemT]) -> Paginator[ItemT]:
        """Build a paginator for one list method.

        Args:
            method: JSON-RPC list method, e.g. ``tools/list``
            result_key: Key of the item array in the result, e.g. ``tools``
            model: Model each item is validated into
        """

        async def fetch_page(cursor: Optional[str]) -> Page[ItemT]:
            params = {"cursor": cursor} if cursor is not None else None
            result = await self.transport.request(method, params)
            try:
                raw_items = result.get(result_key, [])
                items = [model.model_validate(item) for item in raw_items]
                next_cursor = result.get("nextCursor")
                return Page(items=items, next_cursor=next_cursor)
            except (AttributeError, TypeError, ValidationError) as e:
                raise MalformedResponseError(f"Invalid {method} result: {e}")

        return Paginator(
            fetch_page,
            max_pages=self.max_pages,
            cancel_event=self.cancel_event,
            name=result_key
        )

    def tools(self) -> Paginator[Tool]:
        return self.paginator("tools/list", "tools", Tool)

    def prompts(self) -> Paginator[Prompt]:
        return self.paginator("prompts/list", "prompts", Prompt)

    def resources(self) -> Paginator[Resource]:
        return self.paginator("resources/list", "resources", Resource)

    def resource_templates(self) -> Paginator[ResourceTemplate]:
        return self.paginator("resources/templates/list", "resourceTemplates", ResourceTemplate)

    async def list_tools(self) -> List[Tool]:
        return await self.tools().list_all()

    async def list_prompts(self) -> List[Prompt]:
        return await self.prompts().list_all()

    async def list_resources(self) -> List[Resource]:
        return await self.resources().list_all()

    async def list_resource_templates(self) -> List[ResourceTemplate]:
        return await self.resource_templates().list_all()

    def iter_tools(self) -> AsyncIterator[Tool]:
        return self.tools().enumerate()

    def iter_prompts(self) -> AsyncIterator[Prompt]:
        return self.prompts().enumerate()

    def iter_resources(self) -> AsyncIterator[Resource]:
        return self.resources().enumerate()

    def iter_resource_templates(self) -> AsyncIterator[ResourceTemplate]:
        return self.resource_templates().enumerate()

    async def list_everything(self) -> Dict[str, List[BaseModel]]:
        """List all four collections concurrently.

        Returns:
            Mapping of collection name to its items

        Raises:
            McpClientError: The first error raised by any traversal; the
                remaining traversals are cancelled before it propagates
        """
        tasks = [
            asyncio.ensure_future(self.list_tools()),
            asyncio.ensure_future(self.list_prompts()),
            asyncio.ensure_future(self.list_resources()),
            asyncio.ensure_future(self.list_resource_templates()),
        ]
        try:
            tools, prompts, resources, templates = await asyncio.gather(*tasks)
        except BaseException:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                logger.info(f"Cancelling {len(pending)} traversals after a failed listing")
                await asyncio.gather(*pending, return_exceptions=True)
            raise
        return {
            "tools": tools,
            "prompts": prompts,
            "resources": resources,
            "resourceTemplates": templates,
        }
