"""Fake servers and transports shared by the test suite."""

import asyncio
from typing import Any, Dict, List, Optional, Union

from mcp_client.pagination import Page


class ScriptedServer:
    """Serves a fixed list of pages in order and records every cursor asked for."""

    def __init__(self, pages: List[Union[Page, Exception]]):
        self.pages = list(pages)
        self.calls: List[Optional[str]] = []

    async def fetch_page(self, cursor: Optional[str]) -> Page:
        self.calls.append(cursor)
        if not self.pages:
            raise AssertionError(f"Fetched past the last scripted page (cursor={cursor!r})")
        page = self.pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page


class KeyedServer:
    """Serves pages looked up by cursor, so concurrent traversals can share it."""

    def __init__(self, pages: Dict[Optional[str], Page]):
        self.pages = pages
        self.calls: List[Optional[str]] = []

    async def fetch_page(self, cursor: Optional[str]) -> Page:
        self.calls.append(cursor)
        # Yield control so concurrent traversals interleave
        await asyncio.sleep(0)
        return self.pages[cursor]


class EndlessServer:
    """Never stops paginating; every page hands out a fresh cursor."""

    def __init__(self):
        self.calls: List[Optional[str]] = []

    async def fetch_page(self, cursor: Optional[str]) -> Page:
        self.calls.append(cursor)
        number = len(self.calls)
        return Page(items=[number], next_cursor=f"c{number}")


class FakeTransport:
    """Answers JSON-RPC list methods from per-method scripted results."""

    def __init__(self, results: Dict[str, List[Any]]):
        self.results = {method: list(pages) for method, pages in results.items()}
        self.requests: List[tuple] = []

    async def request(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.requests.append((method, params))
        await asyncio.sleep(0)
        result = self.results[method].pop(0)
        if isinstance(result, Exception):
            raise result
        return result
