"""Models package for the MCP collection client."""

from .collections import CollectionItem, Tool, PromptArgument, Prompt, Resource, ResourceTemplate
from .jsonrpc import JSONRPC_VERSION, JsonRpcRequest, JsonRpcErrorObject, JsonRpcResponse

__all__ = [
    "CollectionItem", "Tool", "PromptArgument", "Prompt", "Resource", "ResourceTemplate",
    "JSONRPC_VERSION", "JsonRpcRequest", "JsonRpcErrorObject", "JsonRpcResponse"
]
