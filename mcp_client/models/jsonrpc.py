"""Pydantic models for JSON-RPC 2.0 messages."""

from typing import Optional, Dict, Any, Union

from pydantic import BaseModel, Field, ConfigDict


JSONRPC_VERSION = "2.0"


class JsonRpcRequest(BaseModel):
    """A JSON-RPC request sent to the server."""

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="Protocol version")
    id: Union[int, str] = Field(description="Request identifier echoed in the response")
    method: str = Field(..., min_length=1, description="Remote method name", examples=["tools/list"])
    params: Optional[Dict[str, Any]] = Field(default=None, description="Method parameters")


class JsonRpcErrorObject(BaseModel):
    """Error member of a JSON-RPC response."""

    code: int
    message: str
    data: Optional[Any] = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC response received from the server."""

    jsonrpc: str = JSONRPC_VERSION
    id: Optional[Union[int, str]] = None
    result: Optional[Dict[str, Any]] = None
    error: Optional[JsonRpcErrorObject] = None

    model_config = ConfigDict(extra="ignore")
