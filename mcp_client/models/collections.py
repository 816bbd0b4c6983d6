"""Pydantic models for the collections a server exposes."""

from typing import Optional, Dict, Any, List

from pydantic import BaseModel, Field, ConfigDict


class CollectionItem(BaseModel):
    """Base model for items of listable collections."""

    name: str = Field(..., min_length=1, description="Item name")
    title: Optional[str] = Field(default=None, description="Human-readable display name")
    description: Optional[str] = Field(default=None, description="Item description")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Tool(CollectionItem):
    """A tool the server can invoke."""

    input_schema: Dict[str, Any] = Field(
        default_factory=lambda: {"type": "object"},
        alias="inputSchema",
        description="JSON Schema for the tool arguments"
    )
    output_schema: Optional[Dict[str, Any]] = Field(
        default=None,
        alias="outputSchema",
        description="JSON Schema for structured tool results"
    )


class PromptArgument(BaseModel):
    """An argument accepted by a prompt template."""

    name: str
    description: Optional[str] = None
    required: bool = False


class Prompt(CollectionItem):
    """A prompt template offered by the server."""

    arguments: List[PromptArgument] = Field(default_factory=list)


class Resource(CollectionItem):
    """A concrete resource readable from the server."""

    uri: str = Field(..., min_length=1, description="Resource URI")
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    size: Optional[int] = Field(default=None, ge=0, description="Size in bytes if known")


class ResourceTemplate(CollectionItem):
    """A parameterized resource URI template."""

    uri_template: str = Field(..., min_length=1, alias="uriTemplate", description="RFC 6570 URI template")
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
