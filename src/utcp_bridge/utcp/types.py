"""Data types for UTCP manuals and tool calls.

Manual documents are parsed with pydantic; field names match the JSON keys
of the UTCP wire format. ToolCallResult is a plain dataclass because it is
produced internally and never parsed from the wire.
"""

import json
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class PropertySchema(BaseModel):
    """Schema of a single tool input property.

    Bounds and enum values are advisory: they are shown to the model but
    never enforced on the arguments it sends back.
    """

    type: str = "string"
    description: str | None = None
    enum: list[str] | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None


class ToolInputSchema(BaseModel):
    """Input schema of a tool (a JSON-schema style object)."""

    type: str = "object"
    properties: dict[str, PropertySchema] | None = None
    required: list[str] | None = None


class ToolOutputSchema(BaseModel):
    """Descriptive output schema. Not validated against responses."""

    type: str = "object"
    description: str | None = None


class HttpCallTemplate(BaseModel):
    """How to call a tool over HTTP.

    The url, header values, query values and the serialized body may all
    contain ${name} placeholders.
    """

    call_template_type: Literal["http"] = "http"
    url: str
    http_method: str = "GET"
    headers: dict[str, str] | None = None
    query_params: dict[str, str] | None = None
    body: Any = None


class UnsupportedCallTemplate(BaseModel):
    """Any call template whose transport the bridge cannot execute.

    Parsing it keeps the rest of the manual usable; invoking it fails.
    """

    call_template_type: str

    model_config = ConfigDict(extra="allow")


def _call_template_kind(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("call_template_type", "http")
    else:
        kind = getattr(value, "call_template_type", "http")
    return "http" if kind == "http" else "unsupported"


CallTemplate = Annotated[
    Union[
        Annotated[HttpCallTemplate, Tag("http")],
        Annotated[UnsupportedCallTemplate, Tag("unsupported")],
    ],
    Discriminator(_call_template_kind),
]


class AuthConfig(BaseModel):
    """Shared authentication for every tool in a manual."""

    auth_type: str = "none"
    api_key: str | None = None
    var_name: str | None = None
    location: str | None = None


class Tool(BaseModel):
    """A single callable tool declared by a manual."""

    name: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    inputs: ToolInputSchema = Field(default_factory=ToolInputSchema)
    output: ToolOutputSchema | None = None
    average_response_size: int | None = None
    tool_call_template: CallTemplate


class UtcpManual(BaseModel):
    """A UTCP manual: provider metadata, its tools and optional shared auth."""

    manual_version: str = "1.0.0"
    utcp_version: str = "1.1.0"
    name: str
    description: str | None = None
    tools: list[Tool] = Field(default_factory=list)
    auth: AuthConfig | None = None


@dataclass
class ToolCallResult:
    """Outcome of one completed HTTP tool call.

    Attributes:
        success: True iff the status code is in [200, 299]
        status_code: HTTP status code of the response
        body: Raw response body text, kept regardless of status
        duration_ms: Wall-clock duration of the request in milliseconds
        headers: Response headers (repeated headers joined with ", ")
    """

    success: bool
    status_code: int
    body: str = ""
    duration_ms: float = 0.0
    headers: dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        """Decode the body as JSON, returning None for an empty body."""
        if not self.body.strip():
            return None
        return json.loads(self.body)
