"""Pydantic models for chat API responses."""

from pydantic import BaseModel, ConfigDict, Field


class ChatResponse(BaseModel):
    """Response body for POST /api/v1/chats."""

    response: str = Field(description="The model's final answer")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"response": "It is currently 21°C and mild in Lisbon."}
        }
    )


class ChatErrorResponse(BaseModel):
    """Error body returned when the conversation could not be completed."""

    error: str = Field(description="Human-readable failure description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Failed to discover tools from http://localhost:8000/api/v1/utcp: unexpected status 503"
            }
        }
    )
