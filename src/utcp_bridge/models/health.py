"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness, Ollama reachability and the currently loaded UTCP manual."""

    status: str = Field(..., description="Always 'ok' while the server answers")
    version: str = Field(..., description="utcp-bridge version")
    ollama_connected: bool | None = Field(
        default=None, description="Ollama reachability, null without a client"
    )
    ollama_host: str | None = Field(default=None, description="Configured Ollama URL")
    manual_name: str | None = Field(
        default=None, description="Name of the discovered manual, null before discovery"
    )
    tool_count: int = Field(default=0, description="Tools in the discovered manual")
