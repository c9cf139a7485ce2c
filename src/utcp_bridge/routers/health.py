"""Health endpoint: server version, Ollama reachability and the loaded manual."""

import logging

from fastapi import APIRouter, Request

from utcp_bridge import __version__
from utcp_bridge.models.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


async def _ollama_status(request: Request) -> tuple[bool | None, str | None]:
    ollama_client = getattr(request.app.state, "ollama_client", None)
    if ollama_client is None:
        return None, None

    try:
        connected = await ollama_client.check_connection()
    except Exception as e:
        logger.warning(f"Health check could not reach Ollama: {e}")
        connected = False
    return connected, ollama_client.host


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report liveness; an unreachable Ollama is reported, not failed.

    Before the first discovery manual_name is null and tool_count is 0.
    """
    ollama_connected, ollama_host = await _ollama_status(request)

    manifest_client = getattr(request.app.state, "manifest_client", None)
    manual = manifest_client.manual if manifest_client is not None else None

    return HealthResponse(
        status="ok",
        version=__version__,
        ollama_connected=ollama_connected,
        ollama_host=ollama_host,
        manual_name=manual.name if manual else None,
        tool_count=len(manual.tools) if manual else 0,
    )
