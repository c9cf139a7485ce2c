"""FastAPI dependency providers for settings and the shared clients."""

from functools import lru_cache

from fastapi import HTTPException, Request

from utcp_bridge.config import UtcpBridgeSettings
from utcp_bridge.ollama import OllamaClient
from utcp_bridge.services import ChatOrchestrator, ToolBridge
from utcp_bridge.utcp import ManifestClient


@lru_cache
def get_settings() -> UtcpBridgeSettings:
    """Settings loaded once from UTCP_BRIDGE_* environment variables."""
    return UtcpBridgeSettings()


def _from_state(request: Request, name: str, label: str):
    client = getattr(request.app.state, name, None)
    if client is None:
        raise HTTPException(status_code=503, detail=f"{label} not initialized")
    return client


def get_ollama_client(request: Request) -> OllamaClient:
    """Shared Ollama client; 503 if the lifespan has not created it."""
    return _from_state(request, "ollama_client", "Ollama client")


def get_manifest_client(request: Request) -> ManifestClient:
    """Shared manifest client holding the most recently discovered manual.

    Raises:
        HTTPException: 503 if the lifespan has not created it.
    """
    return _from_state(request, "manifest_client", "Manifest client")


def get_chat_orchestrator(request: Request) -> ChatOrchestrator:
    """Build a per-request orchestrator around the shared clients.

    Settings come from app.state so tests can pass their own.
    """
    settings: UtcpBridgeSettings = request.app.state.settings

    return ChatOrchestrator(
        ollama_client=get_ollama_client(request),
        tool_bridge=ToolBridge(get_manifest_client(request)),
        model=settings.model,
        manual_urls=settings.manual_urls,
        system_prompt=settings.system_prompt,
        rediscover=settings.rediscover_on_each_message,
    )
