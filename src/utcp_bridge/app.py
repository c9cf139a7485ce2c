"""FastAPI application factory.

create_app() wires settings, CORS and the routers; the lifespan owns the
clients shared by every request.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utcp_bridge import __version__
from utcp_bridge.config import UtcpBridgeSettings
from utcp_bridge.ollama import OllamaClient
from utcp_bridge.routers import chat, discovery, health, weather
from utcp_bridge.utcp import ManifestClient, ToolInvoker

logger = logging.getLogger(__name__)


def build_http_client(settings: UtcpBridgeSettings) -> httpx.AsyncClient:
    """Create the shared HTTP client used for discovery and tool calls."""
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        verify=settings.verify_tls,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared clients on startup and release them on shutdown.

    One httpx client serves both manual discovery and tool calls. The
    manifest client is shared because it holds the discovered manual that
    every conversation reads.
    """
    settings: UtcpBridgeSettings = app.state.settings

    http_client = build_http_client(settings)
    app.state.http_client = http_client
    app.state.manifest_client = ManifestClient(
        http_client, ToolInvoker(http_client, environment=settings.variables)
    )
    logger.info(
        f"Tools come from {len(settings.manual_urls)} manual URL(s), "
        f"{len(settings.variables)} substitution variable(s) configured"
    )

    ollama_client = OllamaClient(host=settings.ollama_host, timeout=settings.http_timeout)
    app.state.ollama_client = ollama_client
    if not await ollama_client.check_connection():
        logger.warning(
            f"Ollama is not reachable at {settings.ollama_host}; chats will fail until it is"
        )

    try:
        yield
    finally:
        await ollama_client.close()
        await http_client.aclose()
        logger.info("Shared clients closed")


def create_app(settings: UtcpBridgeSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional UtcpBridgeSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from utcp_bridge.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="utcp-bridge",
        description="Bridges UTCP tool manuals to LLM function calling via Ollama",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(chat.router)
    app.include_router(discovery.router)
    app.include_router(weather.router)

    return app
