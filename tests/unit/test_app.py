"""Unit tests for the FastAPI app factory and configuration."""

import pytest
from fastapi import FastAPI

from utcp_bridge import __version__, create_app
from utcp_bridge.config import UtcpBridgeSettings
from utcp_bridge.services.chat_orchestrator import DEFAULT_SYSTEM_PROMPT
from utcp_bridge.utcp import ManifestClient


def test_create_app_returns_fastapi_instance():
    """Test that create_app returns a FastAPI instance."""
    app = create_app()
    assert isinstance(app, FastAPI)


def test_create_app_with_settings(test_settings):
    """Test that create_app accepts custom settings."""
    app = create_app(settings=test_settings)
    assert isinstance(app, FastAPI)
    assert app.state.settings is test_settings


def test_create_app_metadata():
    """Test that app has correct metadata."""
    app = create_app()
    assert app.title == "utcp-bridge"
    assert app.version == "0.1.0"
    assert "UTCP" in app.description


def test_create_app_includes_routers():
    """Test that all routers are registered."""
    app = create_app()

    routes = [route.path for route in app.routes]  # type: ignore[attr-defined]
    assert "/api/v1/health" in routes
    assert "/api/v1/chats" in routes
    assert "/api/v1/utcp" in routes
    assert "/api/v1/weatherforecast/current" in routes
    assert "/api/v1/weatherforecast/forecast" in routes


def test_create_app_has_cors_middleware(test_settings):
    """Test that CORS middleware is configured."""
    app = create_app(settings=test_settings)

    middleware_classes = [m.cls.__name__ for m in app.user_middleware]  # type: ignore[attr-defined]
    assert "CORSMiddleware" in middleware_classes


@pytest.mark.asyncio
async def test_lifespan_creates_shared_clients(test_app):
    """Test that startup stores the shared clients in app.state."""
    async with test_app.router.lifespan_context(test_app):
        assert isinstance(test_app.state.manifest_client, ManifestClient)
        assert test_app.state.manifest_client.is_loaded is False
        assert test_app.state.ollama_client.host == "http://localhost:11434"
        assert test_app.state.http_client.is_closed is False

    assert test_app.state.http_client.is_closed is True


def test_version_constant():
    """Test that __version__ is defined and matches app version."""
    assert __version__ == "0.1.0"


def test_settings_default_values(monkeypatch):
    """Test that settings have correct default values."""
    monkeypatch.delenv("UTCP_BRIDGE_MANUAL_URLS", raising=False)
    settings = UtcpBridgeSettings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.ollama_host == "http://localhost:11434"
    assert settings.model == "llama3.2:latest"
    assert settings.system_prompt == DEFAULT_SYSTEM_PROMPT
    assert settings.manual_urls == []
    assert settings.rediscover_on_each_message is True
    assert settings.variables == {}
    assert settings.http_timeout == 30.0
    assert settings.log_level == "INFO"


def test_settings_env_prefix(monkeypatch):
    """Test that settings respect UTCP_BRIDGE_ environment variable prefix."""
    monkeypatch.setenv("UTCP_BRIDGE_PORT", "9000")
    monkeypatch.setenv("UTCP_BRIDGE_OLLAMA_HOST", "http://custom:11434")
    monkeypatch.setenv("UTCP_BRIDGE_MANUAL_URLS", '["http://a/utcp", "http://b/utcp"]')
    monkeypatch.setenv("UTCP_BRIDGE_VARIABLES", '{"WEATHER_KEY": "abc"}')

    settings = UtcpBridgeSettings()

    assert settings.port == 9000
    assert settings.ollama_host == "http://custom:11434"
    assert settings.manual_urls == ["http://a/utcp", "http://b/utcp"]
    assert settings.variables == {"WEATHER_KEY": "abc"}
