"""Pytest configuration for integration tests.

The app under test discovers its own sample manual and calls its own
weather endpoints: the shared HTTP client is routed back into the app
through an ASGI transport. The Ollama client is replaced by a mock whose
complete_chat() each test scripts.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest


@pytest.fixture(autouse=True)
def mock_ollama_client():
    """Mock OllamaClient for all integration tests.

    This fixture patches the OllamaClient class before the app is created,
    ensuring the lifespan uses our mock instead of creating a real client.
    """
    with patch("utcp_bridge.app.OllamaClient") as mock_client_class:
        mock_instance = AsyncMock()
        mock_instance.host = "http://localhost:11434"
        mock_instance.check_connection.return_value = True

        mock_client_class.return_value = mock_instance

        yield mock_instance


@pytest.fixture(autouse=True)
def loopback_http_client(test_app):
    """Route the app's outgoing HTTP requests back into the app itself."""

    def build(settings):
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=test_app),
            timeout=settings.http_timeout,
        )

    with patch("utcp_bridge.app.build_http_client", side_effect=build):
        yield
