"""Pytest configuration and shared fixtures for utcp-bridge tests.

This module provides common fixtures used across all test modules,
including test app creation, async client setup and a sample manual.
"""

import copy

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from utcp_bridge import create_app
from utcp_bridge.config import UtcpBridgeSettings

MANUAL_DOCUMENT = {
    "manual_version": "1.0.0",
    "utcp_version": "1.1.0",
    "name": "Weather API",
    "description": "API for weather information and forecasts",
    "tools": [
        {
            "name": "get_current_weather",
            "description": "Get the current weather for a specific location",
            "tags": ["weather", "current"],
            "inputs": {
                "type": "object",
                "properties": {
                    "location": {"type": "string", "description": "City name"},
                    "units": {
                        "type": "string",
                        "description": "Temperature units",
                        "enum": ["celsius", "fahrenheit"],
                    },
                },
                "required": ["location"],
            },
            "output": {"type": "object", "description": "Current weather"},
            "average_response_size": 512,
            "tool_call_template": {
                "call_template_type": "http",
                "url": "https://weather.example/current",
                "http_method": "GET",
                "query_params": {"location": "${location}", "units": "${units}"},
            },
        },
        {
            "name": "get_forecast",
            "description": "Get the weather forecast for the next days",
            "tags": ["weather", "forecast"],
            "inputs": {
                "type": "object",
                "properties": {
                    "location": {"type": "string", "description": "City name"},
                    "days": {
                        "type": "integer",
                        "description": "Number of days (1-7)",
                        "minimum": 1,
                        "maximum": 7,
                    },
                },
                "required": ["location", "days"],
            },
            "output": {"type": "array", "description": "Daily forecasts"},
            "average_response_size": 2048,
            "tool_call_template": {
                "call_template_type": "http",
                "url": "https://weather.example/forecast",
                "http_method": "GET",
                "query_params": {"location": "${location}", "days": "${days}"},
            },
        },
    ],
}


@pytest.fixture
def manual_document():
    """A UTCP manual document with two weather tools.

    Returns:
        dict: A fresh deep copy, safe to modify in a test.
    """
    return copy.deepcopy(MANUAL_DOCUMENT)


@pytest.fixture
def test_settings():
    """Create test settings pointing discovery at the app itself.

    Returns:
        UtcpBridgeSettings: Settings instance configured for testing.
    """
    return UtcpBridgeSettings(
        host="127.0.0.1",
        port=8000,
        ollama_host="http://localhost:11434",
        model="llama3.2:latest",
        manual_urls=["http://test/api/v1/utcp"],
        public_base_url="http://test",
        variables={},
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
