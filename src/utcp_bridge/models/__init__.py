"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from utcp_bridge.models.chat import ChatErrorResponse, ChatResponse
from utcp_bridge.models.health import HealthResponse
from utcp_bridge.models.weather import CurrentWeather, DailyForecast

__all__ = [
    "ChatErrorResponse",
    "ChatResponse",
    "CurrentWeather",
    "DailyForecast",
    "HealthResponse",
]
