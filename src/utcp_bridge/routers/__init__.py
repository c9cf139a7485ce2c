"""FastAPI routers for API endpoints.

This package contains all route handlers organized by resource type:
health, chat, the sample UTCP manual (discovery) and the sample weather
provider its tools point at.
"""

from utcp_bridge.routers import chat, discovery, health, weather

__all__ = [
    "chat",
    "discovery",
    "health",
    "weather",
]
