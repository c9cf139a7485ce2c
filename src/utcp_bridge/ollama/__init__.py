"""Ollama client wrapper and integration layer.

This package provides async client wrappers for communicating with the Ollama API.
All Ollama interactions are async and use streaming.
"""

from utcp_bridge.ollama.client import OllamaClient
from utcp_bridge.ollama.types import ModelTurn

__all__ = ["OllamaClient", "ModelTurn"]
