"""utcp-bridge: FastAPI server bridging UTCP tool manuals to LLM function calling.

This package discovers UTCP manuals, exposes their HTTP tools to an Ollama
model as function-calling definitions, executes the model's tool calls and
returns the model's final answer.
"""

__version__ = "0.1.0"

from utcp_bridge.app import create_app  # noqa: E402

__all__ = ["create_app", "__version__"]
