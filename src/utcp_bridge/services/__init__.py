"""Business logic services for utcp-bridge.

This package contains the service classes that compose the UTCP core with
the LLM client: tool discovery/execution and chat orchestration.
"""

from utcp_bridge.services.chat_orchestrator import (
    ChatOrchestrator,
    ChatOutcome,
    ToolCallDisposition,
    ToolCallRecord,
)
from utcp_bridge.services.tool_bridge import ToolBridge

__all__ = [
    "ChatOrchestrator",
    "ChatOutcome",
    "ToolBridge",
    "ToolCallDisposition",
    "ToolCallRecord",
]
