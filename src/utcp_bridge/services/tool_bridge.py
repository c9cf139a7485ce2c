"""Service bridging UTCP tools with LLM function calling.

ToolBridge is the seam the chat orchestrator talks to: it discovers manuals,
exposes the discovered tools as function-calling definitions, and executes
tool calls, turning failed calls into a payload the model can read.
"""

import json
import logging
from typing import Any

from utcp_bridge.utcp.errors import UnknownToolError
from utcp_bridge.utcp.manifest_client import ManifestClient
from utcp_bridge.utcp.schema import build_tool_definitions, to_parameter_mapping
from utcp_bridge.utcp.types import UtcpManual

logger = logging.getLogger(__name__)


class ToolBridge:
    """Discovers, describes and executes UTCP tools for the chat layer."""

    def __init__(self, manifest_client: ManifestClient) -> None:
        self.manifest_client = manifest_client

    @property
    def is_loaded(self) -> bool:
        return self.manifest_client.is_loaded

    async def discover(self, manual_url: str) -> UtcpManual:
        """Discover tools from a UTCP manual endpoint."""
        return await self.manifest_client.discover(manual_url)

    def tool_definitions(self) -> list[dict[str, Any]]:
        """Get all discovered tools in function-calling format.

        Raises:
            OperationOrderError: If no manual has been discovered yet
        """
        return build_tool_definitions(self.manifest_client.list_tools())

    async def execute(self, tool_name: str, raw_arguments: Any) -> Any:
        """Execute a tool with the arguments produced by the model.

        Args:
            tool_name: Name of the tool to call
            raw_arguments: Decoded JSON arguments or their JSON text

        Returns:
            The decoded JSON response body (or raw text if it is not JSON).
            For a non-2xx response, a dict with error, status_code, message
            and details keys.

        Raises:
            UnknownToolError: If the tool is not in the current manual
            UnsupportedTemplateKindError: If the tool is not HTTP-backed
            TransportError: If the HTTP request could not be completed
        """
        tool = self.manifest_client.get_tool(tool_name)
        if tool is None:
            raise UnknownToolError(tool_name)

        parameters = to_parameter_mapping(tool, raw_arguments)
        result = await self.manifest_client.call_tool(tool_name, parameters)

        if not result.success:
            logger.warning(f"Tool '{tool_name}' failed with status {result.status_code}")
            return {
                "error": True,
                "status_code": result.status_code,
                "message": f"Tool '{tool_name}' failed with status {result.status_code}",
                "details": result.body,
            }

        try:
            decoded = result.json()
        except json.JSONDecodeError:
            return result.body
        return result.body if decoded is None else decoded
