"""Discovery of UTCP manuals and dispatch of tool calls.

The client keeps the most recently discovered manual as an immutable
snapshot. A successful discovery builds a new snapshot and swaps it in with
a single assignment, so concurrent readers see either the old tool list or
the new one, never a mix.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from utcp_bridge.utcp.errors import (
    DiscoveryError,
    OperationOrderError,
    UnknownToolError,
    UnsupportedTemplateKindError,
)
from utcp_bridge.utcp.invoker import ToolInvoker
from utcp_bridge.utcp.types import HttpCallTemplate, Tool, ToolCallResult, UtcpManual

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManualSnapshot:
    """A discovered manual together with its derived tool index."""

    url: str
    manual: UtcpManual
    tools_by_name: dict[str, Tool] = field(default_factory=dict)

    @classmethod
    def build(cls, url: str, manual: UtcpManual) -> "ManualSnapshot":
        # Later tools win on duplicate names
        return cls(
            url=url,
            manual=manual,
            tools_by_name={tool.name: tool for tool in manual.tools},
        )


class ManifestClient:
    """Client for discovering and calling UTCP tools.

    Attributes:
        invoker: ToolInvoker used to execute HTTP call templates
        _client: Shared httpx.AsyncClient used for discovery requests
        _snapshot: The current manual snapshot, None until discovery succeeds
    """

    def __init__(self, http_client: httpx.AsyncClient, invoker: ToolInvoker) -> None:
        self._client = http_client
        self.invoker = invoker
        self._snapshot: ManualSnapshot | None = None

    @property
    def is_loaded(self) -> bool:
        """Whether a manual has been discovered successfully."""
        return self._snapshot is not None

    @property
    def manual(self) -> UtcpManual | None:
        """The most recently discovered manual, if any."""
        snapshot = self._snapshot
        return snapshot.manual if snapshot else None

    def _require_snapshot(self) -> ManualSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise OperationOrderError()
        return snapshot

    async def discover(self, url: str) -> UtcpManual:
        """Fetch and parse the manual at url, replacing the current one.

        Args:
            url: URL serving a UTCP manual document

        Returns:
            UtcpManual: The parsed manual

        Raises:
            DiscoveryError: If the request fails, returns a non-2xx status,
                or the body is not a valid manual
        """
        logger.debug(f"Discovering tools from {url}")

        try:
            response = await self._client.get(url)
        except httpx.TransportError as e:
            logger.error(f"Manual request to {url} failed: {e}")
            raise DiscoveryError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"Manual request to {url} returned {response.status_code}")
            raise DiscoveryError(
                url,
                f"unexpected status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            manual = UtcpManual.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Invalid manual from {url}: {e}")
            raise DiscoveryError(url, f"invalid manual: {e}") from e

        self._snapshot = ManualSnapshot.build(url, manual)

        logger.info(f"Discovered {len(manual.tools)} tools from {manual.name}")
        for tool in manual.tools:
            logger.info(f"   - {tool.name}: {tool.description}")

        return manual

    def list_tools(self) -> list[Tool]:
        """List the tools of the current manual in manual order.

        Raises:
            OperationOrderError: If no manual has been discovered yet
        """
        return list(self._require_snapshot().manual.tools)

    def get_tool(self, tool_name: str) -> Tool | None:
        """Get a tool of the current manual by name, or None if absent.

        Raises:
            OperationOrderError: If no manual has been discovered yet
        """
        return self._require_snapshot().tools_by_name.get(tool_name)

    async def call_tool(
        self, tool_name: str, parameters: Mapping[str, Any]
    ) -> ToolCallResult:
        """Call a tool of the current manual.

        Args:
            tool_name: Name of the tool to call
            parameters: Call arguments used for ${name} substitution

        Returns:
            ToolCallResult: The completed call, successful or not

        Raises:
            OperationOrderError: If no manual has been discovered yet
            UnknownToolError: If the tool is not in the current manual
            UnsupportedTemplateKindError: If the tool is not HTTP-backed
            TransportError: If the HTTP request could not be completed
        """
        snapshot = self._require_snapshot()
        tool = snapshot.tools_by_name.get(tool_name)
        if tool is None:
            raise UnknownToolError(tool_name)

        logger.info(f"Calling tool: {tool_name}")
        logger.debug(f"Parameters: {dict(parameters)}")

        template = tool.tool_call_template
        if not isinstance(template, HttpCallTemplate):
            raise UnsupportedTemplateKindError(template.call_template_type)

        return await self.invoker.invoke(template, parameters, snapshot.manual.auth)
