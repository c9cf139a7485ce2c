"""UTCP manual discovery, schema conversion, and HTTP tool execution.

This package contains the core of the bridge: parsing manuals, resolving
${name} placeholders, injecting auth, executing HTTP call templates and
converting tools to and from the function-calling format.
"""

from utcp_bridge.utcp.errors import (
    DiscoveryError,
    OperationOrderError,
    TransportError,
    UnknownToolError,
    UnsupportedTemplateKindError,
    UtcpBridgeError,
)
from utcp_bridge.utcp.invoker import ToolInvoker
from utcp_bridge.utcp.manifest_client import ManifestClient
from utcp_bridge.utcp.types import (
    AuthConfig,
    HttpCallTemplate,
    PropertySchema,
    Tool,
    ToolCallResult,
    ToolInputSchema,
    ToolOutputSchema,
    UnsupportedCallTemplate,
    UtcpManual,
)

__all__ = [
    "AuthConfig",
    "DiscoveryError",
    "HttpCallTemplate",
    "ManifestClient",
    "OperationOrderError",
    "PropertySchema",
    "Tool",
    "ToolCallResult",
    "ToolInputSchema",
    "ToolInvoker",
    "ToolOutputSchema",
    "TransportError",
    "UnknownToolError",
    "UnsupportedCallTemplate",
    "UnsupportedTemplateKindError",
    "UtcpBridgeError",
    "UtcpManual",
]
