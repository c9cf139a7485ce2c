"""Exception hierarchy for the UTCP bridge.

Every failure that should abort a conversation derives from UtcpBridgeError.
A tool call that completes with a non-2xx status is not an error here; it is
reported as a ToolCallResult with success=False.
"""


class UtcpBridgeError(Exception):
    """Base class for all bridge errors."""


class DiscoveryError(UtcpBridgeError):
    """A manual could not be fetched or parsed."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to discover tools from {url}: {message}")


class OperationOrderError(UtcpBridgeError):
    """Tools were queried before any manual was successfully discovered."""

    def __init__(self, message: str = "No manual loaded. Call discover() first.") -> None:
        super().__init__(message)


class UnknownToolError(UtcpBridgeError):
    """The requested tool is not part of the current manual."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Tool '{tool_name}' not found")


class UnsupportedTemplateKindError(UtcpBridgeError):
    """The tool's call template uses a transport the bridge cannot execute."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Call template type not supported: {kind}")


class TransportError(UtcpBridgeError):
    """A request did not complete (DNS failure, refused connection, timeout)."""

    def __init__(self, target: str, message: str) -> None:
        self.target = target
        super().__init__(f"Request to {target} failed: {message}")
