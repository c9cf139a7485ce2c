"""Two-turn tool-calling conversation with the LLM.

A conversation moves through these states:

    AWAIT_MODEL_1 -> DONE                                    (no tool call)
    AWAIT_MODEL_1 -> EXECUTE_TOOL -> AWAIT_MODEL_2 -> DONE   (tool call)

Only the first tool call of the first turn is executed. Any further tool
calls in that turn are recorded as ignored and are not executed, queued or
retried. The message list lives only for the duration of one call.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx
import ollama

from utcp_bridge.ollama.client import OllamaClient
from utcp_bridge.ollama.types import ModelTurn
from utcp_bridge.services.tool_bridge import ToolBridge
from utcp_bridge.utcp.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = "You are an assistant that uses tools when needed."


class ConversationState(str, Enum):
    AWAIT_MODEL_1 = "await_model_1"
    EXECUTE_TOOL = "execute_tool"
    AWAIT_MODEL_2 = "await_model_2"
    DONE = "done"


class ToolCallDisposition(str, Enum):
    PROCESSED = "processed"
    IGNORED = "ignored"


@dataclass
class ToolCallRecord:
    """A tool call requested by the model and what happened to it."""

    name: str
    arguments: Any
    disposition: ToolCallDisposition
    output: Any = None


@dataclass
class ChatOutcome:
    """Result of one send_message call.

    Attributes:
        content: Final assistant text
        tool_call: The executed tool call, if the model requested one
        ignored_tool_calls: Additional tool calls from the same turn
        state: Final conversation state (always DONE on success)
    """

    content: str
    tool_call: ToolCallRecord | None = None
    ignored_tool_calls: list[ToolCallRecord] = field(default_factory=list)
    state: ConversationState = ConversationState.DONE


def _parse_tool_call(tool_call: dict[str, Any]) -> tuple[str, Any]:
    function = tool_call.get("function") or {}
    return function.get("name") or "", function.get("arguments")


class ChatOrchestrator:
    """Runs a user message through the model with the discovered tools."""

    def __init__(
        self,
        ollama_client: OllamaClient,
        tool_bridge: ToolBridge,
        model: str,
        manual_urls: list[str] | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        rediscover: bool = True,
    ) -> None:
        self.ollama_client = ollama_client
        self.tool_bridge = tool_bridge
        self.model = model
        self.manual_urls = list(manual_urls or [])
        self.system_prompt = system_prompt
        self.rediscover = rediscover

    async def _discover_tools(self) -> None:
        if not self.rediscover and self.tool_bridge.is_loaded:
            return
        for manual_url in self.manual_urls:
            # Discovery errors abort the whole conversation
            await self.tool_bridge.discover(manual_url)

    async def _complete(
        self, messages: list[dict[str, Any]], tools: list[dict[str, Any]]
    ) -> ModelTurn:
        try:
            return await self.ollama_client.complete_chat(
                model=self.model, messages=messages, tools=tools
            )
        except (ollama.ResponseError, httpx.HTTPError, ConnectionError) as e:
            raise TransportError(self.ollama_client.host, str(e)) from e

    async def converse(self, user_text: str) -> ChatOutcome:
        """Run the two-turn conversation and return the full outcome.

        Raises:
            DiscoveryError: If a configured manual cannot be discovered
            UnknownToolError: If the model calls a tool that does not exist
            UnsupportedTemplateKindError: If the called tool is not HTTP-backed
            TransportError: If a tool request or model call does not complete
        """
        await self._discover_tools()

        messages: list[dict[str, Any]] = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": user_text},
        ]
        tools = self.tool_bridge.tool_definitions() if self.tool_bridge.is_loaded else []

        state = ConversationState.AWAIT_MODEL_1
        logger.debug(f"State {state.value}: sending {len(tools)} tools to {self.model}")
        first_turn = await self._complete(messages, tools)

        if not first_turn.has_tool_calls:
            return ChatOutcome(content=first_turn.content)

        state = ConversationState.EXECUTE_TOOL
        tool_call, *extra_calls = first_turn.tool_calls
        name, arguments = _parse_tool_call(tool_call)

        ignored = []
        for extra in extra_calls:
            extra_name, extra_arguments = _parse_tool_call(extra)
            logger.debug(f"Ignoring additional tool call: {extra_name}")
            ignored.append(
                ToolCallRecord(
                    name=extra_name,
                    arguments=extra_arguments,
                    disposition=ToolCallDisposition.IGNORED,
                )
            )

        logger.debug(f"State {state.value}: {name}")
        output = await self.tool_bridge.execute(name, arguments)
        record = ToolCallRecord(
            name=name,
            arguments=arguments,
            disposition=ToolCallDisposition.PROCESSED,
            output=output,
        )

        messages.append(
            {
                "role": "assistant",
                "content": first_turn.content,
                "tool_calls": [tool_call],
            }
        )
        messages.append(
            {"role": "tool", "content": json.dumps(output), "tool_name": name}
        )

        state = ConversationState.AWAIT_MODEL_2
        logger.debug(f"State {state.value}: sending tool result to {self.model}")
        final_turn = await self._complete(messages, tools)

        return ChatOutcome(
            content=final_turn.content,
            tool_call=record,
            ignored_tool_calls=ignored,
        )

    async def send_message(self, user_text: str) -> str:
        """Send a user message and return the model's final answer."""
        outcome = await self.converse(user_text)
        return outcome.content
