"""Async Ollama chat client used for both turns of a conversation.

Responses are always streamed from Ollama; complete_chat() folds a stream
into one ModelTurn holding the text, the requested tool calls and the token
counts reported on the final chunk.
"""

import logging
from typing import Any, AsyncIterator

import ollama

from utcp_bridge.ollama.types import ModelTurn

logger = logging.getLogger(__name__)


def _as_dict(chunk: Any) -> dict[str, Any]:
    if isinstance(chunk, dict):
        return chunk
    if hasattr(chunk, "model_dump"):
        return chunk.model_dump()
    return vars(chunk)


class OllamaClient:
    """Thin wrapper over ollama.AsyncClient.

    Attributes:
        host: Ollama server URL, reported in health checks and errors
        _client: The underlying ollama.AsyncClient
    """

    def __init__(self, host: str, timeout: float | None = None) -> None:
        self.host = host
        self._client = ollama.AsyncClient(host=host, timeout=timeout)
        logger.info(f"Using Ollama at {host}")

    async def check_connection(self) -> bool:
        """Return True if the Ollama server answers a model listing."""
        try:
            await self._client.list()
        except Exception as e:
            logger.warning(f"Ollama at {self.host} is not reachable: {e}")
            return False
        logger.debug(f"Ollama at {self.host} is reachable")
        return True

    async def chat_stream(
        self,
        model: str,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        options: dict[str, Any] | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Stream one chat completion as plain dict chunks.

        Args:
            model: Model name
            messages: Conversation so far in Ollama message format
            tools: Function definitions the model may call
            options: Model parameters such as temperature

        Yields:
            dict: Chunks with "message" (role, content, tool_calls) and
                "done"; the done chunk also carries the eval counts.
        """
        logger.debug(
            f"Chat with {model}: {len(messages)} messages, {len(tools or [])} tools"
        )
        try:
            stream = await self._client.chat(
                model=model,
                messages=messages,
                tools=tools or None,
                stream=True,
                options=options,
            )
            async for chunk in stream:
                yield _as_dict(chunk)
        except Exception as e:
            logger.error(f"Chat with {model} failed: {e}")
            raise

    async def complete_chat(
        self,
        model: str,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
    ) -> ModelTurn:
        """Run one model turn and collect the streamed response.

        Tool calls are gathered from every chunk, in the order they arrive.
        """
        turn = ModelTurn(model=model)
        parts: list[str] = []

        async for chunk in self.chat_stream(model=model, messages=messages, tools=tools):
            message = chunk.get("message") or {}
            if message.get("content"):
                parts.append(message["content"])
            turn.tool_calls.extend(message.get("tool_calls") or [])

            if chunk.get("done"):
                turn.model = chunk.get("model") or model
                turn.eval_count = chunk.get("eval_count")
                turn.prompt_eval_count = chunk.get("prompt_eval_count")

        turn.content = "".join(parts)
        logger.debug(
            f"Model turn: {len(turn.content)} characters, {len(turn.tool_calls)} tool calls"
        )
        return turn

    async def close(self) -> None:
        # ollama.AsyncClient owns its httpx client and exposes no close()
        logger.debug("OllamaClient closed")
