"""Type definitions for Ollama integration."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ModelTurn:
    """The collected result of one streamed model call.

    Attributes:
        content: Concatenated assistant text
        tool_calls: Tool calls in Ollama format:
                    [{"function": {"name": "...", "arguments": {...}}}, ...]
        model: Model that produced the turn
        eval_count: Number of tokens generated
        prompt_eval_count: Number of tokens in the prompt
    """

    content: str = ""
    tool_calls: list[dict[str, Any]] = field(default_factory=list)
    model: str = ""
    eval_count: int | None = None
    prompt_eval_count: int | None = None

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)
