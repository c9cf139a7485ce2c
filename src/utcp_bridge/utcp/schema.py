"""Conversion between UTCP tools and LLM function calling.

Outbound, a tool's input schema becomes a function-calling schema. Inbound,
the arguments the model produced become the parameter mapping used for
template substitution.
"""

import json
import logging
from functools import singledispatch
from typing import Any, Iterable

from utcp_bridge.utcp.types import PropertySchema, Tool

logger = logging.getLogger(__name__)


def _property_schema(schema: PropertySchema) -> dict[str, Any]:
    prop: dict[str, Any] = {"type": schema.type}
    if schema.description:
        prop["description"] = schema.description
    if schema.enum:
        prop["enum"] = list(schema.enum)
    if schema.minimum is not None:
        prop["minimum"] = schema.minimum
    if schema.maximum is not None:
        prop["maximum"] = schema.maximum
    return prop


def to_function_schema(tool: Tool) -> dict[str, Any]:
    """Convert a tool into a function-calling schema.

    Optional property keys (description, enum, minimum, maximum) are left
    out when absent instead of being emitted as null.

    Args:
        tool: The UTCP tool to convert

    Returns:
        dict: {"name", "description", "parameters": {type, properties, required}}
    """
    inputs = tool.inputs
    return {
        "name": tool.name,
        "description": tool.description,
        "parameters": {
            "type": inputs.type,
            "properties": {
                name: _property_schema(schema)
                for name, schema in (inputs.properties or {}).items()
            },
            "required": list(inputs.required or []),
        },
    }


def to_tool_definition(tool: Tool) -> dict[str, Any]:
    """Wrap a function schema in the tool format accepted by the chat API."""
    return {"type": "function", "function": to_function_schema(tool)}


def build_tool_definitions(tools: Iterable[Tool]) -> list[dict[str, Any]]:
    """Build one tool definition per tool name; later duplicates win."""
    definitions: dict[str, dict[str, Any]] = {}
    for tool in tools:
        definitions[tool.name] = to_tool_definition(tool)
    return list(definitions.values())


@singledispatch
def convert_value(value: Any) -> Any:
    """Convert a decoded JSON value into a parameter value."""
    return str(value)


@convert_value.register
def _(value: str) -> str:
    return value


@convert_value.register
def _(value: bool) -> bool:
    return value


@convert_value.register
def _(value: int) -> int:
    return value


@convert_value.register
def _(value: float) -> int | float:
    # Integral numbers become ints so "${days}" renders as "3", not "3.0"
    return int(value) if value.is_integer() else value


@convert_value.register
def _(value: list) -> list[Any]:
    return [convert_value(item) for item in value]


@convert_value.register
def _(value: dict) -> dict[str, Any]:
    return {key: convert_value(item) for key, item in value.items()}


@convert_value.register(type(None))
def _(value: None) -> None:
    return None


def to_parameter_mapping(tool: Tool, raw_arguments: Any) -> dict[str, Any]:
    """Flatten the model's tool-call arguments into a parameter mapping.

    Args:
        tool: The tool being called
        raw_arguments: Decoded JSON arguments, or the JSON text of them

    Returns:
        dict: Top-level argument names mapped to converted values. Empty if
            the arguments are not a JSON object.
    """
    if isinstance(raw_arguments, (str, bytes)):
        try:
            raw_arguments = json.loads(raw_arguments) if raw_arguments else {}
        except json.JSONDecodeError as e:
            logger.warning(f"Undecodable arguments for tool '{tool.name}': {e}")
            return {}

    if not isinstance(raw_arguments, dict):
        logger.debug(
            f"Arguments for tool '{tool.name}' are not an object: "
            f"{type(raw_arguments).__name__}"
        )
        return {}

    return {key: convert_value(value) for key, value in raw_arguments.items()}
