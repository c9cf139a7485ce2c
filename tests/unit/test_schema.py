"""Unit tests for function-calling schema conversion."""

import pytest

from utcp_bridge.utcp.schema import (
    build_tool_definitions,
    to_function_schema,
    to_parameter_mapping,
    to_tool_definition,
)
from utcp_bridge.utcp.types import Tool, UtcpManual


@pytest.fixture
def manual(manual_document):
    return UtcpManual.model_validate(manual_document)


@pytest.fixture
def forecast_tool(manual) -> Tool:
    return manual.tools[1]


class TestFunctionSchema:
    """Tests for converting tools to function-calling schemas."""

    def test_forecast_schema(self, forecast_tool):
        schema = to_function_schema(forecast_tool)

        assert schema == {
            "name": "get_forecast",
            "description": "Get the weather forecast for the next days",
            "parameters": {
                "type": "object",
                "properties": {
                    "location": {"type": "string", "description": "City name"},
                    "days": {
                        "type": "integer",
                        "description": "Number of days (1-7)",
                        "minimum": 1,
                        "maximum": 7,
                    },
                },
                "required": ["location", "days"],
            },
        }

    def test_enum_is_kept(self, manual):
        schema = to_function_schema(manual.tools[0])
        units = schema["parameters"]["properties"]["units"]
        assert units["enum"] == ["celsius", "fahrenheit"]
        assert "minimum" not in units
        assert "maximum" not in units

    def test_absent_optional_fields_are_omitted(self):
        tool = Tool.model_validate(
            {
                "name": "ping",
                "inputs": {"properties": {"host": {"type": "string"}}},
                "tool_call_template": {"url": "https://host/ping"},
            }
        )

        schema = to_function_schema(tool)

        assert schema["parameters"]["properties"]["host"] == {"type": "string"}
        assert schema["parameters"]["required"] == []
        assert None not in schema["parameters"]["properties"]["host"].values()

    def test_tool_without_properties(self):
        tool = Tool.model_validate(
            {"name": "now", "tool_call_template": {"url": "https://host/now"}}
        )

        schema = to_function_schema(tool)

        assert schema["parameters"] == {"type": "object", "properties": {}, "required": []}

    def test_tool_definition_wraps_function(self, forecast_tool):
        definition = to_tool_definition(forecast_tool)
        assert definition["type"] == "function"
        assert definition["function"]["name"] == "get_forecast"

    def test_build_definitions_last_write_wins(self, manual):
        duplicate = manual.tools[0].model_copy(update={"description": "newer"})

        definitions = build_tool_definitions([*manual.tools, duplicate])

        assert len(definitions) == 2
        by_name = {d["function"]["name"]: d["function"] for d in definitions}
        assert by_name["get_current_weather"]["description"] == "newer"


class TestParameterMapping:
    """Tests for converting model arguments into parameter mappings."""

    def test_typed_coercion(self, forecast_tool):
        arguments = {
            "location": "Paris",
            "days": 3,
            "ratio": 2.5,
            "whole": 4.0,
            "flag": True,
            "tags": ["a", 1, 1.0],
            "nested": {"x": 2.0, "y": [False]},
        }

        mapping = to_parameter_mapping(forecast_tool, arguments)

        assert mapping == {
            "location": "Paris",
            "days": 3,
            "ratio": 2.5,
            "whole": 4,
            "flag": True,
            "tags": ["a", 1, 1],
            "nested": {"x": 2, "y": [False]},
        }
        assert isinstance(mapping["whole"], int)
        assert isinstance(mapping["flag"], bool)
        assert isinstance(mapping["ratio"], float)

    def test_json_text_arguments(self, forecast_tool):
        mapping = to_parameter_mapping(forecast_tool, '{"location": "Oslo", "days": 2.0}')
        assert mapping == {"location": "Oslo", "days": 2}
        assert isinstance(mapping["days"], int)

    @pytest.mark.parametrize("raw", [[1, 2], "\"text\"", 42, None, "[]"])
    def test_non_object_yields_empty_mapping(self, forecast_tool, raw):
        assert to_parameter_mapping(forecast_tool, raw) == {}

    def test_undecodable_text_yields_empty_mapping(self, forecast_tool):
        assert to_parameter_mapping(forecast_tool, "{broken") == {}

    def test_empty_text_yields_empty_mapping(self, forecast_tool):
        assert to_parameter_mapping(forecast_tool, "") == {}
