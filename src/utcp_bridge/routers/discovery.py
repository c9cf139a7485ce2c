"""UTCP discovery endpoint serving the sample weather manual."""

import logging

from fastapi import APIRouter, Request

from utcp_bridge.utcp.types import (
    HttpCallTemplate,
    PropertySchema,
    Tool,
    ToolInputSchema,
    ToolOutputSchema,
    UtcpManual,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/utcp", tags=["discovery"])


def build_weather_manual(base_url: str) -> UtcpManual:
    """Build the manual describing the sample weather provider.

    Args:
        base_url: Public base URL of this server, used in the tool URLs

    Returns:
        UtcpManual: A manual with get_current_weather and get_forecast
    """
    base_url = base_url.rstrip("/")

    return UtcpManual(
        manual_version="1.0.0",
        utcp_version="1.1.0",
        name="Weather API",
        description="API for weather information and forecasts",
        tools=[
            Tool(
                name="get_current_weather",
                description="Get the current weather for a specific location",
                tags=["weather", "current", "temperature"],
                inputs=ToolInputSchema(
                    type="object",
                    properties={
                        "location": PropertySchema(
                            type="string",
                            description="City name or coordinates (e.g. London or 51.5074,-0.1278)",
                        ),
                        "units": PropertySchema(
                            type="string",
                            description="Temperature units",
                            enum=["celsius", "fahrenheit"],
                        ),
                    },
                    required=["location"],
                ),
                output=ToolOutputSchema(
                    type="object", description="Current weather information"
                ),
                average_response_size=512,
                tool_call_template=HttpCallTemplate(
                    url=f"{base_url}/api/v1/weatherforecast/current",
                    http_method="GET",
                    query_params={"location": "${location}", "units": "${units}"},
                ),
            ),
            Tool(
                name="get_forecast",
                description="Get the weather forecast for the next days",
                tags=["weather", "forecast"],
                inputs=ToolInputSchema(
                    type="object",
                    properties={
                        "location": PropertySchema(
                            type="string", description="City name"
                        ),
                        "days": PropertySchema(
                            type="integer",
                            description="Number of days (1-7)",
                            minimum=1,
                            maximum=7,
                        ),
                    },
                    required=["location", "days"],
                ),
                output=ToolOutputSchema(
                    type="array", description="Array of daily forecasts"
                ),
                average_response_size=2048,
                tool_call_template=HttpCallTemplate(
                    url=f"{base_url}/api/v1/weatherforecast/forecast",
                    http_method="GET",
                    query_params={"location": "${location}", "days": "${days}"},
                ),
            ),
        ],
    )


@router.get("", response_model=UtcpManual)
async def get_manual(request: Request) -> UtcpManual:
    """Serve the UTCP manual of the sample weather provider."""
    settings = request.app.state.settings
    logger.debug(f"Serving weather manual for {settings.public_base_url}")
    return build_weather_manual(settings.public_base_url)
