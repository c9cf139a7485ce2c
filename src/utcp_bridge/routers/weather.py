"""Simulated weather provider the sample manual's tools point at."""

import logging
import random
from datetime import date, datetime, timedelta, timezone

from fastapi import APIRouter, HTTPException, Query

from utcp_bridge.models.weather import CurrentWeather, DailyForecast

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/weatherforecast", tags=["weather"])

SUMMARIES = [
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
]

UNKNOWN_LOCATION = "Unknown"


def _location_not_found(location: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "error": {
                "code": "location_not_found",
                "message": f"No weather data for {location}",
                "details": {"location": location},
            }
        },
    )


@router.get("/current", response_model=CurrentWeather)
async def get_current_weather(
    location: str = Query(..., min_length=1),
    units: str = Query(default="celsius"),
) -> CurrentWeather:
    """Return simulated current conditions for a location.

    Any units value other than "fahrenheit" is treated as celsius, which
    also covers an unresolved "${units}" placeholder.
    """
    if location == UNKNOWN_LOCATION:
        raise _location_not_found(location)

    temperature_c = random.randint(-20, 55)
    if units == "fahrenheit":
        temperature = 32 + int(temperature_c / 0.5556)
    else:
        units = "celsius"
        temperature = temperature_c

    logger.debug(f"Current weather for {location}: {temperature} {units}")

    return CurrentWeather(
        location=location,
        units=units,
        temperature=temperature,
        summary=random.choice(SUMMARIES),
        humidity=random.randint(10, 100),
        observed_at=datetime.now(timezone.utc),
    )


@router.get("/forecast", response_model=list[DailyForecast])
async def get_forecast(
    location: str = Query(..., min_length=1),
    days: int = Query(default=5, ge=1, le=7),
) -> list[DailyForecast]:
    """Return a simulated daily forecast for the next days."""
    if location == UNKNOWN_LOCATION:
        raise _location_not_found(location)

    today = date.today()
    return [
        DailyForecast(
            day=today + timedelta(days=index),
            location=location,
            temperature_c=random.randint(-20, 55),
            summary=random.choice(SUMMARIES),
        )
        for index in range(1, days + 1)
    ]
