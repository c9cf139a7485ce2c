"""Pydantic models for the sample weather provider."""

from datetime import date, datetime

from pydantic import BaseModel, Field, computed_field


class CurrentWeather(BaseModel):
    """Current conditions for a location."""

    location: str
    units: str = Field(description="celsius or fahrenheit")
    temperature: int
    summary: str
    humidity: int = Field(description="Relative humidity in percent")
    observed_at: datetime


class DailyForecast(BaseModel):
    """Forecast for a single day."""

    day: date
    location: str
    temperature_c: int
    summary: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)
