"""Forecast fetcher: resolves a resort and retrieves its raw forecast periods."""

import logging

from skireport.ingest.gridpoints import GridpointResolver
from skireport.ingest.weather_gov_client import WeatherGovClient
from skireport.models.common import ForecastError
from skireport.models.forecast import ForecastPeriod, PeriodsResult

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: WeatherGovClient, resolver: GridpointResolver):
        self.client = client
        self.resolver = resolver

    def fetch_periods(self, resort_id: str) -> PeriodsResult:
        """Fetch the forecast periods for a resort.

        Every call performs a fresh request. Unsupported resorts return
        NOT_SUPPORTED without touching the network; any fetch or parse
        failure returns TERMINAL_ERROR.
        """
        logger.info("Requesting weather for %s", resort_id)
        gridpoint = self.resolver.resolve(resort_id)
        if gridpoint is None:
            logger.info("No gridpoint for %s, forecast not supported", resort_id)
            return PeriodsResult(error=ForecastError.NOT_SUPPORTED)

        try:
            raw = self.client.get_forecast(gridpoint)
            periods = parse_periods(raw)
        except Exception:
            logger.exception(
                "Error fetching weather for %s at %s", resort_id, gridpoint
            )
            return PeriodsResult(error=ForecastError.TERMINAL_ERROR)

        return PeriodsResult(periods=periods)


def parse_periods(raw: dict) -> list[ForecastPeriod]:
    """Parse `properties.periods` from a gridpoint forecast response.

    Raises KeyError/TypeError/ValueError on a malformed body.
    """
    periods = raw["properties"]["periods"]
    if not isinstance(periods, list):
        raise TypeError(f"properties.periods is {type(periods).__name__}, not list")

    return [
        ForecastPeriod(
            name=p["name"],
            temperature=int(p["temperature"]),
            is_daytime=bool(p["isDaytime"]),
            short_forecast=p.get("shortForecast", ""),
            detailed_forecast=p.get("detailedForecast", ""),
            start_time=p.get("startTime", ""),
            temperature_unit=p.get("temperatureUnit", "F"),
        )
        for p in periods
    ]
