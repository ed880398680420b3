"""Forecast service: today, week and day answers for a resort."""

import logging
from collections.abc import Callable

from skireport.config.schema import WeatherApiConfig
from skireport.forecast.day_selector import select_day
from skireport.forecast.normalizer import normalize_periods
from skireport.ingest.forecast_fetcher import ForecastFetcher
from skireport.ingest.gridpoints import GridpointResolver
from skireport.ingest.weather_gov_client import WeatherGovClient
from skireport.models.common import ForecastError
from skireport.models.forecast import (
    DayResult,
    ForecastResult,
    PeriodsResult,
    TodayResult,
)

logger = logging.getLogger(__name__)

FetchPeriods = Callable[[str], PeriodsResult]


class ForecastService:
    def __init__(self, fetch_periods: FetchPeriods):
        self.fetch_periods = fetch_periods

    def forecast_today(self, resort_id: str) -> TodayResult:
        """Detailed forecast of the current period."""
        fetched = self.fetch_periods(resort_id)
        if fetched.error is not None:
            return TodayResult(error=fetched.error)

        assert fetched.periods is not None
        if not fetched.periods or not fetched.periods[0].detailed_forecast:
            logger.warning("No current period in forecast for %s", resort_id)
            return TodayResult(error=ForecastError.TERMINAL_ERROR)
        return TodayResult(detailed_forecast=fetched.periods[0].detailed_forecast)

    def forecast_week(self, resort_id: str) -> ForecastResult:
        """Per-day summaries across the forecast horizon."""
        fetched = self.fetch_periods(resort_id)
        if fetched.error is not None:
            return ForecastResult(error=fetched.error)

        assert fetched.periods is not None
        summaries = normalize_periods(fetched.periods)
        if not summaries:
            logger.warning(
                "No complete day/night pair in %d periods for %s",
                len(fetched.periods), resort_id,
            )
            return ForecastResult(error=ForecastError.TERMINAL_ERROR)
        return ForecastResult(summaries=summaries)

    def forecast_week_day(self, resort_id: str, day: str) -> DayResult:
        """Summary for one weekday within the forecast horizon."""
        fetched = self.fetch_periods(resort_id)
        if fetched.error is not None:
            return DayResult(error=fetched.error)

        assert fetched.periods is not None
        return select_day(normalize_periods(fetched.periods), day)


def build_forecast_service(
    resolver: GridpointResolver, api_config: WeatherApiConfig
) -> ForecastService:
    """Wire a service to api.weather.gov through a fresh-fetching fetcher."""
    client = WeatherGovClient.from_config(api_config)
    return ForecastService(ForecastFetcher(client, resolver).fetch_periods)
