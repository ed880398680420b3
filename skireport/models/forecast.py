"""Forecast data models: raw api.weather.gov periods and derived day summaries."""

from dataclasses import dataclass

from skireport.models.common import ForecastError


@dataclass(frozen=True)
class ForecastPeriod:
    name: str
    temperature: int
    is_daytime: bool
    short_forecast: str
    detailed_forecast: str
    start_time: str = ""
    temperature_unit: str = "F"


@dataclass(frozen=True)
class DaySummary:
    day: str
    temp_high: int
    temp_low: int
    short_forecast: str
    detailed_forecast: str


def _check_exclusive(value: object, error: ForecastError | None) -> None:
    if (value is None) == (error is None):
        raise ValueError("exactly one of value or error must be set")


@dataclass(frozen=True)
class PeriodsResult:
    periods: list[ForecastPeriod] | None = None
    error: ForecastError | None = None

    def __post_init__(self) -> None:
        _check_exclusive(self.periods, self.error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ForecastResult:
    summaries: list[DaySummary] | None = None
    error: ForecastError | None = None

    def __post_init__(self) -> None:
        _check_exclusive(self.summaries, self.error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DayResult:
    summary: DaySummary | None = None
    error: ForecastError | None = None

    def __post_init__(self) -> None:
        _check_exclusive(self.summary, self.error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TodayResult:
    detailed_forecast: str | None = None
    error: ForecastError | None = None

    def __post_init__(self) -> None:
        _check_exclusive(self.detailed_forecast, self.error)

    @property
    def ok(self) -> bool:
        return self.error is None
