"""Spoken response templates."""

from skireport.models.common import ForecastError
from skireport.models.forecast import DaySummary


def welcome() -> str:
    return (
        "Welcome to Snow Report. You can ask for today's weather, "
        "this week's forecast, or the forecast for a day of the week "
        "at your favorite ski resort."
    )


def help_message() -> str:
    return (
        "Try saying: what's the weather at Stevens Pass, "
        "what's the forecast this week at Crystal Mountain, "
        "or what's the weather on Saturday at Mount Baker."
    )


def goodbye() -> str:
    return "Have fun on the mountain!"


def _day_sentence(summary: DaySummary) -> str:
    return (
        f"{summary.day}, {summary.short_forecast}, "
        f"with a high of {summary.temp_high} and a low of {summary.temp_low}."
    )


def forecast_today(resort_name: str, detailed_forecast: str) -> str:
    return f"Here is today's forecast for {resort_name}. {detailed_forecast}"


def forecast_week(resort_name: str, summaries: list[DaySummary]) -> str:
    days = " ".join(_day_sentence(s) for s in summaries)
    return f"Here is the forecast for {resort_name} this week. {days}"


def forecast_day(resort_name: str, summary: DaySummary) -> str:
    return (
        f"On {summary.day} at {resort_name}, expect a high of "
        f"{summary.temp_high} and a low of {summary.temp_low}. "
        f"{summary.detailed_forecast}"
    )


def unknown_resort(synonym_value: str | None) -> str:
    if not synonym_value:
        return "Sorry, I didn't catch which resort you meant."
    return f"Sorry, I don't know the resort {synonym_value} yet."


def unknown_resort_reprompt() -> str:
    return "Which ski resort would you like the weather for?"


def weather_service_not_supported() -> str:
    return "Sorry, the weather service doesn't cover that resort yet."


def weather_service_terminal_error() -> str:
    return "Sorry, I couldn't get the weather right now. Please try again later."


def invalid_day() -> str:
    return "Sorry, I can only give forecasts for a day of the week, like Saturday."


def no_data_for_day() -> str:
    return "Sorry, the forecast doesn't reach that day yet."


_ERROR_MESSAGES = {
    ForecastError.NOT_SUPPORTED: weather_service_not_supported,
    ForecastError.TERMINAL_ERROR: weather_service_terminal_error,
    ForecastError.INVALID_DAY: invalid_day,
    ForecastError.NO_DATA_FOR_DAY: no_data_for_day,
}


def error_message(error: ForecastError) -> str:
    return _ERROR_MESSAGES[error]()
