"""Day selector: validates a weekday name and finds its summary."""

from skireport.models.common import WEEKDAYS, ForecastError
from skireport.models.forecast import DayResult, DaySummary


def is_valid_weekday(day: str) -> bool:
    """Case-insensitive match against the seven weekday names.

    Leading and trailing whitespace from the voice slot is ignored.
    """
    return day.strip().lower() in WEEKDAYS


def select_day(summaries: list[DaySummary], day: str) -> DayResult:
    """Return the summary for a weekday name.

    The name is validated before the lookup, so an unrecognized name is
    INVALID_DAY even when there are no summaries at all. A valid name
    outside the forecast horizon, or whose slot carries a holiday name
    instead, is NO_DATA_FOR_DAY.
    """
    if not is_valid_weekday(day):
        return DayResult(error=ForecastError.INVALID_DAY)

    wanted = day.strip().lower()
    match = next((s for s in summaries if s.day.lower() == wanted), None)
    if match is None:
        return DayResult(error=ForecastError.NO_DATA_FOR_DAY)
    return DayResult(summary=match)
