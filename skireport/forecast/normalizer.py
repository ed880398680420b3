"""Forecast normalizer: pairs day/night periods into per-day summaries."""

from skireport.models.forecast import DaySummary, ForecastPeriod


def normalize_periods(periods: list[ForecastPeriod]) -> list[DaySummary]:
    """Collapse alternating day/night periods into one summary per day.

    When the sequence opens on a night ("Tonight") the first and last
    periods are dropped before pairing. A day with no following period in
    the list is never emitted, so every summary has both a high and a low.
    Pairing is positional; period dates are never inspected.
    """
    if not periods:
        return []

    first_is_night = not periods[0].is_daytime
    start = 1 if first_is_night else 0
    end = len(periods) - 1 if first_is_night else len(periods)

    summaries: list[DaySummary] = []
    for i in range(start, min(end, len(periods) - 1), 2):
        day, night = periods[i], periods[i + 1]
        summaries.append(
            DaySummary(
                day=day.name,
                temp_high=day.temperature,
                temp_low=night.temperature,
                short_forecast=day.short_forecast,
                detailed_forecast=day.detailed_forecast,
            )
        )
    return summaries
