"""Common types shared across models."""

from enum import StrEnum

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


class ForecastError(StrEnum):
    NOT_SUPPORTED = "NOT_SUPPORTED"
    TERMINAL_ERROR = "TERMINAL_ERROR"
    INVALID_DAY = "INVALID_DAY"
    NO_DATA_FOR_DAY = "NO_DATA_FOR_DAY"
