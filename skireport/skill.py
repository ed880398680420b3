"""Intent dispatcher: maps an intent and its slots to a spoken response."""

import logging
from typing import Any

from skireport.forecast.service import ForecastService
from skireport.models.common import ForecastError
from skireport.models.speech import ResortSlot, SpeechResponse
from skireport.speech import responses
from skireport.speech.slots import RecordResort, resolve_resort_slot

logger = logging.getLogger(__name__)

LAUNCH_REQUEST = "LaunchRequest"
FORECAST_TODAY_INTENT = "ForecastTodayIntent"
FORECAST_WEEK_INTENT = "ForecastWeekIntent"
FORECAST_DAY_INTENT = "ForecastDayIntent"
HELP_INTENT = "AMAZON.HelpIntent"
STOP_INTENTS = ("AMAZON.StopIntent", "AMAZON.CancelIntent")

RESORT_SLOT = "Resort"
DAY_SLOT = "Day"


class SkillHandler:
    def __init__(
        self, service: ForecastService, record_resort: RecordResort | None = None
    ):
        self.service = service
        self.record_resort = record_resort

    def handle(
        self, intent_name: str, slots: dict[str, Any] | None = None
    ) -> SpeechResponse:
        slots = slots or {}
        logger.info("Handling %s", intent_name)

        if intent_name == LAUNCH_REQUEST:
            return SpeechResponse(
                speech=responses.welcome(), reprompt=responses.help_message()
            )
        if intent_name in STOP_INTENTS:
            return SpeechResponse(speech=responses.goodbye(), end_session=True)
        if intent_name == FORECAST_TODAY_INTENT:
            return self._forecast_today(slots)
        if intent_name == FORECAST_WEEK_INTENT:
            return self._forecast_week(slots)
        if intent_name == FORECAST_DAY_INTENT:
            return self._forecast_day(slots)

        if intent_name != HELP_INTENT:
            logger.warning("Unhandled intent %s, answering with help", intent_name)
        return SpeechResponse(
            speech=responses.help_message(), reprompt=responses.help_message()
        )

    def _resort(self, slots: dict[str, Any]) -> ResortSlot:
        return resolve_resort_slot(slots.get(RESORT_SLOT), self.record_resort)

    def _forecast_today(self, slots: dict[str, Any]) -> SpeechResponse:
        resort = self._resort(slots)
        if not resort.resolved:
            return _unknown_resort(resort)

        result = self.service.forecast_today(resort.resort_id)
        if result.error is not None:
            return _error(result.error)
        return SpeechResponse(
            speech=responses.forecast_today(
                resort.resort_name, result.detailed_forecast
            ),
            end_session=True,
        )

    def _forecast_week(self, slots: dict[str, Any]) -> SpeechResponse:
        resort = self._resort(slots)
        if not resort.resolved:
            return _unknown_resort(resort)

        result = self.service.forecast_week(resort.resort_id)
        if result.error is not None:
            return _error(result.error)
        return SpeechResponse(
            speech=responses.forecast_week(resort.resort_name, result.summaries),
            end_session=True,
        )

    def _forecast_day(self, slots: dict[str, Any]) -> SpeechResponse:
        resort = self._resort(slots)
        if not resort.resolved:
            return _unknown_resort(resort)

        day = (slots.get(DAY_SLOT) or {}).get("value")
        if not day:
            return _error(ForecastError.INVALID_DAY)

        result = self.service.forecast_week_day(resort.resort_id, day)
        if result.error is not None:
            return _error(result.error)
        return SpeechResponse(
            speech=responses.forecast_day(resort.resort_name, result.summary),
            end_session=True,
        )


def _unknown_resort(resort: ResortSlot) -> SpeechResponse:
    return SpeechResponse(
        speech=responses.unknown_resort(resort.synonym_value),
        reprompt=responses.unknown_resort_reprompt(),
    )


def _error(error: ForecastError) -> SpeechResponse:
    return SpeechResponse(speech=responses.error_message(error))
