"""Speech models for intent handling."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResortSlot:
    resort_id: str | None
    resort_name: str | None
    synonym_value: str | None

    @property
    def resolved(self) -> bool:
        return bool(self.resort_id) and bool(self.resort_name)


@dataclass(frozen=True)
class SpeechResponse:
    speech: str
    reprompt: str | None = None
    end_session: bool = False
