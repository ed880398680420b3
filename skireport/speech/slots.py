"""Resort slot resolution from a voice-platform intent slot."""

import logging
from collections.abc import Callable
from typing import Any

from skireport.models.speech import ResortSlot

logger = logging.getLogger(__name__)

ER_SUCCESS_MATCH = "ER_SUCCESS_MATCH"

RecordResort = Callable[[str | None, str | None], None]


def resolve_resort_slot(
    slot: dict[str, Any] | None, record_resort: RecordResort | None = None
) -> ResortSlot:
    """Read the resolved resort id and name from a slot.

    Only an ER_SUCCESS_MATCH from the first resolution authority counts as
    resolved. When record_resort is given it is called with the id (or None)
    and the spoken value so usage can be tracked.
    """
    slot = slot or {}
    synonym_value = slot.get("value")
    resort_id = None
    resort_name = None

    authorities = (slot.get("resolutions") or {}).get("resolutionsPerAuthority") or []
    if authorities:
        authority = authorities[0] or {}
        code = (authority.get("status") or {}).get("code")
        values = authority.get("values") or []
        if code == ER_SUCCESS_MATCH and values:
            value = (values[0] or {}).get("value") or {}
            resort_id = value.get("id")
            resort_name = value.get("name")

    if record_resort is not None:
        record_resort(resort_id, synonym_value)

    logger.info(
        "Resolved resort slot: id=%s name=%s synonym=%s",
        resort_id, resort_name, synonym_value,
    )
    return ResortSlot(
        resort_id=resort_id, resort_name=resort_name, synonym_value=synonym_value
    )
