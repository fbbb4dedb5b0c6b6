"""Extrator de VEVENTs para RawEvent."""

from __future__ import annotations

import logging
from typing import Any

import icalendar

from app.domain.events import RawEvent
from utils.errors import InvalidCalendarError

logger = logging.getLogger(__name__)


# Escapes que a gramática desfaz em TEXT; a barra invertida fica como veio,
# senão um `\'` do feed chegaria ao normalizer como `\\'`.
_TEXT_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\r\n", "\\n"),
    ("\n", "\\n"),
    (",", "\\,"),
    (";", "\\;"),
)


def _escape_text(text: str) -> str:
    for plain, escaped in _TEXT_ESCAPES:
        text = text.replace(plain, escaped)
    return text


def _property_text(component: icalendar.Component, name: str) -> str:
    """Valor da propriedade em forma de calendário (escapada); "" se ausente."""
    value: Any = component.get(name)
    if isinstance(value, list):
        value = value[0] if value else None
    if value is None:
        return ""
    if isinstance(value, str):
        return _escape_text(str(value))
    # Datas e demais tipos: forma serializada do próprio icalendar
    return value.to_ical().decode("utf-8")


def extract_raw_events(calendar_text: str) -> list[RawEvent]:
    """Extrai os VEVENTs do calendário, na ordem em que aparecem.

    Args:
        calendar_text: Corpo do feed iCalendar

    Returns:
        Lista de RawEvent (start, summary, location, description)

    Raises:
        InvalidCalendarError: texto não é um VCALENDAR legível
    """
    try:
        calendar = icalendar.Calendar.from_ical(calendar_text)
    except ValueError as exc:
        raise InvalidCalendarError("Feed não contém um VCALENDAR válido") from exc

    raw_events = [
        RawEvent(
            start=_property_text(component, "DTSTART"),
            summary=_property_text(component, "SUMMARY"),
            location=_property_text(component, "LOCATION"),
            description=_property_text(component, "DESCRIPTION"),
        )
        for component in calendar.walk("VEVENT")
    ]
    logger.info("calendar_decoded", extra={"events_count": len(raw_events)})
    return raw_events
