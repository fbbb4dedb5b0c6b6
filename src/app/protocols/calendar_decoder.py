"""Protocolo do decoder de iCalendar."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.events import RawEvent


class CalendarDecoderProtocol(Protocol):
    """Converte o texto do calendário em RawEvents, na ordem do feed."""

    def __call__(self, calendar_text: str) -> list[RawEvent]: ...
