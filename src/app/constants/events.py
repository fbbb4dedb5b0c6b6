"""Enums de domínio dos eventos do calendário."""

from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Papel do dono do calendário no evento. A ordem define a ordem dos buckets."""

    SPEAKER = "speaker"
    HOST = "host"
    BOOTH = "booth"
    ATTENDEE = "attendee"


class EventType(StrEnum):
    """Tipo do evento, usado apenas para escolher o estilo no cartão."""

    CONFERENCE = "conference"
    MEETUP = "meetup"


# Títulos das seções do cartão, por role
ROLE_HEADINGS: dict[Role, str] = {
    Role.SPEAKER: "Speaking Events",
    Role.HOST: "Hosting Events",
    Role.BOOTH: "Booth Events",
    Role.ATTENDEE: "Attending Events",
}
