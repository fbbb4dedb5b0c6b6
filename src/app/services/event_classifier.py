"""Classificação de eventos: RawEvent + descrição -> Event no bucket da role."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.events import Role
from app.domain.events import Event, EventBuckets, MalformedDescription
from app.services.description_normalizer import decode, normalize, unescape_commas
from config.logging import log_fallback
from utils.errors import InvalidEventDateError, UnknownRoleError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.events import RawEvent, StructuredDescription

logger = logging.getLogger(__name__)

DATE_KEY_LENGTH = 8


def resolve_role(value: str, *, summary: str, start: str) -> Role:
    """Mapeia o texto da descrição para uma Role conhecida.

    Raises:
        UnknownRoleError: role vazia ou fora de Role
    """
    match value:
        case Role.SPEAKER:
            return Role.SPEAKER
        case Role.HOST:
            return Role.HOST
        case Role.BOOTH:
            return Role.BOOTH
        case Role.ATTENDEE:
            return Role.ATTENDEE
        case _:
            raise UnknownRoleError(value, summary=summary, start=start)


def date_key(raw_start: str | None) -> str:
    """Extrai a chave YYYYMMDD de um DTSTART, descartando a hora."""
    return unescape_commas(raw_start)[:DATE_KEY_LENGTH]


def classify(
    raw_event: RawEvent,
    description: StructuredDescription,
    buckets: EventBuckets,
) -> Event:
    """Cria o Event canônico e o anexa ao bucket da sua role.

    Raises:
        InvalidEventDateError: DTSTART não gera 8 dígitos
        UnknownRoleError: role ausente ou desconhecida
    """
    name = unescape_commas(raw_event.summary)
    start = date_key(raw_event.start)
    if len(start) != DATE_KEY_LENGTH or not start.isdigit():
        raise InvalidEventDateError(
            f"DTSTART inválido {raw_event.start!r} no evento {name!r}",
            summary=name,
            start=raw_event.start,
        )

    event = Event(
        start=start,
        name=name,
        location=unescape_commas(raw_event.location),
        role=resolve_role(description.role, summary=name, start=start),
        type=description.type,
    )
    buckets.add(event)
    return event


def build_event_buckets(raw_events: Iterable[RawEvent]) -> EventBuckets:
    """Normaliza, decodifica e classifica todos os eventos do feed, em ordem.

    Descrições malformadas são registradas e seguem adiante com o marcador;
    o primeiro defeito de role ou data aborta o processamento.
    """
    buckets = EventBuckets()
    for raw_event in raw_events:
        description = decode(normalize(raw_event.description))
        if isinstance(description, MalformedDescription):
            log_fallback(
                logger,
                "description_decoder",
                reason="malformed_json",
                summary=unescape_commas(raw_event.summary),
                start=raw_event.start,
            )
        classify(raw_event, description, buckets)
    return buckets


__all__ = ["DATE_KEY_LENGTH", "build_event_buckets", "classify", "date_key", "resolve_role"]
