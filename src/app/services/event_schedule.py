"""Ordenação e filtro temporal dos buckets de eventos."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from app.domain.events import EventBuckets

if TYPE_CHECKING:
    from app.domain.events import Event


def today_key(reference_date: date | None = None) -> str:
    """Chave YYYYMMDD da data local (ou da data de referência)."""
    return (reference_date or date.today()).strftime("%Y%m%d")


def _by_start(event: Event) -> str:
    # Chaves de 8 dígitos com zero à esquerda: ordem de texto == ordem numérica
    return event.start


def sort_and_filter(
    buckets: EventBuckets,
    include_historical: bool,
    reference_date: date | None = None,
) -> EventBuckets:
    """Ordena cada bucket por data e, opcionalmente, descarta o passado.

    Sem include_historical, mantém apenas eventos com start > hoje:
    eventos do próprio dia ficam de fora.

    Returns:
        Novo EventBuckets; a entrada não é alterada
    """
    cutoff = None if include_historical else today_key(reference_date)
    result = EventBuckets()
    for _role, events in buckets.items():
        # sorted() é estável: eventos do mesmo dia mantêm a ordem do feed
        for event in sorted(events, key=_by_start):
            if cutoff is None or event.start > cutoff:
                result.add(event)
    return result


__all__ = ["sort_and_filter", "today_key"]
