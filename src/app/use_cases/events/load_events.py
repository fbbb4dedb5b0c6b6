"""Use case: feed remoto -> buckets de eventos ordenados e filtrados.

Único ponto assíncrono é o fetch; o resto do pipeline roda em sequência.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.services.event_classifier import build_event_buckets
from app.services.event_schedule import sort_and_filter

if TYPE_CHECKING:
    from datetime import date

    from app.domain.events import EventBuckets
    from app.protocols import CalendarDecoderProtocol, FeedFetcherProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadEventsResult:
    """Resultado do carregamento.

    Atributos:
        buckets: Eventos por role, ordenados e filtrados
        decoded_count: VEVENTs lidos do feed
    """

    buckets: EventBuckets
    decoded_count: int


class LoadEventsUseCase:
    """Baixa o feed, classifica os eventos e aplica ordenação/filtro."""

    def __init__(
        self,
        *,
        fetcher: FeedFetcherProtocol,
        decoder: CalendarDecoderProtocol,
    ) -> None:
        self._fetcher = fetcher
        self._decoder = decoder

    async def execute(
        self,
        feed_url: str,
        *,
        include_historical: bool = False,
        reference_date: date | None = None,
    ) -> LoadEventsResult:
        """Executa o pipeline completo.

        Raises:
            FeedFetchError: falha de rede (sem retry)
            InvalidCalendarError: corpo não é iCalendar
            FeedDataError: role desconhecida ou DTSTART inválido
        """
        calendar_text = await self._fetcher.fetch(feed_url)
        raw_events = self._decoder(calendar_text)
        buckets = sort_and_filter(
            build_event_buckets(raw_events),
            include_historical,
            reference_date,
        )
        logger.info(
            "events_loaded",
            extra={
                "decoded_count": len(raw_events),
                "kept_count": len(buckets),
                "include_historical": include_historical,
            },
        )
        return LoadEventsResult(buckets=buckets, decoded_count=len(raw_events))
