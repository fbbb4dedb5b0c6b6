"""Bootstrap: composition root do events-card.

Configura logging e conecta as implementações concretas (httpx, icalendar)
aos protocolos do use case.

Uso:
    from app.bootstrap import create_load_events_use_case, initialize_app

    settings = initialize_app()
    use_case = create_load_events_use_case(settings)
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from app.use_cases.events import LoadEventsUseCase
from config.logging import configure_logging
from config.settings import FeedSettings, get_feed_settings

logger = logging.getLogger(__name__)


def initialize_app(settings: FeedSettings | None = None) -> FeedSettings:
    """Configura logging estruturado e retorna as settings em uso.

    Raises:
        ValueError: LOG_LEVEL inválido
    """
    feed = settings or get_feed_settings()
    configure_logging(
        level=feed.log_level,
        service_name=feed.service_name,
        correlation_id_getter=get_correlation_id,
    )
    logger.debug(
        "app_initialized",
        extra={"component": "bootstrap", "feed_url": feed.feed_url},
    )
    return feed


def create_load_events_use_case(settings: FeedSettings | None = None) -> LoadEventsUseCase:
    """Monta o use case com o cliente HTTP e o decoder iCalendar reais."""
    # Import local: app não depende de api em nível de módulo
    from api.connectors.feed import create_feed_http_client
    from api.normalizers.ical import extract_raw_events

    return LoadEventsUseCase(
        fetcher=create_feed_http_client(settings),
        decoder=extract_raw_events,
    )


__all__ = ["create_load_events_use_case", "initialize_app"]
