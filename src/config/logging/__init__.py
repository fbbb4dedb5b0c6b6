"""Logging estruturado (JSON) do events-card.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, na CLI
    configure_logging(level="WARNING", service_name="events_card")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("feed_fetched", extra={"bytes": 2048})

Todo registro carrega asctime, level, logger, message, correlation_id e service.
Os logs vão para stderr: stdout é reservado para o cartão ou o JSON.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
