"""Configuração centralizada de logging.

configure_logging() instala um único handler JSON no logger raiz.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "events_card"


def configure_logging(
    level: str = "WARNING",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configura logging JSON estruturado para a execução da CLI.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            sem diferenciar maiúsculas.
        service_name: Nome do serviço gravado em cada registro.
        correlation_id_getter: Função que retorna o correlation_id da
            execução atual (ver app.observability).
        stream: Destino dos registros. Padrão: sys.stderr.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Chamadas repetidas não duplicam saída
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo (service e correlation_id vêm do filter)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    **fields: object,
) -> None:
    """Registra que um fallback determinístico foi aplicado.

    Exemplo:
        log_fallback(logger, "description_decoder", reason="json_decode_error",
                     summary="PyCon UK")
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component, **fields}
    if reason:
        extra["reason"] = reason

    logger.warning("Fallback applied for %s", component, extra=extra)
