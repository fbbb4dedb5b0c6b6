"""Formatter JSON dos logs estruturados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem de emissão dos campos obrigatórios
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON com os campos obrigatórios renomeados.

    Exemplo de saída:
        {"asctime": "...", "level": "WARNING", "logger": "app.use_cases.load_events",
         "message": "Fallback applied for description_decoder",
         "correlation_id": "6f1c...", "service": "events_card"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
