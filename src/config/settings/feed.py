"""Settings do feed iCalendar e da execução da CLI.

Centralizar a leitura de env aqui evita espalhar parse de configuração
pelos conectores e pela CLI.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FEED_URL = (
    "https://cloud.priva.si/remote.php/dav/public-calendars/XRoYgPaKkJ88mXYp?export"
)


class FeedSettings(BaseModel):
    """Configurações de origem do calendário e de observabilidade da CLI."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    feed_url: str = Field(
        default=DEFAULT_FEED_URL,
        min_length=1,
        description="URL pública do export iCalendar.",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout total do GET do feed em segundos.",
    )
    owner_name: str = Field(
        default="Ben",
        description="Nome exibido nos títulos do cartão e no documento JSON.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nível de log (stdout fica reservado para a saída da CLI).",
    )
    service_name: str = Field(
        default="events_card",
        description="Nome do serviço nos logs estruturados.",
    )


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_feed_from_env() -> FeedSettings:
    """Carrega FeedSettings a partir de variáveis de ambiente."""
    return FeedSettings(
        feed_url=_read_optional_env("FEED_URL") or DEFAULT_FEED_URL,
        request_timeout_seconds=float(os.getenv("FEED_REQUEST_TIMEOUT_SECONDS", "30")),
        owner_name=_read_optional_env("EVENTS_OWNER_NAME") or "Ben",
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        service_name=os.getenv("SERVICE_NAME", "events_card"),
    )


@lru_cache(maxsize=1)
def get_feed_settings() -> FeedSettings:
    """Retorna instância cacheada de FeedSettings."""
    return _load_feed_from_env()


__all__ = ["DEFAULT_FEED_URL", "FeedSettings", "get_feed_settings"]
