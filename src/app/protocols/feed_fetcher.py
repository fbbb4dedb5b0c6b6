"""Protocolo do fetcher do feed iCalendar.

Evita dependência direta do app na camada api/connectors.
"""

from __future__ import annotations

from typing import Protocol


class FeedFetcherProtocol(Protocol):
    """Contrato mínimo: baixar o texto bruto do calendário.

    Implementações levantam FeedFetchError em qualquer falha de transporte.
    """

    async def fetch(self, url: str) -> str: ...
