"""Exceções de domínio e de infraestrutura do events-card."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (rede, transporte)."""


class FeedFetchError(InfrastructureError):
    """Falha ao baixar o feed iCalendar remoto."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FeedDataError(ValueError):
    """Base para defeitos nos dados do feed que abortam o processamento."""

    def __init__(self, message: str, *, summary: str, start: str) -> None:
        super().__init__(message)
        self.summary = summary
        self.start = start


class UnknownRoleError(FeedDataError):
    """Evento com role ausente ou fora do conjunto conhecido."""

    def __init__(self, role: str, *, summary: str, start: str) -> None:
        super().__init__(
            f"Role desconhecida {role!r} no evento {summary!r} ({start})",
            summary=summary,
            start=start,
        )
        self.role = role


class InvalidEventDateError(FeedDataError):
    """DTSTART não produz uma chave de data de 8 dígitos."""


class InvalidCalendarError(ValueError):
    """O corpo baixado não é um iCalendar legível."""
