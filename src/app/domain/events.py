"""Modelos de domínio dos eventos do feed.

RawEvent vem do decoder de iCalendar com o texto ainda escapado;
Event é o registro canônico, derivado uma única vez e imutável.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.constants.events import Role


@dataclass(frozen=True, slots=True)
class RawEvent:
    """Campos de um VEVENT como o decoder de calendário os entrega.

    Atributos:
        start: Valor de DTSTART (ex: "20240615T090000")
        summary: SUMMARY, com escapes de calendário
        location: LOCATION, com escapes de calendário
        description: DESCRIPTION, com escapes de calendário
    """

    start: str = ""
    summary: str = ""
    location: str = ""
    description: str = ""


@dataclass(frozen=True, slots=True)
class DecodedDescription:
    """Payload da descrição decodificado com sucesso (repassado como veio)."""

    payload: Any

    def _field(self, key: str) -> str:
        if not isinstance(self.payload, dict):
            return ""
        value = self.payload.get(key)
        return "" if value is None else str(value)

    @property
    def role(self) -> str:
        return self._field("role")

    @property
    def type(self) -> str:
        return self._field("type")

    def as_dict(self) -> Any:
        return self.payload


@dataclass(frozen=True, slots=True)
class MalformedDescription:
    """Marcador de falha: a descrição não é JSON válido mesmo após normalizar.

    Atributos:
        original_data: Texto pós-normalização, para diagnóstico
    """

    original_data: str

    @property
    def role(self) -> str:
        return ""

    @property
    def type(self) -> str:
        return ""

    def as_dict(self) -> dict[str, Any]:
        return {"malformedJson": True, "originalData": self.original_data}


StructuredDescription = DecodedDescription | MalformedDescription


class Event(BaseModel):
    """Evento canônico, pronto para ordenar, filtrar e apresentar."""

    model_config = ConfigDict(frozen=True)

    start: str = Field(..., pattern=r"^\d{8}$", description="Chave de data YYYYMMDD.")
    name: str = Field(default="", description="SUMMARY sem escapes.")
    location: str = Field(default="", description="LOCATION sem escapes.")
    role: Role = Field(..., description="Bucket do evento.")
    type: str = Field(default="", description="conference, meetup ou vazio.")


class EventBuckets:
    """Eventos agrupados por role.

    As chaves são sempre exatamente os membros de Role; indexar por uma
    role desconhecida levanta KeyError em vez de criar um bucket novo.
    """

    __slots__ = ("_buckets",)

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._buckets: dict[Role, list[Event]] = {role: [] for role in Role}
        for event in events:
            self.add(event)

    def add(self, event: Event) -> None:
        self._buckets[event.role].append(event)

    def __getitem__(self, role: Role) -> list[Event]:
        return self._buckets[role]

    def __iter__(self) -> Iterator[Role]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return sum(len(events) for events in self._buckets.values())

    def items(self) -> Iterator[tuple[Role, list[Event]]]:
        return iter(self._buckets.items())

    def as_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Serializa para {role: [evento, ...]} com valores JSON-compatíveis."""
        return {
            role.value: [event.model_dump(mode="json") for event in events]
            for role, events in self._buckets.items()
        }

    def __repr__(self) -> str:
        sizes = ", ".join(f"{role.value}={len(events)}" for role, events in self._buckets.items())
        return f"EventBuckets({sizes})"


__all__ = [
    "DecodedDescription",
    "Event",
    "EventBuckets",
    "MalformedDescription",
    "RawEvent",
    "StructuredDescription",
]
