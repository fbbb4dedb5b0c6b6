"""Builder do documento JSON de eventos."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.events import EventBuckets


def build_events_payload(buckets: EventBuckets) -> dict[str, list[dict[str, Any]]]:
    """Variante mínima: {"speaker": [...], "host": [...], "booth": [...], "attendee": [...]}."""
    return buckets.as_dict()


def build_events_document(
    buckets: EventBuckets,
    *,
    owner: str,
    source: str,
) -> dict[str, Any]:
    """Documento completo, com metadados estáticos e os buckets em "events".

    Args:
        buckets: Eventos já ordenados/filtrados
        owner: Dono do calendário (FeedSettings.owner_name)
        source: URL do feed
    """
    return {
        "owner": owner,
        "source": source,
        "events": build_events_payload(buckets),
    }


def render_json(document: dict[str, Any]) -> str:
    """Serializa o documento com indentação estável."""
    return json.dumps(document, indent=2, ensure_ascii=False)
