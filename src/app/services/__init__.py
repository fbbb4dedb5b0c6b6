"""Serviços de aplicação.

Unidades puras (sem IO): normalização de DESCRIPTION, classificação por role
e ordenação/filtro por data.
"""

from app.services.description_normalizer import decode, normalize, unescape_commas
from app.services.event_classifier import build_event_buckets, classify, resolve_role
from app.services.event_schedule import sort_and_filter, today_key

__all__ = [
    "build_event_buckets",
    "classify",
    "decode",
    "normalize",
    "resolve_role",
    "sort_and_filter",
    "today_key",
    "unescape_commas",
]
