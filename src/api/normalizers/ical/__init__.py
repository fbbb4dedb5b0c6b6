"""Normalizer iCalendar: extração de VEVENTs do feed.

Usa a gramática da biblioteca icalendar e entrega RawEvents com o texto
ainda no formato escapado do calendário; desfazer os escapes é trabalho
de app.services.description_normalizer.
"""

from .extractor import extract_raw_events

__all__ = ["extract_raw_events"]
