"""Normalizers: conversão de formatos externos para modelos internos.

Estrutura:
- ical/: VCALENDAR → list[RawEvent]
"""

from .ical import extract_raw_events

__all__ = ["extract_raw_events"]
