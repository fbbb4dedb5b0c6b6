"""Connectors: adapters de borda para recursos externos.

Estrutura:
- feed/: GET do export iCalendar via httpx
"""

__all__: list[str] = []
