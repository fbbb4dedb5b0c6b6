"""API: camada de borda do events-card.

Responsabilidades:
- Baixar o feed iCalendar (connectors/)
- Converter o iCalendar em RawEvent (normalizers/)
- Renderizar o resultado como JSON ou cartão de terminal (payload_builders/)
- Expor a CLI (cli/)

NÃO PODE conter: classificação por role, filtro por data, orquestração de use cases.
"""
