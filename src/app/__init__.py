"""App: orquestração, casos de uso e regras do events-card.

Subpastas:
- bootstrap/: composition root (logging, wiring de httpx e icalendar)
- use_cases/: casos de uso (fetch → decode → classify → sort/filter)
- services/: normalização de descrição, classificação e agenda
- domain/: RawEvent, Event, EventBuckets
- protocols/: contratos para fetcher e decoder
- observability/: correlation_id por execução
- constants/: Role, EventType e títulos das seções

Padrão: app executa; api adapta; utils apoia.
"""
