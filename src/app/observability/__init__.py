"""Observabilidade: correlation_id por execução.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
"""

from app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
