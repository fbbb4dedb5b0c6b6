"""Use cases do cartão de eventos."""

from .load_events import LoadEventsResult, LoadEventsUseCase

__all__ = ["LoadEventsResult", "LoadEventsUseCase"]
