"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FeedDataError,
    FeedFetchError,
    InfrastructureError,
    InvalidCalendarError,
    InvalidEventDateError,
    UnknownRoleError,
)

__all__ = [
    "FeedDataError",
    "FeedFetchError",
    "InfrastructureError",
    "InvalidCalendarError",
    "InvalidEventDateError",
    "UnknownRoleError",
]
