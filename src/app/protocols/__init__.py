"""Protocolos e contratos do core da aplicação."""

from .calendar_decoder import CalendarDecoderProtocol
from .feed_fetcher import FeedFetcherProtocol

__all__ = [
    "CalendarDecoderProtocol",
    "FeedFetcherProtocol",
]
