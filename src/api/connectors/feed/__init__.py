"""Connector HTTP do feed iCalendar."""

from .http_client import FeedHttpClient, FeedHttpClientConfig, create_feed_http_client

__all__ = ["FeedHttpClient", "FeedHttpClientConfig", "create_feed_http_client"]
