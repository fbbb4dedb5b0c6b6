"""Agregador de settings do events-card.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

from config.settings.card import CardTheme, get_card_theme
from config.settings.feed import DEFAULT_FEED_URL, FeedSettings, get_feed_settings

__all__ = [
    "DEFAULT_FEED_URL",
    "CardTheme",
    "FeedSettings",
    "get_card_theme",
    "get_feed_settings",
]
