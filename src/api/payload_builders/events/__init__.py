"""Presenters do cartão de eventos: documento JSON e cartão de terminal."""

from .json_document import build_events_document, build_events_payload, render_json
from .terminal_card import render_card

__all__ = [
    "build_events_document",
    "build_events_payload",
    "render_card",
    "render_json",
]
