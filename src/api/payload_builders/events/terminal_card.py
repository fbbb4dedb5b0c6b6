"""Cartão de terminal com moldura dupla, no estilo `npx <nome>`.

O tema (cores por tipo de evento, títulos, moldura) chega por parâmetro;
nada aqui lê configuração global.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

from app.constants.events import ROLE_HEADINGS, EventType
from config.settings.card import INVERSE

if TYPE_CHECKING:
    from app.domain.events import Event, EventBuckets
    from config.settings import CardTheme

NAME_WIDTH = 50
LOCATION_WIDTH = 30

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

# Moldura "double"
_TOP_LEFT, _TOP_RIGHT = "╔", "╗"
_BOTTOM_LEFT, _BOTTOM_RIGHT = "╚", "╝"
_HORIZONTAL, _VERTICAL = "═", "║"


def visible_width(text: str) -> int:
    """Largura exibida, ignorando sequências ANSI."""
    return len(_ANSI_RE.sub("", text))


def fit(text: str, width: int) -> str:
    """Completa com espaços ou corta para exatamente `width` caracteres."""
    return text.ljust(width)[:width]


def format_event_date(start: str) -> str:
    """Formata a chave de data: "20240615" -> "Sat 15 Jun 2024".

    Não protege contra chaves inválidas: o erro deve aparecer.
    """
    return datetime.strptime(start, "%Y%m%d").strftime("%a %d %b %Y")


def render_event_line(event: Event, theme: CardTheme) -> str:
    style = theme.style_for(event.type)
    return "  ".join(
        (
            theme.paint(format_event_date(event.start), style),
            "-",
            theme.paint(fit(event.location, LOCATION_WIDTH), style),
            theme.paint(fit(event.name, NAME_WIDTH), style),
        )
    )


def render_legend(theme: CardTheme) -> str:
    parts = [theme.paint("Key:", theme.legend_style + INVERSE)]
    parts.extend(
        theme.paint(theme.legend_labels[event_type], theme.style_for(event_type) + INVERSE)
        for event_type in EventType
        if event_type in theme.legend_labels
    )
    return " ".join(parts)


def build_card_lines(buckets: EventBuckets, theme: CardTheme, owner_name: str = "") -> list[str]:
    """Linhas de conteúdo: uma seção por bucket não vazio e a legenda."""
    lines: list[str] = []
    for role, events in buckets.items():
        if not events:
            continue
        heading = ROLE_HEADINGS[role]
        if owner_name:
            heading = f"{owner_name}'s {heading}"
        lines.extend([theme.paint(heading, theme.heading_style), ""])
        lines.extend(render_event_line(event, theme) for event in events)
        lines.append("")
    if not lines:
        lines.extend(["No upcoming events.", ""])
    lines.extend(["", render_legend(theme)])
    return lines


def draw_box(lines: list[str], theme: CardTheme, *, padding: int = 1, margin: int = 1) -> str:
    """Desenha a moldura em volta das linhas.

    padding/margin seguem a convenção de terminal: n linhas na vertical,
    3n colunas na horizontal.
    """
    content_width = max((visible_width(line) for line in lines), default=0)
    inner_width = content_width + 6 * padding
    side_pad = " " * (3 * padding)
    indent = " " * (3 * margin)
    vertical = theme.paint(_VERTICAL, theme.border_style)

    def row(text: str) -> str:
        fill = " " * (content_width - visible_width(text))
        return f"{indent}{vertical}{side_pad}{text}{fill}{side_pad}{vertical}"

    blank_rows = [row("")] * padding
    box = [
        indent + theme.paint(_TOP_LEFT + _HORIZONTAL * inner_width + _TOP_RIGHT, theme.border_style),
        *blank_rows,
        *(row(line) for line in lines),
        *blank_rows,
        indent
        + theme.paint(_BOTTOM_LEFT + _HORIZONTAL * inner_width + _BOTTOM_RIGHT, theme.border_style),
    ]
    margin_rows = [""] * margin
    return "\n".join([*margin_rows, *box, *margin_rows])


def render_card(buckets: EventBuckets, theme: CardTheme, *, owner_name: str = "") -> str:
    """Renderiza o cartão completo pronto para stdout."""
    return draw_box(build_card_lines(buckets, theme, owner_name), theme)
