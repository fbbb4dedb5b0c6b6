"""Tema do cartão de terminal.

O mapeamento tipo de evento -> estilo e configuração, não estado global:
o presenter recebe o CardTheme explicitamente.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

# Sequências SGR (ANSI)
RESET = "\033[0m"
BOLD = "\033[1m"
UNDERLINE = "\033[4m"
INVERSE = "\033[7m"
GRAY = "\033[90m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"


def _default_type_styles() -> dict[str, str]:
    return {"conference": YELLOW, "meetup": CYAN}


def _default_legend_labels() -> dict[str, str]:
    return {"conference": " Conference ", "meetup": " Meetup "}


class CardTheme(BaseModel):
    """Estilos do cartão de eventos."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type_styles: dict[str, str] = Field(
        default_factory=_default_type_styles,
        description="Estilo ANSI por tipo de evento (conference, meetup).",
    )
    default_style: str = Field(
        default=CYAN,
        description="Estilo para tipos fora do mapeamento (mesmo de meetup).",
    )
    heading_style: str = Field(default=BOLD + GREEN, description="Títulos das seções.")
    legend_style: str = Field(default=UNDERLINE, description="Rótulo da legenda.")
    border_style: str = Field(default=GRAY, description="Cor da moldura.")
    legend_labels: dict[str, str] = Field(
        default_factory=_default_legend_labels,
        description="Rótulos da legenda por tipo (a ordem segue EventType).",
    )
    color_enabled: bool = Field(default=True, description="False desliga todo ANSI.")

    def style_for(self, event_type: str) -> str:
        """Retorna o estilo ANSI do tipo de evento."""
        return self.type_styles.get(event_type, self.default_style)

    def paint(self, text: str, style: str) -> str:
        """Aplica o estilo ao texto (no-op com cores desligadas)."""
        if not self.color_enabled or not style:
            return text
        return f"{style}{text}{RESET}"


def _load_card_theme_from_env() -> CardTheme:
    """Carrega CardTheme respeitando a convenção NO_COLOR."""
    return CardTheme(color_enabled=os.getenv("NO_COLOR") is None)


@lru_cache(maxsize=1)
def get_card_theme() -> CardTheme:
    """Retorna instância cacheada de CardTheme."""
    return _load_card_theme_from_env()


__all__ = ["INVERSE", "RESET", "CardTheme", "get_card_theme"]
