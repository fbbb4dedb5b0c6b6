"""Normalização e decodificação do payload JSON embutido em DESCRIPTION.

O feed guarda JSON dentro de um campo de texto iCalendar, que escapa
vírgulas, ponto-e-vírgulas e quebras de linha (`\\,`, `\\;`, `\\n`).
normalize() desfaz esses artefatos; decode() tenta o parse e devolve
sempre uma variante de StructuredDescription, nunca uma exceção.
"""

from __future__ import annotations

import json
import re

from app.domain.events import DecodedDescription, MalformedDescription, StructuredDescription

EMPTY_DESCRIPTION = "{}"

# `\n` aqui é o escape de calendário (barra + n), não uma quebra de linha real.
# A ordem importa: o primeiro padrão consome `\,` antes do unescape genérico.
_LINE_BREAK_COLLAPSES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\\, *\\n"), ","),
    (re.compile(r"\{ *\\n"), "{"),
    (re.compile(r"\\n *\}"), "}"),
)

_UNESCAPES: tuple[tuple[str, str], ...] = (
    ("\\,", ","),
    ("\\;", ";"),
    ("\\'", "'"),
)


def unescape_commas(text: str | None) -> str:
    """Remove o escape `\\,` de um campo de texto (None vira "")."""
    return (text or "").replace("\\,", ",")


def normalize(raw: str | None) -> str:
    """Converte a DESCRIPTION escapada em texto candidato a JSON.

    Args:
        raw: Valor bruto de DESCRIPTION (pode ser None ou vazio)

    Returns:
        Texto normalizado; "{}" quando não há descrição
    """
    text = raw or EMPTY_DESCRIPTION
    for pattern, replacement in _LINE_BREAK_COLLAPSES:
        text = pattern.sub(replacement, text)
    for escaped, plain in _UNESCAPES:
        text = text.replace(escaped, plain)
    return text


def decode(text: str) -> StructuredDescription:
    """Decodifica o texto normalizado.

    Returns:
        DecodedDescription com o valor JSON como veio, ou
        MalformedDescription carregando o texto para diagnóstico
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError):
        return MalformedDescription(original_data=text)
    return DecodedDescription(payload=payload)


__all__ = ["EMPTY_DESCRIPTION", "decode", "normalize", "unescape_commas"]
