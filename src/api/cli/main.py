"""Lista os próximos eventos do calendário como cartão de terminal ou JSON.

Uso:
    events-card              # cartão com os eventos futuros
    events-card --json       # documento JSON
    events-card -h           # inclui eventos passados

Códigos de saída: 0 em sucesso, 1 em falha de feed ou dado inválido.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import TYPE_CHECKING

from api.payload_builders.events import build_events_document, render_card, render_json
from app.bootstrap import create_load_events_use_case, initialize_app
from app.observability import reset_correlation_id, set_correlation_id
from config.settings import get_card_theme
from utils.errors import FeedDataError, FeedFetchError, InvalidCalendarError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config.settings import FeedSettings

EXIT_OK = 0
EXIT_FAILURE = 1


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    # -h é "historical": a ajuda fica só em --help
    parser = argparse.ArgumentParser(
        prog="events-card",
        description="Mostra os eventos de palestra, organização, estande e participação.",
        add_help=False,
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Emite JSON em vez do cartão formatado.",
    )
    parser.add_argument(
        "-h",
        "--historical",
        action="store_true",
        help="Inclui eventos passados.",
    )
    parser.add_argument("--help", action="help", help="Mostra esta ajuda e sai.")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: FeedSettings) -> str:
    """Executa o pipeline e devolve o texto a imprimir."""
    use_case = create_load_events_use_case(settings)
    result = await use_case.execute(settings.feed_url, include_historical=args.historical)
    if args.json:
        document = build_events_document(
            result.buckets,
            owner=settings.owner_name,
            source=settings.feed_url,
        )
        return render_json(document)
    return render_card(result.buckets, get_card_theme(), owner_name=settings.owner_name)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = initialize_app()
    token = set_correlation_id()
    try:
        output = asyncio.run(run(args, settings))
    except FeedFetchError:
        print("Não foi possível carregar o calendário", file=sys.stderr)
        return EXIT_FAILURE
    except InvalidCalendarError as exc:
        print(f"Não foi possível ler o calendário: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except FeedDataError as exc:
        print(f"Dado inválido no calendário: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        reset_correlation_id(token)
    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
