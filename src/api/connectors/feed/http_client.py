"""Cliente HTTP que baixa o feed iCalendar.

Um único GET, sem retry: qualquer erro de transporte ou status não-2xx
vira FeedFetchError e aborta a execução.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from app.observability import get_correlation_id
from config.settings import FeedSettings, get_feed_settings
from utils.errors import FeedFetchError

logger = logging.getLogger(__name__)

_COMPONENT = "feed_http_client"


@dataclass
class FeedHttpClientConfig:
    """Configuração do cliente HTTP do feed."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Accept": "text/calendar, text/plain;q=0.9, */*;q=0.1"}
    )
    verify_ssl: bool = True


class FeedHttpClient:
    """Implementa FeedFetcherProtocol com httpx.AsyncClient."""

    def __init__(
        self,
        config: FeedHttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or FeedHttpClientConfig()
        self._transport = transport

    async def fetch(self, url: str) -> str:
        """Baixa o calendário e retorna o corpo como texto.

        Raises:
            FeedFetchError: erro de conexão, timeout ou status HTTP de erro
        """
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
                headers=self._config.default_headers,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            self._log_error(url, error_type=type(exc).__name__, status_code=status_code)
            raise FeedFetchError(
                f"Feed respondeu com status {status_code}",
                url=url,
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            self._log_error(url, error_type=type(exc).__name__)
            raise FeedFetchError("Falha de conexão ao baixar o feed", url=url) from exc

        logger.info(
            "feed_fetched",
            extra={
                "component": _COMPONENT,
                "status_code": response.status_code,
                "bytes": len(response.content),
            },
        )
        return response.text

    def _log_error(self, url: str, *, error_type: str, status_code: int | None = None) -> None:
        extra: dict[str, object] = {
            "component": _COMPONENT,
            "url": url,
            "error_type": error_type,
            "correlation_id": get_correlation_id(),
        }
        if status_code is not None:
            extra["status_code"] = status_code
        logger.error("feed_fetch_failed", extra=extra)


def create_feed_http_client(settings: FeedSettings | None = None) -> FeedHttpClient:
    """Factory do cliente com o timeout das settings.

    Args:
        settings: FeedSettings opcional. Se None, carrega do ambiente.
    """
    feed = settings or get_feed_settings()
    return FeedHttpClient(FeedHttpClientConfig(timeout_seconds=feed.request_timeout_seconds))
