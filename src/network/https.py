"""
HTTPS Client — обёртка REST операций над requests

Клиент владеет requests.Session и проверяет запрос до отправки:
- URL: схема https (http только при allow_http) и непустой host
- POST/PUT/DELETE принимают requests.Request, метод которого совпадает с операцией

Невалидный вход → BadRequestException (400) из ExceptionFactory.
Ошибки транспорта логируются и пробрасываются как есть.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlparse

import requests

from .exceptions import ExceptionFactory

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class HTTPSConfig:
    """Конфигурация HTTPS клиента."""

    timeout_sec: float = 30.0
    allow_http: bool = False  # Только для локальной разработки
    user_agent: str = "storefront-client/1.0"


def is_valid_url(url: Any, allow_http: bool = False) -> bool:
    """
    Проверка URL сервиса.

    Args:
        url: Проверяемое значение
        allow_http: Разрешить схему http

    Returns:
        True если url — строка с допустимой схемой и host
    """
    if not isinstance(url, str) or not url:
        return False
    parsed = urlparse(url)
    schemes = {"https", "http"} if allow_http else {"https"}
    return parsed.scheme in schemes and bool(parsed.netloc)


# =============================================================================
# CLIENT
# =============================================================================


class HTTPSClient:
    """
    Синхронный HTTPS клиент для REST операций.

    Используется сервисами через композицию (UserService.client).
    """

    def __init__(
        self,
        config: Optional[HTTPSConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            config: Конфигурация клиента
            session: Готовая сессия (по умолчанию создаётся новая)
        """
        self.config = config or HTTPSConfig()
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.config.user_agent
        self._session = session

    def get(self, url: str) -> requests.Response:
        """
        GET запрос.

        Raises:
            BadRequestException: Невалидный URL
        """
        self._require_url(url)
        return self._dispatch(requests.Request("GET", url))

    def head(self, url: str) -> requests.Response:
        """
        HEAD запрос.

        Raises:
            BadRequestException: Невалидный URL
        """
        self._require_url(url)
        return self._dispatch(requests.Request("HEAD", url))

    def post(self, request: requests.Request) -> requests.Response:
        """
        POST запрос.

        Raises:
            BadRequestException: Не requests.Request, метод не POST или невалидный URL
        """
        self._require_request(request, "POST")
        return self._dispatch(request)

    def put(self, request: requests.Request) -> requests.Response:
        self._require_request(request, "PUT")
        return self._dispatch(request)

    def delete(self, request: requests.Request) -> requests.Response:
        self._require_request(request, "DELETE")
        return self._dispatch(request)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HTTPSClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # internals
    # -------------------------------------------------------------------------

    def _require_url(self, url: Any) -> None:
        if not is_valid_url(url, allow_http=self.config.allow_http):
            raise ExceptionFactory.build(400, "invalid URL")

    def _require_request(self, request: Any, method: str) -> None:
        if not isinstance(request, requests.Request) or (request.method or "").upper() != method:
            raise ExceptionFactory.build(400, "invalid request")
        self._require_url(request.url)

    def _dispatch(self, request: requests.Request) -> requests.Response:
        prepared = self._session.prepare_request(request)
        try:
            response = self._session.send(prepared, timeout=self.config.timeout_sec)
        except requests.Timeout:
            logger.error("Request timeout: %s %s", request.method, request.url)
            raise
        except requests.RequestException as e:
            logger.error("Request failed: %s %s - %s", request.method, request.url, e)
            raise

        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
        return response
