"""
UserService — запросы/ответы User API

Сервис держит HTTPSClient (композиция) и хранилище сессии, из которого
берутся access token и client id для заголовков.

Ошибки:
- Невалидные аргументы → BadRequestException (400) до отправки запроса
- Неуспешный ответ get_account_info → исключение ExceptionFactory по статусу
- update/delete возвращают response.ok
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Final, MutableMapping, Optional, Union

import requests
from dotenv import load_dotenv

from src.core.contracts import is_user
from src.core.domain import User
from src.network import ExceptionFactory, HTTPSClient, HTTPSConfig, user_api_headers

logger = logging.getLogger(__name__)

# Ключи хранилища сессии
KEY_SESH_ACCESS_TOKEN: Final[str] = "sesh_access_token"
KEY_SESH_CLIENT_ID: Final[str] = "sesh_client_id"


# =============================================================================
# CONFIG
# =============================================================================


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class UserServiceConfig:
    """
    Конфигурация User API.

    api_url = "<api_base_url>/<api_version>" (пустые части пропускаются).
    """

    api_base_url: str = ""
    api_version: str = ""
    https: HTTPSConfig = field(default_factory=HTTPSConfig)

    @property
    def api_url(self) -> str:
        parts = [self.api_base_url.rstrip("/"), self.api_version.strip("/")]
        return "/".join(part for part in parts if part)

    @classmethod
    def from_env(cls) -> "UserServiceConfig":
        """
        Конфигурация из окружения (.env загружается через python-dotenv).

        Переменные: USER_API_URL, USER_API_VER, HTTP_TIMEOUT_SEC, HTTP_ALLOW_HTTP.
        Невалидный HTTP_TIMEOUT_SEC игнорируется (значение по умолчанию).
        """
        load_dotenv()
        defaults = HTTPSConfig()

        timeout_sec = defaults.timeout_sec
        raw_timeout = os.getenv("HTTP_TIMEOUT_SEC", "").strip()
        if raw_timeout:
            try:
                timeout_sec = float(raw_timeout)
            except ValueError:
                logger.warning("Ignoring invalid HTTP_TIMEOUT_SEC=%r", raw_timeout)

        return cls(
            api_base_url=os.getenv("USER_API_URL", "").strip(),
            api_version=os.getenv("USER_API_VER", "").strip(),
            https=HTTPSConfig(
                timeout_sec=timeout_sec,
                allow_http=_env_flag(os.getenv("HTTP_ALLOW_HTTP", "")),
                user_agent=defaults.user_agent,
            ),
        )


# =============================================================================
# SERVICE
# =============================================================================


def _response_body(response: requests.Response) -> Dict[str, Any]:
    """JSON тело ответа; {} если тело пустое или не JSON объект."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _require_username(username: Any) -> None:
    if not isinstance(username, str) or not username.strip():
        raise ExceptionFactory.build(400, "invalid username param")


class UserService:
    """Клиент User API."""

    def __init__(
        self,
        client: Optional[HTTPSClient] = None,
        config: Optional[UserServiceConfig] = None,
        session_store: Optional[MutableMapping[str, str]] = None,
    ):
        """
        Args:
            client: HTTPS клиент (по умолчанию создаётся из config.https)
            config: Конфигурация API
            session_store: Хранилище сессии с access token / client id
        """
        self.config = config or UserServiceConfig()
        self.client = client or HTTPSClient(self.config.https)
        self.session_store: MutableMapping[str, str] = (
            session_store if session_store is not None else {}
        )

    def _headers(self) -> Dict[str, str]:
        return user_api_headers(
            self.session_store.get(KEY_SESH_ACCESS_TOKEN),
            self.session_store.get(KEY_SESH_CLIENT_ID),
        )

    def get_account_info(self, username: str) -> User:
        """
        Данные учётной записи пользователя.

        Args:
            username: Идентификатор пользователя

        Returns:
            User, построенный из body["user"]

        Raises:
            ServiceException: 400 для невалидного username, иначе статус ответа
        """
        _require_username(username)

        response = self.client.post(
            requests.Request(
                "POST",
                self.config.api_url,
                headers=self._headers(),
                json={"username": username},
            )
        )
        body = _response_body(response)

        if response.ok:
            return User.from_json(body.get("user"))
        raise ExceptionFactory.build(response.status_code, body.get("message"))

    def update_account_info(self, username: str, details: Union[User, Dict[str, Any]]) -> bool:
        """
        Обновление данных учётной записи.

        Args:
            username: Идентификатор пользователя
            details: User или JSON dict (user контракт)

        Returns:
            True если сервис принял изменения

        Raises:
            BadRequestException: Невалидный username или details
        """
        _require_username(username)
        if isinstance(details, User):
            details = details.to_json()
        if not is_user(details):
            raise ExceptionFactory.build(400, "invalid user model")

        response = self.client.post(
            requests.Request(
                "POST",
                self.config.api_url,
                headers=self._headers(),
                json={"username": username, "details": details},
            )
        )
        if not response.ok:
            logger.warning("Account update for %s failed with status %d", username, response.status_code)
        return response.ok

    def delete_account(self, username: str) -> bool:
        """
        Удаление учётной записи.

        Raises:
            BadRequestException: Невалидный username
        """
        _require_username(username)

        response = self.client.delete(
            requests.Request(
                "DELETE",
                self.config.api_url,
                headers=self._headers(),
                json={"username": username},
            )
        )
        if not response.ok:
            logger.warning("Account deletion for %s failed with status %d", username, response.status_code)
        return response.ok
