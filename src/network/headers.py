"""
API Headers — заголовки запросов к User/Order API

authorization и client-id добавляются только если значения заданы.
"""

from typing import Dict, Optional

JSON_MEDIA_TYPE = "application/json"


def _api_headers(token: Optional[str], client_id: Optional[str]) -> Dict[str, str]:
    headers = {
        "accept": JSON_MEDIA_TYPE,
        "content-type": JSON_MEDIA_TYPE,
    }
    if token:
        headers["authorization"] = f"Bearer {token}"
    if client_id:
        headers["client-id"] = client_id
    return headers


def user_api_headers(token: Optional[str], client_id: Optional[str]) -> Dict[str, str]:
    """
    Заголовки для User API.

    Args:
        token: Access token сессии
        client_id: Идентификатор клиента сессии

    Returns:
        dict заголовков
    """
    return _api_headers(token, client_id)


def order_api_headers(token: Optional[str], client_id: Optional[str]) -> Dict[str, str]:
    """Заголовки для Order API (тот же набор, что и для User API)."""
    return _api_headers(token, client_id)
