"""
Сервисы внешних API.
"""

from .user_service import (
    KEY_SESH_ACCESS_TOKEN,
    KEY_SESH_CLIENT_ID,
    UserService,
    UserServiceConfig,
)

__all__ = [
    "UserService",
    "UserServiceConfig",
    "KEY_SESH_ACCESS_TOKEN",
    "KEY_SESH_CLIENT_ID",
]
