"""
Service Exceptions — ошибки сетевого и сервисного слоя

ServiceException несёт HTTP статус и сообщение. ExceptionFactory.build()
подбирает подкласс по статусу; неизвестные статусы дают ServiceException.
"""

from http import HTTPStatus
from typing import Any, Dict, Optional, Type


class ServiceException(Exception):
    """Ошибка вызова сервиса с HTTP статусом."""

    def __init__(self, status: int, message: Optional[str] = None):
        self.status = status
        self.message = message or _default_message(status)
        super().__init__(f"{self.status}: {self.message}")

    def to_json(self) -> Dict[str, Any]:
        return {"status": self.status, "message": self.message}


def _default_message(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Service Error"


class _StatusException(ServiceException):
    STATUS: int = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__(self.STATUS, message)


class BadRequestException(_StatusException):
    STATUS = 400


class UnauthorizedException(_StatusException):
    STATUS = 401


class ForbiddenException(_StatusException):
    STATUS = 403


class NotFoundException(_StatusException):
    STATUS = 404


class ConflictException(_StatusException):
    STATUS = 409


class InternalServerException(_StatusException):
    STATUS = 500


class ServiceUnavailableException(_StatusException):
    STATUS = 503


class ExceptionFactory:
    """Фабрика исключений по HTTP статусу."""

    _BY_STATUS: Dict[int, Type[_StatusException]] = {
        cls.STATUS: cls
        for cls in (
            BadRequestException,
            UnauthorizedException,
            ForbiddenException,
            NotFoundException,
            ConflictException,
            InternalServerException,
            ServiceUnavailableException,
        )
    }

    @classmethod
    def build(cls, status: int, message: Optional[str] = None) -> ServiceException:
        """
        Построение исключения (не выбрасывает его).

        Args:
            status: HTTP статус
            message: Сообщение; None = стандартная фраза статуса

        Returns:
            Подкласс ServiceException для известного статуса, иначе ServiceException
        """
        exc_cls = cls._BY_STATUS.get(status)
        if exc_cls is None:
            return ServiceException(status, message)
        return exc_cls(message)
