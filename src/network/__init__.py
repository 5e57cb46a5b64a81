"""
Network layer: HTTPS client, service exceptions and API headers.
"""

from .exceptions import (
    BadRequestException,
    ConflictException,
    ExceptionFactory,
    ForbiddenException,
    InternalServerException,
    NotFoundException,
    ServiceException,
    ServiceUnavailableException,
    UnauthorizedException,
)
from .headers import order_api_headers, user_api_headers
from .https import HTTPSClient, HTTPSConfig, is_valid_url

__all__ = [
    # Client
    "HTTPSClient",
    "HTTPSConfig",
    "is_valid_url",
    # Headers
    "user_api_headers",
    "order_api_headers",
    # Exceptions
    "ServiceException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
    "ServiceUnavailableException",
    "ExceptionFactory",
]
