"""Core utilities and security modules."""

from app.core.exceptions import (
    AppException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitExceeded,
    ValidationError,
)
from app.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
    verify_token,
)

__all__ = [
    "AppException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitExceeded",
    "ValidationError",
    "create_access_token",
    "get_password_hash",
    "verify_password",
    "verify_token",
]
