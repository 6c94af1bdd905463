"""Custom application exceptions."""

from typing import Any

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception.

    Rendered as ``{"name", "message", "detail"}``. ``message`` is always the
    human-readable text. ``detail`` repeats it unless the error carries
    structured ``errors`` (field-level validation failures), which then
    take its place.
    """

    name = "ApplicationError"

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.errors = errors
        super().__init__(status_code=status_code, detail=detail, headers=headers)

    def to_dict(self) -> dict[str, Any]:
        """Structured error body returned to clients."""
        return {
            "name": self.name,
            "message": self.detail,
            "detail": self.errors if self.errors is not None else self.detail,
        }


class ValidationError(AppException):
    """Validation error exception."""

    name = "InvalidDataError"

    def __init__(self, detail: str = "Validation failed", errors: list[dict[str, Any]] | None = None) -> None:
        # Starlette renamed the 422 constant; the literal works on every release.
        super().__init__(status_code=422, detail=detail, errors=errors)


class NotFoundError(AppException):
    """Resource not found exception."""

    name = "NotFoundError"

    def __init__(self, resource: str = "Resource", identifier: str | None = None) -> None:
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class AuthenticationError(AppException):
    """Authentication failed exception."""

    name = "UnauthorizedError"

    def __init__(self, detail: str = "You must be signed in to continue") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(AppException):
    """Authorization denied exception."""

    name = "ForbiddenError"

    def __init__(self, detail: str = "You don't have permission to access this resource") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class RateLimitExceeded(AppException):
    """Rate limit exceeded exception."""

    name = "RateLimitError"

    def __init__(self, detail: str = "Too many requests. Please try again later.") -> None:
        super().__init__(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=detail)
