"""Exception hierarchy for navigation, dependency and HTTP failures."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


class ApiLearnError(Exception):
    """Base class for all errors raised by the application."""

    default_message = "Application error occurred"

    def __init__(
        self, message: str | None = None, *, context: Mapping[str, Any] | None = None
    ):
        self.message = message or self.default_message
        self.context: Mapping[str, Any] = dict(context or {})
        formatted = self._format_message()
        super().__init__(formatted)

    def _format_message(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class NavigationError(ApiLearnError):
    """Invalid navigation such as popping the root route."""

    default_message = "Navigation error"


class RouteNotFoundError(NavigationError):
    """Raised when a route name is not present in the route table."""

    default_message = "Route not found"

    def __init__(self, name: str, message: str | None = None) -> None:
        self.route_name = name
        super().__init__(
            message or f"No route registered for '{name}'",
            context={"route": name},
        )


class DependencyError(ApiLearnError):
    """Failures inside the dependency container."""

    default_message = "Dependency error"


class DependencyNotFoundError(DependencyError):
    """Raised when a type is looked up that was never registered."""

    default_message = "Dependency not registered"


class NetworkErrorType(str, Enum):
    """Categories of transport-level failures."""

    NO_CONNECTION = "no_connection"
    TIMEOUT = "timeout"
    SERVER_UNREACHABLE = "server_unreachable"
    DNS_ERROR = "dns_error"
    SSL_ERROR = "ssl_error"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class ApiError(ApiLearnError):
    """Base class for failures produced while talking to the HTTP API."""

    default_message = "An unexpected error occurred."
    default_status: Optional[int] = None

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: Optional[int] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code if status_code is not None else self.default_status
        merged = dict(context or {})
        if self.status_code is not None:
            merged.setdefault("status_code", self.status_code)
        super().__init__(message, context=merged)


class NetworkError(ApiError):
    """The request never produced an HTTP response."""

    default_message = "Unable to connect to server. Please check your internet connection."

    def __init__(
        self,
        message: str | None = None,
        *,
        error_type: NetworkErrorType = NetworkErrorType.UNKNOWN,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.error_type = error_type
        merged = dict(context or {})
        merged.setdefault("error_type", error_type.value)
        super().__init__(message, context=merged)


class ServerError(ApiError):
    """5xx responses."""

    default_message = "Server error occurred. Please try again later."
    default_status = 500


class ClientError(ApiError):
    """4xx responses without a more specific subclass."""

    default_message = "Request failed."


class BadRequestError(ClientError):
    default_message = "Bad request. Please check your input."
    default_status = 400


class UnauthorizedError(ClientError):
    default_message = "Authentication required. Please log in."
    default_status = 401


class ForbiddenError(ClientError):
    default_message = "You do not have permission to access this resource."
    default_status = 403


class NotFoundError(ClientError):
    default_message = "The requested resource was not found."
    default_status = 404


class ValidationFailedError(ClientError):
    """422 responses, optionally carrying per-field messages."""

    default_message = "Validation failed. Please check your input."
    default_status = 422

    def __init__(
        self,
        message: str | None = None,
        *,
        errors: Mapping[str, str] | None = None,
        status_code: Optional[int] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.errors: dict[str, str] = dict(errors or {})
        super().__init__(message, status_code=status_code, context=context)

    def get_field_error(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)

    def has_field_error(self, field_name: str) -> bool:
        return field_name in self.errors

    def _format_message(self) -> str:
        formatted = super()._format_message()
        if self.errors:
            return f"{formatted} | errors={self.errors}"
        return formatted


class RateLimitError(ClientError):
    """429 responses; ``retry_after`` is parsed from the response header."""

    default_message = "Too many requests. Please try again later."
    default_status = 429

    def __init__(
        self,
        message: str | None = None,
        *,
        retry_after: Optional[datetime] = None,
        status_code: Optional[int] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(message, status_code=status_code, context=context)
