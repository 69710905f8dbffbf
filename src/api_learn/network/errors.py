"""Translate httpx responses and transport failures into ``ApiError`` subclasses."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional

import httpx

from api_learn.domain.exceptions import (
    ApiError,
    BadRequestError,
    ClientError,
    ForbiddenError,
    NetworkError,
    NetworkErrorType,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationFailedError,
)

DEFAULT_ERROR_MESSAGE = "An error occurred"

_STATUS_EXCEPTIONS: Dict[int, type[ClientError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}

_DNS_MARKERS = ("name or service not known", "nodename nor servname", "getaddrinfo")
_SSL_MARKERS = ("ssl", "certificate")


def _json_or_text(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def extract_error_message(response: httpx.Response) -> str:
    """Best-effort human readable message from an error body."""

    data = _json_or_text(response)
    if isinstance(data, str):
        return data or DEFAULT_ERROR_MESSAGE
    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            value = data.get(key)
            if value is not None:
                return str(value)
        errors = data.get("errors")
        if isinstance(errors, list):
            return ", ".join(str(item) for item in errors)
    return DEFAULT_ERROR_MESSAGE


def extract_validation_errors(response: httpx.Response) -> Dict[str, str]:
    data = _json_or_text(response)
    if not isinstance(data, dict):
        return {}
    errors = data.get("errors")
    if not isinstance(errors, dict):
        return {}
    result: Dict[str, str] = {}
    for key, value in errors.items():
        if isinstance(value, str):
            result[str(key)] = value
        elif isinstance(value, list) and value:
            result[str(key)] = str(value[0])
    return result


def parse_retry_after(
    value: Optional[str], *, now: Optional[datetime] = None
) -> Optional[datetime]:
    """Parse a ``Retry-After`` header given in seconds or as an HTTP date."""

    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        base = now or datetime.now(timezone.utc)
        return base + timedelta(seconds=int(value))
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None


def exception_from_response(response: httpx.Response) -> ApiError:
    """Map an unsuccessful HTTP response onto the error hierarchy."""

    status = response.status_code
    message = extract_error_message(response)
    context = {"url": str(response.request.url)}

    if status == 422:
        return ValidationFailedError(
            message,
            errors=extract_validation_errors(response),
            context=context,
        )
    if status == 429:
        return RateLimitError(
            message,
            retry_after=parse_retry_after(response.headers.get("retry-after")),
            context=context,
        )
    if status in _STATUS_EXCEPTIONS:
        return _STATUS_EXCEPTIONS[status](message, context=context)
    if status >= 500:
        if message == DEFAULT_ERROR_MESSAGE:
            message = ServerError.default_message
        return ServerError(message, status_code=status, context=context)
    if status >= 400:
        return ClientError(message, status_code=status, context=context)
    return ApiError(message, status_code=status, context=context)


def exception_from_transport_error(error: httpx.HTTPError) -> NetworkError:
    """Map an httpx transport failure onto ``NetworkError``."""

    context: Dict[str, Any] = {"cause": error.__class__.__name__}
    try:
        context["url"] = str(error.request.url)
    except RuntimeError:
        pass
    text = str(error).lower()

    if isinstance(error, httpx.ConnectTimeout):
        return NetworkError(
            "Connection timed out. Please check your internet connection.",
            error_type=NetworkErrorType.TIMEOUT,
            context=context,
        )
    if isinstance(error, httpx.WriteTimeout):
        return NetworkError(
            "Sending data timed out. Please try again.",
            error_type=NetworkErrorType.TIMEOUT,
            context=context,
        )
    if isinstance(error, httpx.TimeoutException):
        return NetworkError(
            "Server is taking too long to respond. Please try again.",
            error_type=NetworkErrorType.TIMEOUT,
            context=context,
        )
    if isinstance(error, httpx.ConnectError):
        if any(marker in text for marker in _SSL_MARKERS):
            return NetworkError(
                "Security certificate error. Please contact support.",
                error_type=NetworkErrorType.SSL_ERROR,
                context=context,
            )
        if any(marker in text for marker in _DNS_MARKERS):
            return NetworkError(
                "Could not resolve the server address.",
                error_type=NetworkErrorType.DNS_ERROR,
                context=context,
            )
        return NetworkError(
            "Unable to connect to server. Please check your internet connection.",
            error_type=NetworkErrorType.NO_CONNECTION,
            context=context,
        )
    if isinstance(error, (httpx.RemoteProtocolError, httpx.ReadError)):
        return NetworkError(
            "The server closed the connection unexpectedly.",
            error_type=NetworkErrorType.SERVER_UNREACHABLE,
            context=context,
        )
    return NetworkError(
        str(error) or "An unexpected error occurred.",
        error_type=NetworkErrorType.UNKNOWN,
        context=context,
    )
