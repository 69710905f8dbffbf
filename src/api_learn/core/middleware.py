"""Interceptor system for cross-cutting HTTP concerns."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence

import httpx

from api_learn.domain.interfaces import IInterceptor, ITokenProvider

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key", "token"})
MAX_LOGGED_BODY = 1000
HIDDEN = "***HIDDEN***"
CACHED_RESPONSE = "api_learn.cached_response"
FROM_CACHE = "api_learn.from_cache"


def mask_headers(headers: httpx.Headers) -> dict[str, str]:
    return {
        key: HIDDEN if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _truncate(text: str) -> str:
    if len(text) > MAX_LOGGED_BODY:
        return f"{text[:MAX_LOGGED_BODY]}...[truncated]"
    return text


def _request_body(request: httpx.Request) -> Optional[str]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("multipart/"):
        return "<multipart form data>"
    try:
        raw = request.content
    except httpx.RequestNotRead:
        return "<streaming body>"
    if not raw:
        return None
    return _truncate(raw.decode("utf-8", errors="replace"))


def _response_body(response: httpx.Response) -> Optional[str]:
    try:
        data: Any = response.json()
    except (ValueError, httpx.ResponseNotRead):
        try:
            text = response.text
        except httpx.ResponseNotRead:
            return None
        return _truncate(text) if text else None
    return _truncate(json.dumps(data, ensure_ascii=False))


class LoggingInterceptor(IInterceptor):
    """Logs outbound requests and inbound responses."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        log_headers: bool = True,
        log_body: bool = True,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._log_headers = log_headers
        self._log_body = log_body

    def process_request(self, request: httpx.Request) -> httpx.Request:
        extra: dict[str, Any] = {"method": request.method, "url": str(request.url)}
        if self._log_headers:
            extra["headers"] = mask_headers(request.headers)
        if self._log_body:
            extra["body"] = _request_body(request)
        self._logger.info("api_request", extra=extra)
        return request

    def process_response(self, response: httpx.Response) -> httpx.Response:
        extra: dict[str, Any] = {
            "status_code": response.status_code,
            "url": str(response.request.url),
        }
        if self._log_headers:
            extra["headers"] = mask_headers(response.headers)
        if self._log_body:
            extra["body"] = _response_body(response)
        self._logger.info("api_response", extra=extra)
        return response


class AuthInterceptor(IInterceptor):
    """Adds a bearer token to requests and reports 401 responses."""

    def __init__(
        self,
        token_provider: ITokenProvider,
        *,
        on_auth_failure: Callable[[httpx.Response], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._token_provider = token_provider
        self._on_auth_failure = on_auth_failure
        self._logger = logger or logging.getLogger(__name__)

    def process_request(self, request: httpx.Request) -> httpx.Request:
        token = self._token_provider()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
            self._logger.debug("auth_token_added", extra={"url": str(request.url)})
        return request

    def process_response(self, response: httpx.Response) -> httpx.Response:
        if response.status_code == 401:
            self._logger.warning(
                "auth_rejected", extra={"url": str(response.request.url)}
            )
            if self._on_auth_failure is not None:
                self._on_auth_failure(response)
        return response


@dataclass(frozen=True)
class _CacheEntry:
    content: bytes
    content_type: Optional[str]
    stored_at: float


class CacheInterceptor(IInterceptor):
    """In-memory cache for successful GET responses, keyed by full URL.

    A hit is attached to the request under ``CACHED_RESPONSE``;
    ``InterceptorChain`` then answers with it instead of sending.
    """

    def __init__(
        self,
        *,
        max_age: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
        logger: logging.Logger | None = None,
    ) -> None:
        self._entries: Dict[str, _CacheEntry] = {}
        self._max_age = max_age
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._entries)

    def process_request(self, request: httpx.Request) -> httpx.Request:
        if request.method != "GET":
            return request
        key = str(request.url)
        entry = self._entries.get(key)
        if entry is None:
            return request
        if self._clock() - entry.stored_at > self._max_age:
            del self._entries[key]
            return request
        headers = {"content-type": entry.content_type} if entry.content_type else None
        request.extensions[CACHED_RESPONSE] = httpx.Response(
            200,
            content=entry.content,
            headers=headers,
            request=request,
            extensions={FROM_CACHE: True},
        )
        self._logger.debug("cache_hit", extra={"url": key})
        return request

    def process_response(self, response: httpx.Response) -> httpx.Response:
        request = response.request
        if (
            request.method == "GET"
            and response.status_code == 200
            and not response.extensions.get(FROM_CACHE)
        ):
            key = str(request.url)
            self._entries[key] = _CacheEntry(
                content=response.content,
                content_type=response.headers.get("content-type"),
                stored_at=self._clock(),
            )
            self._logger.debug("cache_stored", extra={"url": key})
        return response

    def clear(self) -> None:
        self._entries.clear()
        self._logger.info("cache_cleared")

    def invalidate(self, url: str) -> bool:
        removed = self._entries.pop(url, None) is not None
        self._logger.debug("cache_invalidated", extra={"url": url, "removed": removed})
        return removed


class InterceptorChain:
    """Applies interceptors around a send function using chain of responsibility."""

    def __init__(self, interceptors: Sequence[IInterceptor]) -> None:
        self._interceptors = list(interceptors)

    def __len__(self) -> int:
        return len(self._interceptors)

    def add(self, interceptor: IInterceptor) -> None:
        self._interceptors.append(interceptor)

    def execute(
        self,
        request: httpx.Request,
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> httpx.Response:
        for interceptor in self._interceptors:
            request = interceptor.process_request(request)

        cached = request.extensions.pop(CACHED_RESPONSE, None)
        response = cached if cached is not None else handler(request)

        for interceptor in reversed(self._interceptors):
            response = interceptor.process_response(response)

        return response
