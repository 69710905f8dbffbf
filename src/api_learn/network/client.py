"""Shared HTTP client wrapping ``httpx.Client`` with retries and interceptors."""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Mapping, Optional, Sequence

import httpx

from api_learn.core.config import AppConfig
from api_learn.core.middleware import InterceptorChain
from api_learn.domain.interfaces import IInterceptor
from api_learn.network.errors import exception_from_response, exception_from_transport_error

RETRY_STATUS_CODES = frozenset({408, 500, 502, 503, 504})


def build_timeout(config: AppConfig, *, upload: bool = False) -> httpx.Timeout:
    if upload:
        return httpx.Timeout(
            connect=config.connect_timeout,
            read=config.upload_timeout,
            write=config.upload_timeout,
            pool=config.connect_timeout,
        )
    return httpx.Timeout(
        connect=config.connect_timeout,
        read=config.receive_timeout,
        write=config.send_timeout,
        pool=config.connect_timeout,
    )


class ApiClient:
    """Single entry point for every HTTP call made by the services.

    Responses with a status below 500 are returned to the caller, which
    decides what the status means. Server errors and transport failures
    are retried with exponential backoff and raise once retries run out.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        config: AppConfig,
        *,
        interceptors: Optional[Sequence[IInterceptor]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._http = http_client
        self.config = config
        self._chain = InterceptorChain(interceptors or [])
        self.logger = logger or logging.getLogger(__name__)

    @property
    def interceptors(self) -> InterceptorChain:
        return self._chain

    def get(self, path: str, *, params: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        *,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        return self.request("POST", path, json=json, params=params)

    def put(self, path: str, *, json: Any = None) -> httpx.Response:
        return self.request("PUT", path, json=json)

    def patch(self, path: str, *, json: Any = None) -> httpx.Response:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str, *, params: Optional[Mapping[str, Any]] = None) -> httpx.Response:
        return self.request("DELETE", path, params=params)

    def upload(
        self,
        url: str,
        *,
        files: Any,
        data: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """POST multipart form data with the extended upload timeout."""

        return self.request(
            "POST",
            url,
            files=files,
            data=data,
            headers={"Accept": "application/json"},
            timeout=build_timeout(self.config, upload=True),
            multipart=True,
        )

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[httpx.Timeout] = None,
        multipart: bool = False,
    ) -> httpx.Response:
        request_headers = dict(self.config.headers)
        if multipart:
            # httpx sets the multipart boundary itself
            request_headers.pop("Content-Type", None)
        if headers:
            request_headers.update(headers)

        request = self._http.build_request(
            method,
            self._resolve_url(path),
            params=dict(params) if params else None,
            json=json,
            data=dict(data) if data else None,
            files=files,
            headers=request_headers,
            timeout=timeout or build_timeout(self.config),
        )
        return self._chain.execute(request, self._send_with_retry)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _resolve_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _send_with_retry(self, request: httpx.Request) -> httpx.Response:
        max_retries = self.config.max_retries
        for attempt in range(max_retries + 1):
            try:
                response = self._http.send(request)
            except httpx.TransportError as exc:
                error = exception_from_transport_error(exc)
                if attempt < max_retries and self._is_retryable_transport(exc):
                    delay = self._backoff_delay(attempt)
                    self.logger.warning(
                        "api_retry",
                        extra={
                            "attempt": attempt + 1,
                            "max_retries": max_retries,
                            "delay": delay,
                            "url": str(request.url),
                            "reason": exc.__class__.__name__,
                        },
                    )
                    self._sleep(delay)
                    continue
                self.logger.error(
                    "api_transport_error",
                    extra={"url": str(request.url), "error_type": error.error_type.value},
                )
                raise error from exc

            if response.status_code in RETRY_STATUS_CODES and attempt < max_retries:
                response.close()
                delay = self._backoff_delay(attempt)
                self.logger.warning(
                    "api_retry",
                    extra={
                        "attempt": attempt + 1,
                        "max_retries": max_retries,
                        "delay": delay,
                        "url": str(request.url),
                        "reason": response.status_code,
                    },
                )
                self._sleep(delay)
                continue

            if response.status_code >= 500:
                response.read()
                error = exception_from_response(response)
                self.logger.error(
                    "api_server_error",
                    extra={"url": str(request.url), "status_code": response.status_code},
                )
                raise error
            return response

        raise RuntimeError("retry loop exited without a response")  # pragma: no cover

    @staticmethod
    def _is_retryable_transport(error: httpx.TransportError) -> bool:
        if isinstance(error, httpx.WriteTimeout):
            return False
        return isinstance(error, (httpx.TimeoutException, httpx.ConnectError))

    def _backoff_delay(self, attempt: int) -> float:
        return self.config.retry_delay * math.pow(2, attempt)

    def _sleep(self, delay: float) -> None:
        time.sleep(delay)
