"""Shared behavior for API services that wrap results in ``ApiResponse``."""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

import httpx
from pydantic import ValidationError

from api_learn.domain.exceptions import ApiError
from api_learn.domain.models import ApiResponse
from api_learn.network.client import ApiClient
from api_learn.network.errors import exception_from_response

T = TypeVar("T")


class BaseApiService:
    """Template-method base class that folds API failures into responses.

    Subclasses implement each operation as a function returning an
    ``ApiResponse``; ``_execute`` turns the exceptions raised on the way
    into ``ApiResponse.failure`` values so callers only branch on
    ``is_success``.
    """

    def __init__(self, client: ApiClient, *, logger: Optional[logging.Logger] = None) -> None:
        self._client = client
        self.logger = logger or logging.getLogger(
            f"{__name__}.{self.__class__.__name__}"
        )

    @property
    def client(self) -> ApiClient:
        return self._client

    def _execute(
        self, operation: str, action: Callable[[], ApiResponse[T]]
    ) -> ApiResponse[T]:
        try:
            return action()
        except ApiError as exc:
            self.logger.warning(
                "service_call_failed",
                extra={
                    "operation": operation,
                    "error_type": exc.__class__.__name__,
                    "status_code": exc.status_code,
                },
            )
            return ApiResponse.failure(
                exc.message,
                status_code=exc.status_code,
                error_type=exc.__class__.__name__,
            )
        except (ValidationError, ValueError) as exc:
            self.logger.warning(
                "service_payload_invalid",
                extra={"operation": operation, "error": str(exc)},
            )
            return ApiResponse.failure(
                f"An unexpected error occurred: {exc}",
                error_type="MalformedResponseError",
            )

    @staticmethod
    def _unexpected_status(response: httpx.Response, message: str) -> ApiResponse[T]:
        """Failure for a status the operation does not treat as success."""

        error = exception_from_response(response)
        return ApiResponse.failure(
            message,
            status_code=response.status_code,
            error_type=error.__class__.__name__,
        )
