"""Controller for the error handling screen."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, List, Optional

from api_learn.domain.exceptions import ApiError
from api_learn.network.client import ApiClient
from api_learn.services.post_service import PostApiService

from .base import Controller
from .status import StatusKind

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer

MISSING_POST_ID = 999_999
INVALID_ENDPOINT = "/this-endpoint-does-not-exist"


class ErrorHandlingController(Controller):
    """Runs canned requests that succeed, miss or fail, and reports the outcome."""

    def __init__(
        self,
        post_service: PostApiService,
        client: ApiClient,
        *,
        step_delay: float = 0.0,
    ) -> None:
        super().__init__()
        self._post_service = post_service
        self._client = client
        self._step_delay = step_delay
        self.is_loading = False
        self.status = StatusKind.IDLE
        self.status_message: Optional[str] = None
        self.steps: List[str] = []

    @classmethod
    def _build(cls, container: "DependencyContainer") -> "ErrorHandlingController":
        return cls(container.find(PostApiService), container.find(ApiClient))

    def test_successful_request(self) -> None:
        self._start_loading()
        response = self._post_service.get_post_by_id(1)
        self.is_loading = False
        if response.is_success and response.has_data:
            post = response.data
            self._set(
                StatusKind.SUCCESS,
                f"Success!\nStatus Code: {response.status_code}\n"
                f"Post Title: {post.title}\nUser ID: {post.user_id}",
            )
        else:
            self._set_error(response.error.message if response.error else "Failed")

    def test_not_found(self) -> None:
        self._start_loading()
        self.status_message = "Requesting non-existent post..."
        response = self._post_service.get_post_by_id(MISSING_POST_ID)
        self.is_loading = False
        if not response.is_success:
            error = response.error
            self._set(
                StatusKind.WARNING,
                f"Not Found!\nStatus Code: {response.status_code}\n"
                f"Error Type: {error.type if error else 'UnknownError'}\n"
                f"Message: {error.message if error else response.message}",
            )
        else:
            self._set(StatusKind.SUCCESS, "Unexpectedly succeeded!")

    def test_invalid_endpoint(self) -> None:
        self._start_loading()
        self.status_message = "Requesting invalid endpoint..."
        try:
            response = self._client.get(INVALID_ENDPOINT)
        except ApiError as exc:
            self.is_loading = False
            self._set(
                StatusKind.ERROR,
                f"Error!\nException Type: {type(exc).__name__}\nMessage: {exc.message}",
            )
            return
        self.is_loading = False
        self._set(
            StatusKind.WARNING,
            f"Request completed with status {response.status_code} "
            "(may have returned empty data)",
        )

    def test_network_request(self) -> None:
        """Walk through the stages of a request, recording each step."""

        self._start_loading()
        self.steps = []
        self._step("Step 1: Initiating request...")
        self._step("Step 2: Connecting to server...")
        self.steps.append("Step 3: Waiting for response...")
        self.status_message = self.steps[-1]
        response = self._post_service.get_all_posts()
        self._step("Step 4: Parsing response...")
        self.is_loading = False
        if response.is_success and response.has_data:
            self._set(
                StatusKind.SUCCESS,
                f"Complete!\nFetched {len(response.data)} posts\n"
                f"Status: {response.status_code}",
            )
        else:
            self._set_error(response.error.message if response.error else "Failed")

    def _step(self, message: str) -> None:
        self.steps.append(message)
        self.status_message = message
        if self._step_delay:
            time.sleep(self._step_delay)

    def _start_loading(self) -> None:
        self.is_loading = True
        self._set(StatusKind.LOADING, "Making request...")

    def _set_error(self, message: str) -> None:
        self._set(StatusKind.ERROR, f"Failed: {message}")

    def _set(self, status: StatusKind, message: str) -> None:
        self.status = status
        self.status_message = message
        self.logger.info(
            "error_demo_status", extra={"status": status.value, "detail": message}
        )
