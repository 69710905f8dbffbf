"""Domain-level interfaces defining contracts for navigation collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

import httpx

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer


class IBinding(Protocol):
    """Registers the dependencies a screen needs before it is built."""

    def dependencies(self, container: "DependencyContainer") -> None:
        """Register zero or more dependencies into ``container``."""


class IScreen(Protocol):
    """A headless screen constructed by a route."""

    title: str

    @property
    def route(self) -> str:
        """Route name the screen is mounted under."""

    def detach(self) -> None:
        """Mark the screen as popped off the navigation stack."""


class IScreenFactory(Protocol):
    def __call__(self, container: "DependencyContainer") -> IScreen:
        """Build a screen bound to ``container``."""


class IInterceptor(Protocol):
    """Hooks around every HTTP exchange made by the API client."""

    def process_request(self, request: httpx.Request) -> httpx.Request: ...

    def process_response(self, response: httpx.Response) -> httpx.Response: ...


class ITokenProvider(Protocol):
    def __call__(self) -> Optional[str]:
        """Return the bearer token for the next request, if any."""
