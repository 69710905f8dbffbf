"""Headless screen objects mounted by the navigator."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, Optional, Type, TypeVar

from api_learn.controllers.base import Controller
from api_learn.core.lazy import LazySlot
from api_learn.domain.exceptions import NavigationError

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer

C = TypeVar("C", bound=Controller)


class Screen(Generic[C]):
    """A screen reads its controller from the container on first access.

    Constructing a screen never constructs its controller; the container
    does that the first time ``controller`` is read. The instance is then
    held by the screen, so a screen always sees the controller of its own
    stack entry, even after a later push registers a fresh one.
    """

    title: ClassVar[str] = ""
    route_name: ClassVar[str] = ""
    controller_type: ClassVar[Optional[Type[Controller]]] = None

    def __init__(self, container: "DependencyContainer") -> None:
        self._container = container
        self._controller: LazySlot[C] = LazySlot(self._resolve_controller)
        self._detached = False

    @property
    def route(self) -> str:
        return self.route_name

    @property
    def controller(self) -> C:
        if self.controller_type is None:
            raise AttributeError(f"{type(self).__name__} has no controller")
        return self._controller.get()

    @property
    def has_controller(self) -> bool:
        return self.controller_type is not None

    @property
    def detached(self) -> bool:
        return self._detached

    def detach(self) -> None:
        """Called when the screen leaves the stack."""

        self._detached = True

    def _resolve_controller(self) -> C:
        if self._detached:
            raise NavigationError(
                "Screen is no longer on the navigation stack",
                context={"route": self.route_name},
            )
        return self._container.find(self.controller_type)  # type: ignore[arg-type,return-value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(route={self.route_name!r})"
