"""Navigation stack that binds, builds and disposes screens."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from api_learn.core.dependencies import DependencyContainer
from api_learn.domain.exceptions import NavigationError
from api_learn.domain.interfaces import IScreen

from .paths import AppRoutes
from .routes import Route, RouteTable


@dataclass
class StackEntry:
    route: Route
    screen: IScreen
    owned: Tuple[type, ...] = field(default_factory=tuple)


class Navigator:
    """Pushes and pops routes against one ``DependencyContainer``.

    ``to`` runs the route's binding before the screen factory. Types the
    binding newly registered are owned by that stack entry and are
    disposed when the entry is popped.
    """

    def __init__(
        self,
        routes: RouteTable,
        container: DependencyContainer,
        *,
        initial_route: str = AppRoutes.HOME,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._routes = routes
        self._container = container
        self._stack: List[StackEntry] = []
        self._logger = logger or logging.getLogger(__name__)
        self._initial_route = initial_route
        self.to(initial_route)

    @property
    def container(self) -> DependencyContainer:
        return self._container

    @property
    def routes(self) -> RouteTable:
        return self._routes

    @property
    def current(self) -> IScreen:
        return self._stack[-1].screen

    @property
    def stack(self) -> List[str]:
        return [entry.route.name for entry in self._stack]

    @property
    def can_pop(self) -> bool:
        return len(self._stack) > 1

    def to(self, name: str) -> IScreen:
        route = self._routes.resolve(name)
        before = set(self._container.registered_types)
        try:
            if route.binding is not None:
                route.binding.dependencies(self._container)
            owned = self._registered_since(before)
            screen = route.screen_factory(self._container)
        except Exception:
            owned = self._registered_since(before)
            for key in owned:
                self._container.delete(key)
            self._logger.warning(
                "route_build_failed",
                extra={"route": name, "disposed": [key.__name__ for key in owned]},
            )
            raise
        self._stack.append(StackEntry(route, screen, owned))
        self._logger.info(
            "route_pushed",
            extra={
                "route": name,
                "transition": route.transition.value,
                "depth": len(self._stack),
            },
        )
        return screen

    def back(self) -> IScreen:
        """Pop the top screen and dispose what its binding registered."""

        if not self.can_pop:
            raise NavigationError(
                "Cannot pop the root route", context={"route": self.stack[0]}
            )
        self._pop()
        return self.current

    def off_all(self, name: str) -> IScreen:
        """Clear the stack, disposing every entry, then push ``name``.

        If building ``name`` fails the initial route is pushed again so the
        stack is never left empty.
        """

        self._routes.resolve(name)
        while self._stack:
            self._pop()
        try:
            return self.to(name)
        except Exception:
            self._logger.warning(
                "route_restored",
                extra={"failed_route": name, "route": self._initial_route},
            )
            self.to(self._initial_route)
            raise

    def _pop(self) -> None:
        entry = self._stack.pop()
        entry.screen.detach()
        for key in entry.owned:
            self._container.delete(key)
        self._logger.info(
            "route_popped",
            extra={
                "route": entry.route.name,
                "disposed": [key.__name__ for key in entry.owned],
                "depth": len(self._stack),
            },
        )

    def _registered_since(self, before: Set[type]) -> Tuple[type, ...]:
        return tuple(
            key for key in self._container.registered_types if key not in before
        )
