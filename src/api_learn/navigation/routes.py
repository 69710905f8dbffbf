"""Static route table resolving route names to screens and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

from api_learn.domain.exceptions import RouteNotFoundError
from api_learn.domain.interfaces import IBinding, IScreenFactory
from api_learn.screens.best_practices import BestPracticesScreen
from api_learn.screens.home import HomeScreen
from api_learn.screens.requests import (
    DeleteRequestScreen,
    ErrorHandlingScreen,
    FileUploadScreen,
    GetRequestScreen,
    PostRequestScreen,
    UpdateRequestScreen,
)

from .bindings import (
    DeleteRequestBinding,
    ErrorHandlingBinding,
    FileUploadBinding,
    GetRequestBinding,
    HomeBinding,
    PostRequestBinding,
    UpdateRequestBinding,
)
from .paths import AppRoutes


class Transition(str, Enum):
    FADE_IN = "fade_in"
    RIGHT_TO_LEFT = "right_to_left"
    LEFT_TO_RIGHT = "left_to_right"
    ZOOM = "zoom"
    NO_TRANSITION = "no_transition"


@dataclass(frozen=True)
class Route:
    """One entry of the route table."""

    name: str
    screen_factory: IScreenFactory
    binding: Optional[IBinding] = None
    transition: Transition = Transition.RIGHT_TO_LEFT

    def __post_init__(self) -> None:
        if not self.name.startswith("/"):
            raise ValueError(f"Route name must start with '/': {self.name!r}")


class RouteTable:
    """Immutable name -> route mapping; insertion order is kept for listing."""

    def __init__(self, routes: Iterable[Route]) -> None:
        table: Dict[str, Route] = {}
        for route in routes:
            if route.name in table:
                raise ValueError(f"Duplicate route name: {route.name!r}")
            table[route.name] = route
        self._routes = table

    def resolve(self, name: str) -> Route:
        try:
            return self._routes[name]
        except KeyError:
            raise RouteNotFoundError(name) from None

    @property
    def names(self) -> List[str]:
        return list(self._routes)

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)


def default_routes() -> List[Route]:
    return [
        Route(AppRoutes.HOME, HomeScreen, HomeBinding, Transition.FADE_IN),
        Route(AppRoutes.GET_REQUEST, GetRequestScreen, GetRequestBinding),
        Route(AppRoutes.POST_REQUEST, PostRequestScreen, PostRequestBinding),
        Route(AppRoutes.UPDATE_REQUEST, UpdateRequestScreen, UpdateRequestBinding),
        Route(AppRoutes.DELETE_REQUEST, DeleteRequestScreen, DeleteRequestBinding),
        Route(AppRoutes.FILE_UPLOAD, FileUploadScreen, FileUploadBinding),
        Route(AppRoutes.ERROR_HANDLING, ErrorHandlingScreen, ErrorHandlingBinding),
        Route(AppRoutes.BEST_PRACTICES, BestPracticesScreen, None),
    ]


def default_route_table() -> RouteTable:
    return RouteTable(default_routes())
