"""Landing screen listing the demos."""

from __future__ import annotations

from typing import NamedTuple, Tuple

from api_learn.controllers.base import Controller
from api_learn.navigation.paths import AppRoutes

from .base import Screen


class MenuEntry(NamedTuple):
    label: str
    method: str
    route: str


class HomeScreen(Screen[Controller]):
    title = "API Learn"
    route_name = AppRoutes.HOME

    menu: Tuple[MenuEntry, ...] = (
        MenuEntry("Fetch data", "GET", AppRoutes.GET_REQUEST),
        MenuEntry("Create resource", "POST", AppRoutes.POST_REQUEST),
        MenuEntry("Full / partial update", "PUT / PATCH", AppRoutes.UPDATE_REQUEST),
        MenuEntry("Remove resource", "DELETE", AppRoutes.DELETE_REQUEST),
        MenuEntry("Upload files", "MULTIPART", AppRoutes.FILE_UPLOAD),
        MenuEntry("Handle errors", "ERRORS", AppRoutes.ERROR_HANDLING),
        MenuEntry("Best practices", "GUIDE", AppRoutes.BEST_PRACTICES),
    )
