import pytest

from api_learn.domain.exceptions import NavigationError, RouteNotFoundError
from api_learn.navigation.bindings import GetRequestBinding, HomeBinding
from api_learn.navigation.paths import AppRoutes
from api_learn.navigation.routes import (
    Route,
    RouteTable,
    Transition,
    default_route_table,
)
from api_learn.screens.best_practices import BestPracticesScreen
from api_learn.screens.home import HomeScreen
from api_learn.screens.requests import GetRequestScreen


def test_default_table_contains_every_route():
    table = default_route_table()

    assert table.names == list(AppRoutes.all())
    assert len(table) == 8
    for name in AppRoutes.all():
        assert name in table
        assert table.resolve(name).name == name


def test_resolve_unknown_route_raises():
    table = default_route_table()

    with pytest.raises(RouteNotFoundError) as exc_info:
        table.resolve("/nope")

    assert exc_info.value.route_name == "/nope"
    assert isinstance(exc_info.value, NavigationError)


def test_home_route_uses_fade_and_noop_binding():
    route = default_route_table().resolve(AppRoutes.HOME)

    assert route.screen_factory is HomeScreen
    assert route.binding is HomeBinding
    assert route.binding.controller_type is None
    assert route.transition is Transition.FADE_IN


def test_best_practices_route_has_no_binding():
    route = default_route_table().resolve(AppRoutes.BEST_PRACTICES)

    assert route.screen_factory is BestPracticesScreen
    assert route.binding is None
    assert route.transition is Transition.RIGHT_TO_LEFT


def test_request_routes_slide_in_from_right():
    table = default_route_table()
    for route in table:
        if route.name != AppRoutes.HOME:
            assert route.transition is Transition.RIGHT_TO_LEFT


def test_duplicate_route_names_rejected():
    with pytest.raises(ValueError):
        RouteTable(
            [
                Route(AppRoutes.GET_REQUEST, GetRequestScreen, GetRequestBinding),
                Route(AppRoutes.GET_REQUEST, GetRequestScreen, GetRequestBinding),
            ]
        )


def test_route_name_must_be_a_path():
    with pytest.raises(ValueError):
        Route("get-request", GetRequestScreen)
