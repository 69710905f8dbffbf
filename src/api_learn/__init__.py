"""API Learn: route table, lazy controller bindings and an HTTP request demo."""

from .core.container import DIContainer
from .core.dependencies import DependencyContainer
from .navigation.navigator import Navigator
from .navigation.paths import AppRoutes

__all__ = [
    "DIContainer",
    "DependencyContainer",
    "Navigator",
    "AppRoutes",
    "domain",
    "core",
    "network",
    "services",
    "controllers",
    "screens",
    "navigation",
    "utils",
]
