"""Informational screen; it has no binding and no controller."""

from __future__ import annotations

from typing import NamedTuple, Tuple

from api_learn.controllers.base import Controller
from api_learn.navigation.paths import AppRoutes

from .base import Screen


class Practice(NamedTuple):
    title: str
    summary: str


class PracticeSection(NamedTuple):
    heading: str
    practices: Tuple[Practice, ...]


SECTIONS: Tuple[PracticeSection, ...] = (
    PracticeSection(
        "REST fundamentals",
        (
            Practice("Resources", "Everything is a resource identified by a URL."),
            Practice("Statelessness", "Each request carries all the information needed."),
            Practice(
                "Uniform Interface",
                "GET reads, POST creates, PUT replaces, PATCH updates part, DELETE removes.",
            ),
        ),
    ),
    PracticeSection(
        "Error handling",
        (
            Practice("Use Specific Exception Types", "Map each failure class to its own exception."),
            Practice("User-Friendly Messages", "Show what went wrong and what to do next."),
            Practice("Implement Retry Logic", "Retry transient failures with exponential backoff."),
            Practice("Graceful Degradation", "Keep the screen usable when a request fails."),
        ),
    ),
    PracticeSection(
        "Security",
        (
            Practice("Always Use HTTPS", "Never send credentials over plain HTTP."),
            Practice("Authentication", "Attach tokens in one place and never log them."),
            Practice("Input Validation", "Validate on the client and trust only the server."),
        ),
    ),
    PracticeSection(
        "Performance",
        (
            Practice("Caching", "Avoid refetching data that has not changed."),
            Practice("Pagination", "Fetch large collections one page at a time."),
            Practice("Request Optimization", "Send only the fields that changed."),
            Practice("Connection Pooling", "Reuse connections through one shared client."),
        ),
    ),
    PracticeSection(
        "Architecture",
        (
            Practice("Layered Architecture", "Keep screens, controllers, services and the client apart."),
            Practice("Single Responsibility", "One service per resource."),
            Practice("Configuration Management", "Keep URLs and timeouts in configuration."),
            Practice("Type Safety", "Parse payloads into validated models."),
            Practice("Repository Pattern", "Hide data sources behind a common interface."),
            Practice("Singleton HTTP Client", "Share one configured HTTP client instance."),
            Practice("Interceptors for Cross-Cutting Concerns", "Logging, auth and retries live in interceptors."),
            Practice("Generic Response Wrapper", "Wrap every result in one response envelope."),
        ),
    ),
)


class BestPracticesScreen(Screen[Controller]):
    title = "API Best Practices"
    route_name = AppRoutes.BEST_PRACTICES
    sections = SECTIONS

    def practice_titles(self) -> Tuple[str, ...]:
        return tuple(
            practice.title for section in self.sections for practice in section.practices
        )
