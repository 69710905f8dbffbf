"""Route name constants used by navigation calls across the app."""

from __future__ import annotations

from typing import Tuple


class AppRoutes:
    HOME = "/"
    GET_REQUEST = "/get-request"
    POST_REQUEST = "/post-request"
    UPDATE_REQUEST = "/update-request"
    DELETE_REQUEST = "/delete-request"
    FILE_UPLOAD = "/file-upload"
    ERROR_HANDLING = "/error-handling"
    BEST_PRACTICES = "/best-practices"

    @classmethod
    def all(cls) -> Tuple[str, ...]:
        return (
            cls.HOME,
            cls.GET_REQUEST,
            cls.POST_REQUEST,
            cls.UPDATE_REQUEST,
            cls.DELETE_REQUEST,
            cls.FILE_UPLOAD,
            cls.ERROR_HANDLING,
            cls.BEST_PRACTICES,
        )
