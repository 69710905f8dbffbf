from __future__ import annotations

from enum import Enum


class StatusKind(str, Enum):
    """Outcome shown by screens that report a single status line."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
