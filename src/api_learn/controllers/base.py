"""Lifecycle base class for per-screen controllers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Type, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer

C = TypeVar("C", bound="Controller")


class Controller:
    """Per-screen state holder.

    Instances are built by ``from_container`` (which runs ``on_init``) and
    released by the container through ``on_close`` when their screen is
    popped.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(
            f"{__name__}.{self.__class__.__name__}"
        )
        self.initialized = False
        self.closed = False

    @classmethod
    def from_container(cls: Type[C], container: "DependencyContainer") -> C:
        instance = cls._build(container)
        instance.on_init()
        return instance

    @classmethod
    def _build(cls: Type[C], container: "DependencyContainer") -> C:
        return cls()

    def on_init(self) -> None:
        self.initialized = True
        self.logger.debug("controller_init", extra={"controller": type(self).__name__})

    def on_close(self) -> None:
        self.closed = True
        self.logger.debug("controller_close", extra={"controller": type(self).__name__})
