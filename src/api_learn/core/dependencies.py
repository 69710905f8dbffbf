"""Type-keyed dependency container shared by navigation, screens and controllers."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Set, Type, TypeVar

from api_learn.core.lazy import LazySlot
from api_learn.domain.exceptions import DependencyNotFoundError

T = TypeVar("T")


class DependencyState(str, Enum):
    """Lifecycle of one registration inside the container."""

    UNREGISTERED = "unregistered"
    REGISTERED_LAZY = "registered_lazy"
    CONSTRUCTED = "constructed"
    DISPOSED = "disposed"


class DependencyContainer:
    """One instance per type, constructed eagerly (``put``) or on first ``find``.

    The container is an ordinary object handed to the navigator and to
    screen constructors. Registering a type that is already present is a
    no-op. ``delete`` disposes the instance by calling its ``on_close``
    hook when it was constructed.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._slots: Dict[type, LazySlot[Any]] = {}
        self._permanent: Set[type] = set()
        self._disposed: Set[type] = set()
        self._logger = logger or logging.getLogger(__name__)

    def put(self, key: Type[T], instance: T, *, permanent: bool = False) -> T:
        """Register an already built instance."""

        if key in self._slots:
            return self._slots[key].get()
        self._slots[key] = LazySlot.of(instance)
        self._disposed.discard(key)
        if permanent:
            self._permanent.add(key)
        self._logger.debug(
            "dependency_put", extra={"dependency": key.__name__, "permanent": permanent}
        )
        return instance

    def lazy_put(
        self, key: Type[T], factory: Callable[[], T], *, permanent: bool = False
    ) -> bool:
        """Register ``factory`` to build ``key`` on first ``find``.

        Returns ``False`` when ``key`` was already registered.
        """

        if key in self._slots:
            return False
        self._slots[key] = LazySlot(factory)
        self._disposed.discard(key)
        if permanent:
            self._permanent.add(key)
        self._logger.debug("dependency_lazy_put", extra={"dependency": key.__name__})
        return True

    def find(self, key: Type[T]) -> T:
        try:
            slot = self._slots[key]
        except KeyError as exc:
            raise DependencyNotFoundError(
                f"'{key.__name__}' is not registered",
                context={"dependency": key.__name__},
            ) from exc
        first_access = not slot.constructed
        instance = slot.get()
        if first_access:
            self._logger.debug(
                "dependency_constructed", extra={"dependency": key.__name__}
            )
        return instance

    def is_registered(self, key: type) -> bool:
        return key in self._slots

    def state(self, key: type) -> DependencyState:
        slot = self._slots.get(key)
        if slot is None:
            if key in self._disposed:
                return DependencyState.DISPOSED
            return DependencyState.UNREGISTERED
        if slot.constructed:
            return DependencyState.CONSTRUCTED
        return DependencyState.REGISTERED_LAZY

    @property
    def registered_types(self) -> List[type]:
        return list(self._slots)

    def delete(self, key: type, *, force: bool = False) -> bool:
        """Dispose and unregister ``key``.

        Permanent registrations survive unless ``force`` is set. Returns
        ``True`` when something was removed.
        """

        slot = self._slots.get(key)
        if slot is None:
            return False
        if key in self._permanent and not force:
            self._logger.debug(
                "dependency_delete_skipped_permanent", extra={"dependency": key.__name__}
            )
            return False

        del self._slots[key]
        self._permanent.discard(key)
        self._disposed.add(key)
        instance = slot.clear()
        if instance is not None:
            on_close = getattr(instance, "on_close", None)
            if callable(on_close):
                on_close()
        self._logger.info(
            "dependency_disposed",
            extra={"dependency": key.__name__, "was_constructed": instance is not None},
        )
        return True

    def reset(self) -> None:
        """Dispose every registration, permanent ones included."""

        for key in reversed(list(self._slots)):
            self.delete(key, force=True)

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._slots)
