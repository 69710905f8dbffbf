"""Memoized single-value slot used for lazy dependency registration."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class LazySlot(Generic[T]):
    """Holds either nothing yet or the value produced by ``factory``.

    The factory runs on the first ``get()`` only. If it raises, the slot
    stays unconstructed and the error reaches the caller unchanged.
    """

    __slots__ = ("_factory", "_value", "_constructed")

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: Optional[T] = None
        self._constructed = False

    @classmethod
    def of(cls, value: T) -> "LazySlot[T]":
        """Build a slot that is already constructed."""

        slot: LazySlot[T] = cls(lambda: value)
        slot._value = value
        slot._constructed = True
        return slot

    @property
    def constructed(self) -> bool:
        return self._constructed

    def get(self) -> T:
        if not self._constructed:
            self._value = self._factory()
            self._constructed = True
        return self._value  # type: ignore[return-value]

    def peek(self) -> Optional[T]:
        """Return the value if constructed, without triggering the factory."""

        return self._value if self._constructed else None

    def clear(self) -> Optional[T]:
        """Drop the cached value and return it; the factory is kept."""

        value = self.peek()
        self._value = None
        self._constructed = False
        return value

    def __repr__(self) -> str:
        state = "constructed" if self._constructed else "unconstructed"
        return f"LazySlot({state})"
