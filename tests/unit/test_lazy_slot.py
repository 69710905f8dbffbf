import pytest

from api_learn.core.lazy import LazySlot


def test_factory_runs_once_on_first_get():
    calls = []

    def factory():
        calls.append(1)
        return object()

    slot = LazySlot(factory)
    assert slot.constructed is False
    assert calls == []

    first = slot.get()
    second = slot.get()

    assert first is second
    assert calls == [1]
    assert slot.constructed is True


def test_of_builds_constructed_slot():
    value = ["ready"]
    slot = LazySlot.of(value)
    assert slot.constructed is True
    assert slot.peek() is value
    assert slot.get() is value


def test_peek_does_not_construct():
    slot = LazySlot(lambda: 42)
    assert slot.peek() is None
    assert slot.constructed is False


def test_failed_factory_leaves_slot_unconstructed():
    attempts = []

    def factory():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("boom")
        return "ok"

    slot = LazySlot(factory)
    with pytest.raises(RuntimeError):
        slot.get()
    assert slot.constructed is False

    assert slot.get() == "ok"
    assert len(attempts) == 2


def test_clear_returns_value_and_resets():
    slot = LazySlot(lambda: "value")
    slot.get()

    assert slot.clear() == "value"
    assert slot.constructed is False
    assert slot.clear() is None
    assert "unconstructed" in repr(slot)
