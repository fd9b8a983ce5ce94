"""Replay-latest observable state cells.

An ObservableState holds a current value and an ordered listener list. New
subscribers receive the current value immediately; every later `set` is
pushed to all listeners in subscription order. Derived streams created with
`map` re-apply their function to each upstream value and keep only the last
result.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Listener = Callable[[T], None]
Unsubscribe = Callable[[], None]


class ReadableState(Generic[T]):
    """Read side of a replay-latest cell: current value and subscriptions."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Listener[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, listener: Listener[T]) -> Unsubscribe:
        """Register `listener`, call it with the current value, and return an unsubscribe callable."""

        self._listeners.append(listener)
        listener(self._value)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def map(self, fn: Callable[[T], U]) -> ReadableState[U]:
        """Return a derived cell holding `fn` applied to the latest value."""

        derived = _DerivedState(fn(self._value))
        self._listeners.append(lambda value: derived._emit(fn(value)))
        return derived

    def _emit(self, value: T) -> None:
        self._value = value
        for listener in list(self._listeners):
            listener(value)


class ObservableState(ReadableState[T]):
    """A writable replay-latest cell."""

    def set(self, value: T) -> None:
        """Store `value` and push it to every listener."""

        self._emit(value)


class _DerivedState(ReadableState[T]):
    """Read-only cell fed by an upstream cell."""
