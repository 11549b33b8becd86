"""Bridge for hosts that want a single callback-driven observation of a state holder."""

from __future__ import annotations

from typing import Callable, Generic, Protocol, TypeVar

T = TypeVar("T")


class Observable(Protocol[T]):
    def current(self) -> T:
        ...

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        ...


class StateObserver(Generic[T]):
    """
    Holds at most one active observation.

    `observe` replaces any previous observation and delivers the current value
    immediately, then every later value. `cancel` stops delivery.
    """

    def __init__(self, source: Observable[T]) -> None:
        self._source = source
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def is_observing(self) -> bool:
        return self._unsubscribe is not None

    def observe(self, on_each: Callable[[T], None]) -> None:
        self.cancel()
        self._unsubscribe = self._source.subscribe(on_each)
        on_each(self._source.current())

    def cancel(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None


__all__ = ["Observable", "StateObserver"]
