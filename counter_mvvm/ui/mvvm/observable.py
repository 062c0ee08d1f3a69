"""
Toolkit-agnostic observable value.

Plays the role Qt properties play for a QObject, without depending on Qt:
views subscribe to an Observable and re-render when it changes.

Usage:
    count = Observable(0, name="count")
    dispose = count.subscribe(lambda v: print(f"count is now {v}"))
    count.set(1)   # prints "count is now 1"
    dispose()
"""
from typing import Callable, Generic, Optional, TypeVar

from counter_mvvm.core.events import Signal

T = TypeVar('T')


class Observable(Generic[T]):
    """
    Value container that notifies subscribers synchronously on change.

    Args:
        initial: Starting value.
        name: Used in the underlying Signal name for log messages.
        coerce: Optional callable applied to every value passed to set().
    """

    def __init__(
        self,
        initial: T,
        name: str = "value",
        coerce: Optional[Callable[[object], T]] = None
    ):
        self.name = name
        self.coerce = coerce
        self._value: T = coerce(initial) if coerce is not None else initial
        self._changed = Signal(f"{name}Changed")

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Store value and notify subscribers if it differs from the current one."""
        if self.coerce is not None:
            value = self.coerce(value)

        if self._value != value:
            self._value = value
            self._changed.emit(value)

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def subscribe(self, callback: Callable[[T], None], immediate: bool = False) -> Callable[[], None]:
        """
        Register callback for change notifications.

        Args:
            callback: Called with the new value after every change.
            immediate: Also deliver the current value once before returning.

        Returns:
            Zero-argument disposer that unsubscribes the callback.
        """
        self._changed.connect(callback)
        if immediate:
            callback(self._value)

        def dispose() -> None:
            self.unsubscribe(callback)

        return dispose

    def unsubscribe(self, callback: Callable[[T], None]) -> None:
        self._changed.disconnect(callback)

    @property
    def subscriber_count(self) -> int:
        return self._changed.subscriber_count

    def __repr__(self) -> str:
        return f"Observable({self.name}={self._value!r})"
