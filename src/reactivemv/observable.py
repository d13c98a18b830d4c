"""Observable values and the observers that react to them.

An Observable holds one value and an ordered list of Observers. Setting a
value that is not loosely equal to the current one stores it and calls every
Observer, in registration order, before set_state() returns.

Notification is synchronous and re-entrant: an observer may set this or any
other Observable from inside its callback. The fan-out runs over a snapshot
of the observer list, so registering or removing observers mid-notification
only affects the next change.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from reactivemv._equality import loosely_equal
from reactivemv.errors import InvalidArgumentError

T = TypeVar("T")


class Observer(Generic[T]):
    """A registered callback receiving the new state of an Observable."""

    __slots__ = ("_handler",)

    def __init__(self, handler: Callable[[T], None]) -> None:
        if not callable(handler):
            raise InvalidArgumentError("update handler must be callable")
        self._handler = handler

    def update(self, subject: Observable[T]) -> None:
        """Call the handler with the subject's current state."""
        if not isinstance(subject, Observable):
            raise InvalidArgumentError("subject must be an Observable")
        self._handler(subject.get_state())

    def __repr__(self) -> str:
        name = getattr(self._handler, "__name__", type(self._handler).__name__)
        return f"Observer({name})"


class Observable(Generic[T]):
    """A single value with a list of observers."""

    __slots__ = ("_state", "_observers")

    def __init__(self) -> None:
        self._state: T | None = None
        self._observers: list[Observer[T]] = []

    def get_state(self) -> T | None:
        return self._state

    def set_state(self, value: T) -> None:
        """Store value and notify observers, unless it equals the current state."""
        if loosely_equal(value, self._state):
            return
        self._state = value
        self._notify()

    def register_observer(self, observer: Observer[T]) -> None:
        """Add observer. Registering the same handle twice is a no-op."""
        if not isinstance(observer, Observer):
            raise InvalidArgumentError("observer must be an Observer")
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: Observer[T]) -> None:
        """Remove observer. Removing an unknown handle is a no-op."""
        if not isinstance(observer, Observer):
            raise InvalidArgumentError("observer must be an Observer")
        try:
            self._observers.remove(observer)
        except ValueError:
            pass  # not registered

    def subscribe(self, handler: Callable[[T], None]) -> Observer[T]:
        """Wrap handler in an Observer, register it and return the handle."""
        observer = Observer(handler)
        self.register_observer(observer)
        return observer

    @property
    def observers(self) -> tuple[Observer[T], ...]:
        return tuple(self._observers)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self)

    def __repr__(self) -> str:
        return f"Observable({self._state!r})"
