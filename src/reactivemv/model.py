"""Model — the named registry of Observables.

Every read, write and subscription goes through a key that must have been
created with add_key() first. Keys are never removed.
"""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Iterator

from reactivemv.errors import DuplicateKeyError, MissingKeyError
from reactivemv.observable import Observable, Observer

logger = logging.getLogger("reactivemv.model")


class NamespaceAllocator:
    """Monotonically increasing integers for namespacing generated keys."""

    __slots__ = ("_counter",)

    def __init__(self, start: int = 0) -> None:
        # itertools.count is thread-safe (C-level GIL atomic)
        self._counter = itertools.count(start)

    def next(self) -> int:
        return next(self._counter)


# Shared by every Model that is not given its own allocator, so two
# switchers never collide even across models.
default_allocator = NamespaceAllocator()


class Model:
    """Key-based container of Observables."""

    def __init__(self, allocator: NamespaceAllocator | None = None) -> None:
        self._observables: dict[str, Observable] = {}
        self._allocator = allocator if allocator is not None else default_allocator

    def _get(self, key: str) -> Observable:
        obs = self._observables.get(key)
        if obs is None:
            raise MissingKeyError(key)
        return obs

    def add_key(self, key: str, initial: object = None) -> None:
        """Create key, seeded with initial. Fails if key already exists."""
        if key in self._observables:
            raise DuplicateKeyError(key)
        obs: Observable = Observable()
        self._observables[key] = obs
        obs.set_state(initial)
        logger.debug("Added key %r (initial=%r)", key, initial)

    def get(self, key: str) -> object:
        return self._get(key).get_state()

    def set(self, key: str, value: object) -> None:
        self._get(key).set_state(value)

    def add_observer_handler(self, key: str, handler: Callable[[object], None]) -> Observer:
        """Call handler with every new value of key. Returns the Observer handle."""
        return self._get(key).subscribe(handler)

    def remove_observer_handler(self, key: str, observer: Observer) -> None:
        self._get(key).unregister_observer(observer)

    def has_key(self, key: str) -> bool:
        return key in self._observables

    def __contains__(self, key: object) -> bool:
        return key in self._observables

    def keys(self) -> Iterator[str]:
        return iter(list(self._observables))

    def get_next_unique_key(self) -> int:
        """Next id from this model's allocator (process-wide by default)."""
        return self._allocator.next()

    def __repr__(self) -> str:
        return f"Model({len(self._observables)} keys)"
