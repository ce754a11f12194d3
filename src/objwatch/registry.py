"""Watch registry — named objects with a single change callback each.

A WatchRegistry maps caller-chosen ids to the current value of a watched
object. set() replaces the value and synchronously calls the entry's
on_change(old, new) hook before returning.

Values are copied on every read and write (shallow, via copy.copy), so code
holding a returned value can never mutate registry state behind the
notification path. Nested containers are shared between copies.

Not thread-safe: hosts that touch a registry from several threads must
serialize access themselves.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Hashable

from objwatch.errors import CallbackNotAFunction, ObjectAlreadyWatched, ObjectNotWatched

logger = logging.getLogger("objwatch.registry")

OnChange = Callable[[Any, Any], None]


def _noop(old: Any, new: Any) -> None:
    pass


class _Entry:
    """Current value and change hook for one watched id."""

    __slots__ = ("value", "on_change")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.on_change: OnChange = _noop


class WatchRegistry:
    """Tracks named objects and notifies one callback per id on replacement."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[Hashable, _Entry] = {}

    def _entry(self, obj_id: Hashable) -> _Entry:
        entry = self._entries.get(obj_id)
        if entry is None:
            raise ObjectNotWatched(obj_id)
        return entry

    def watch(self, obj_id: Hashable, value: Any) -> None:
        """Start watching value under obj_id. The callback defaults to a no-op."""
        if obj_id in self._entries:
            raise ObjectAlreadyWatched(obj_id)
        self._entries[obj_id] = _Entry(copy.copy(value))
        logger.debug("Watching %r", obj_id)

    def unwatch(self, obj_id: Hashable) -> None:
        """Stop watching obj_id. Its callback is discarded too."""
        self._entry(obj_id)
        del self._entries[obj_id]
        logger.debug("Unwatched %r", obj_id)

    def get(self, obj_id: Hashable) -> Any:
        """Return a shallow copy of the value watched under obj_id."""
        return copy.copy(self._entry(obj_id).value)

    def set(self, obj_id: Hashable, value: Any) -> None:
        """Replace the watched value, then call on_change(old, new).

        The callback runs in this call stack before set() returns. Anything it
        raises propagates to the caller; the new value stays stored. A
        callback that calls set() on the same id recurses without a guard.

        Usage:
            registry.watch("status", {"online": False})
            registry.on_change("status", lambda old, new: print(old, new))
            registry.set("status", {"online": True})
            # prints {'online': False} {'online': True}
        """
        entry = self._entry(obj_id)
        old = copy.copy(entry.value)
        entry.value = copy.copy(value)
        logger.debug("Set %r", obj_id)
        entry.on_change(old, copy.copy(entry.value))

    def on_change(self, obj_id: Hashable, callback: OnChange) -> None:
        """Replace the change callback for obj_id.

        Only one callback is kept per id; registering another discards the
        previous one.
        """
        entry = self._entry(obj_id)
        if not callable(callback):
            raise CallbackNotAFunction(obj_id)
        entry.on_change = callback
        logger.debug("Replaced on_change for %r", obj_id)

    def reset(self) -> None:
        """Forget every watched object and callback."""
        count = len(self._entries)
        self._entries.clear()
        logger.debug("Reset registry, dropped %d entries", count)

    def is_watched(self, obj_id: Hashable) -> bool:
        return obj_id in self._entries

    def ids(self) -> list[Hashable]:
        """Watched ids, in the order they were first watched."""
        return list(self._entries)

    def __contains__(self, obj_id: Hashable) -> bool:
        return self.is_watched(obj_id)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"WatchRegistry({self.ids()!r})"


def create_registry() -> WatchRegistry:
    """Return a fresh registry that shares no state with any other."""
    return WatchRegistry()
