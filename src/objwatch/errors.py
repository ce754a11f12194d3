"""Errors raised by a WatchRegistry.

Every error is caused by caller input and is raised at the offending call.
The registry never catches or retries them.
"""

from __future__ import annotations

from typing import Hashable


class WatcherError(Exception):
    """Base class for all registry errors. Carries the offending id."""

    def __init__(self, obj_id: Hashable, message: str) -> None:
        super().__init__(message)
        self.obj_id = obj_id
        self.message = message

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr-quote the message.
        return self.message


class ObjectNotWatched(WatcherError, KeyError):
    """An operation referenced an id with no active entry.

    Usage:
        registry = create_registry()
        registry.unwatch("status")  # raises, "status" is not watched
    """

    def __init__(self, obj_id: Hashable) -> None:
        super().__init__(obj_id, f"Not watching Object with name {obj_id}.")


class ObjectAlreadyWatched(WatcherError, ValueError):
    """watch() referenced an id that already has an active entry.

    Usage:
        registry.watch("status", {"online": True})
        registry.watch("status", {"fruit": "banana"})  # raises, id in use
    """

    def __init__(self, obj_id: Hashable) -> None:
        super().__init__(obj_id, f"Already watching Object with name {obj_id}.")


class CallbackNotAFunction(WatcherError, TypeError):
    """on_change() was given something that is not callable."""

    def __init__(self, obj_id: Hashable) -> None:
        super().__init__(
            obj_id,
            f"Provided callback for Object with name {obj_id} is not a function.",
        )
