"""objwatch: watch named objects and get notified when they are replaced."""

from importlib.metadata import version as _version

__version__ = _version("objwatch")

from objwatch.errors import (
    WatcherError,
    ObjectNotWatched,
    ObjectAlreadyWatched,
    CallbackNotAFunction,
)
from objwatch.registry import WatchRegistry, create_registry
# textual bridge NOT auto-imported — opt-in only

# Process-wide registry behind the module-level shortcuts.
default_registry = create_registry()

watch = default_registry.watch
unwatch = default_registry.unwatch
get = default_registry.get
set = default_registry.set
on_change = default_registry.on_change
reset = default_registry.reset
is_watched = default_registry.is_watched

__all__ = [
    "WatchRegistry",
    "create_registry",
    "default_registry",
    "WatcherError",
    "ObjectNotWatched",
    "ObjectAlreadyWatched",
    "CallbackNotAFunction",
    "watch",
    "unwatch",
    "get",
    "set",
    "on_change",
    "reset",
    "is_watched",
]
