"""Textual integration for objwatch. Opt-in — requires textual.

bind() installs a registry callback that is safe to point at widgets:
guarded while the app is paused or not running, NoMatches from widget
queries ignored, cross-thread set() calls marshaled via call_from_thread.
Textual coupling stays in this module; the registry itself is agnostic.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Callable, Hashable

from textual.css.query import NoMatches

from objwatch.registry import WatchRegistry

# Pause state keyed by id(app) so multiple apps work in tests.
# Invariant: id present <-> inside a pause() context for that app.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend bridged callbacks during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def bind(
    app,
    registry: WatchRegistry,
    obj_id: Hashable,
    effect_fn: Callable[[Any, Any], None],
) -> Callable[[Any, Any], None]:
    """Install effect_fn(old, new) as obj_id's callback, bridged to app.

    Replaces whatever callback obj_id had. Raises ObjectNotWatched for an
    unknown id. Returns the installed callback.

    Usage:
        bind(app, registry, "status", lambda old, new: footer.update(new["text"]))
    """
    _main = threading.get_ident()

    def _guarded(old, new):
        if not is_safe(app):
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_safe, old, new)
        else:
            _safe(old, new)

    def _safe(old, new):
        try:
            effect_fn(old, new)
        except NoMatches:
            pass

    registry.on_change(obj_id, _guarded)
    return _guarded
