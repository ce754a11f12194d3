"""Tests for the registry error taxonomy."""

import pytest

from objwatch import (
    CallbackNotAFunction,
    ObjectAlreadyWatched,
    ObjectNotWatched,
    WatcherError,
    create_registry,
)


class TestMessages:
    def test_not_watched(self):
        err = ObjectNotWatched("status")
        assert str(err) == "Not watching Object with name status."
        assert err.obj_id == "status"

    def test_already_watched(self):
        err = ObjectAlreadyWatched(42)
        assert str(err) == "Already watching Object with name 42."
        assert err.obj_id == 42

    def test_callback_not_a_function(self):
        err = CallbackNotAFunction("status")
        assert str(err) == (
            "Provided callback for Object with name status is not a function."
        )


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls, builtin",
        [
            (ObjectNotWatched, KeyError),
            (ObjectAlreadyWatched, ValueError),
            (CallbackNotAFunction, TypeError),
        ],
    )
    def test_subclasses(self, cls, builtin):
        err = cls("x")
        assert isinstance(err, WatcherError)
        assert isinstance(err, builtin)

    def test_catch_all_with_base(self):
        r = create_registry()
        with pytest.raises(WatcherError) as info:
            r.unwatch("ghost")
        assert type(info.value) is ObjectNotWatched
        assert info.value.obj_id == "ghost"

    def test_not_watched_message_not_quoted(self):
        """KeyError normally reprs its argument; the message stays plain."""
        r = create_registry()
        with pytest.raises(ObjectNotWatched, match=r"^Not watching Object with name ghost\.$"):
            r.get("ghost")
