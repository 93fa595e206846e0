"""Tests for the event emitter."""

import pytest

from core.events import EventEmitter, EventType, GameEvent


class TestEventEmitter:
    """Tests for subscribing to and emitting events."""

    def test_typed_subscription(self):
        """Test a handler only sees its own event type."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.PUSH)

        emitter.emit_new(EventType.PLAYER_WINS, name="Ann")
        emitter.emit_new(EventType.PUSH, name="Bob")

        assert [e.data["name"] for e in seen] == ["Bob"]

    def test_catch_all_runs_after_typed(self):
        """Test catch-all handlers run after type-specific ones."""
        emitter = EventEmitter()
        order = []
        emitter.subscribe(lambda e: order.append("all"))
        emitter.subscribe(lambda e: order.append("typed"), EventType.OUT_OF_CARDS)

        emitter.emit_new(EventType.OUT_OF_CARDS)

        assert order == ["typed", "all"]

    def test_unsubscribe(self):
        """Test an unsubscribed handler is no longer called."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.PUSH)
        emitter.unsubscribe(seen.append, EventType.PUSH)

        emitter.emit_new(EventType.PUSH)

        assert seen == []

    def test_unsubscribe_unknown_handler(self):
        """Test removing a handler that was never added is harmless."""
        emitter = EventEmitter()
        emitter.unsubscribe(print, EventType.PUSH)
        emitter.unsubscribe(print)

    def test_history(self):
        """Test every emitted event is kept until cleared."""
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.ROUND_STARTED, round_number=1)

        assert emitter.history == [event]
        assert isinstance(event, GameEvent)

        emitter.clear_history()
        assert emitter.history == []

    def test_history_is_a_copy(self):
        """Test callers cannot edit the history in place."""
        emitter = EventEmitter()
        emitter.emit_new(EventType.PUSH)
        emitter.history.clear()
        assert len(emitter.history) == 1

    def test_handler_errors_propagate(self):
        """Test a failing handler is not silenced."""
        emitter = EventEmitter()

        def broken(event):
            raise RuntimeError("display failed")

        emitter.subscribe(broken)
        with pytest.raises(RuntimeError, match="display failed"):
            emitter.emit_new(EventType.PUSH)

    def test_str(self):
        """Test the readable form names the event type."""
        assert str(GameEvent(EventType.PUSH, {"name": "Ann"})) == "PUSH: {'name': 'Ann'}"
