"""Round controller and state management."""

from core.events import EventEmitter, EventType, GameEvent
from core.game.state import RoundState
from core.game.engine import BlackjackGame, PlayerResult, RoundResult

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "RoundState",
    "BlackjackGame",
    "PlayerResult",
    "RoundResult",
]
