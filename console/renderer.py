"""Turns game events into lines of terminal output."""

from typing import Callable, Sequence

from core.events import EventType, GameEvent
from core.game.engine import BlackjackGame

Writer = Callable[[str], None]

EMPTY_HAND = "<empty>"


def render_hand(name: str, cards: Sequence[str], total: int) -> str:
    """
    Render a participant's hand as one line.

    The total is only shown when it is non-zero, so a house hand with its
    hole card down shows cards but no total.
    """
    if not cards:
        return f"{name}:\t{EMPTY_HAND}"

    line = f"{name}:\t" + "\t".join(cards)
    if total:
        line += f"\t({total})"
    return line


_ANNOUNCEMENTS: dict[EventType, str] = {
    EventType.PLAYER_BUSTS: "{name} has busted.",
    EventType.PLAYER_WINS: "{name} wins!",
    EventType.PLAYER_LOSES: "{name} loses.",
    EventType.PUSH: "{name} pushes.",
    EventType.OUT_OF_CARDS: "Out of cards. Unable to deal.",
    EventType.DECK_SHUFFLED: "Shuffling a fresh deck.",
    EventType.ROUND_STARTED: "\n--- Round {round_number} ---",
}


class ConsoleRenderer:
    """Display sink that prints hands and announcements as they happen."""

    def __init__(self, writer: Writer = print) -> None:
        self._writer = writer

    def attach(self, game: BlackjackGame) -> None:
        """Subscribe to every event a game emits."""
        game.subscribe(self.handle)

    def handle(self, event: GameEvent) -> None:
        """Print whatever the event calls for; other events are ignored."""
        if event.event_type == EventType.HAND_SHOWN:
            self._writer(render_hand(**event.data))
        elif event.event_type in _ANNOUNCEMENTS:
            self._writer(_ANNOUNCEMENTS[event.event_type].format(**event.data))
