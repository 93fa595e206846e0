"""Terminal prompts: player count, names, hit decisions, play again."""

import logging
from typing import Callable

from config import GameConfig, config
from core.players import Player

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _first_char(answer: str) -> str:
    stripped = answer.strip()
    return stripped[0] if stripped else ""


def is_affirmative(answer: str) -> bool:
    """Check if an answer starts with 'y' or 'Y'."""
    return _first_char(answer) in ("y", "Y")


def is_negative(answer: str) -> bool:
    """Check if an answer starts with 'n' or 'N'."""
    return _first_char(answer) in ("n", "N")


class ConsolePrompter:
    """
    Reads everything the game needs from the player at the terminal.

    Validation lives here: the engine only ever sees a player count in
    range, non-empty names and plain booleans.
    """

    def __init__(
        self,
        reader: Reader = input,
        writer: Writer = print,
        game_config: GameConfig | None = None,
    ) -> None:
        """
        Initialize the prompter.

        Args:
            reader: Shows a prompt and returns one line of input
            writer: Prints a line of output
            game_config: Supplies the allowed player range
        """
        self._reader = reader
        self._writer = writer
        self._config = game_config or config.game

    def ask_player_count(self) -> int:
        """Ask until the answer is a whole number within the table limits."""
        low, high = self._config.min_players, self._config.max_players
        while True:
            answer = self._reader(f"How many players? ({low}-{high}): ")
            try:
                count = int(answer.strip())
            except ValueError:
                logger.debug("Rejected player count %r", answer)
                continue
            if low <= count <= high:
                return count

    def ask_names(self, count: int) -> list[str]:
        """Ask for one non-blank name per player."""
        names = []
        while len(names) < count:
            name = self._reader("Enter player name: ").strip()
            if name:
                names.append(name)
        self._writer("")
        return names

    def ask_hit(self, player: Player) -> bool:
        """Ask a player whether to take another card; end of input stands."""
        try:
            answer = self._reader(f"{player.name}, do you want another hit? (Y/N): ")
        except EOFError:
            return False
        return is_affirmative(answer)

    def ask_play_again(self) -> bool:
        """Ask whether to play another round; only an explicit no stops."""
        try:
            answer = self._reader("\nDo you want to play again? (Y/N): ")
        except EOFError:
            return False
        return not is_negative(answer)
