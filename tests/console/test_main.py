"""Tests for the console session loop."""

import logging

from config import AppConfig, GameConfig, LoggingConfig
from console import main as console_main
from console.main import WELCOME, configure_logging, run
from console.prompts import ConsolePrompter


class ScriptedTerminal:
    """Answers prompts by kind, so hit questions never run out of answers."""

    def __init__(self, count: str, names: list[str], again: list[str], hit: str = "n") -> None:
        self._count = count
        self._names = list(names)
        self._again = list(again)
        self._hit = hit
        self.hit_prompts = 0

    def read(self, prompt: str) -> str:
        if prompt.startswith("How many players"):
            return self._count
        if prompt.startswith("Enter player name"):
            return self._names.pop(0)
        if "another hit" in prompt:
            self.hit_prompts += 1
            return self._hit
        if "play again" in prompt:
            if not self._again:
                raise EOFError
            return self._again.pop(0)
        raise AssertionError(f"Unexpected prompt: {prompt!r}")


def session_config(**game) -> AppConfig:
    return AppConfig(game=GameConfig(**{"seed": 11, "reshuffle_threshold": 0, **game}))


class TestRun:
    """Tests for a whole session."""

    def test_plays_until_no(self):
        """Test rounds repeat until the players answer no."""
        terminal = ScriptedTerminal("2", ["Ann", "Bob"], again=["y", "", "n"])
        lines = []

        rounds = run(ConsolePrompter(reader=terminal.read, writer=lines.append), lines.append, session_config())

        assert rounds == 3
        assert lines[0] == WELCOME
        assert "\n--- Round 3 ---" in lines

    def test_every_player_asked_each_round(self):
        """Test each standing player is asked once per round when they stand."""
        terminal = ScriptedTerminal("2", ["Ann", "Bob"], again=["n"])
        prompter = ConsolePrompter(reader=terminal.read, writer=lambda line: None)

        run(prompter, lambda line: None, session_config())

        # A player on two cards can never be busted, so each is asked exactly once
        assert terminal.hit_prompts == 2

    def test_outcomes_printed(self):
        """Test the session prints an outcome for every player who did not bust."""
        terminal = ScriptedTerminal("1", ["Ann"], again=["n"])
        lines = []

        run(ConsolePrompter(reader=terminal.read, writer=lines.append), lines.append, session_config())

        outcomes = [line for line in lines if line.startswith("Ann ")]
        assert len(outcomes) == 1
        assert outcomes[0] in ("Ann wins!", "Ann loses.", "Ann pushes.")

    def test_end_of_input_ends_session(self):
        """Test a closed input at the play-again prompt stops cleanly."""
        terminal = ScriptedTerminal("1", ["Ann"], again=[])
        rounds = run(ConsolePrompter(reader=terminal.read, writer=lambda line: None), lambda line: None, session_config())
        assert rounds == 1

    def test_deck_runs_out_over_long_session(self):
        """Test the deck is not rebuilt by default, so a long session runs dry."""
        terminal = ScriptedTerminal("7", [f"P{i}" for i in range(7)], again=["y"] * 5 + ["n"])
        lines = []

        run(ConsolePrompter(reader=terminal.read, writer=lines.append), lines.append, session_config())

        assert "Out of cards. Unable to deal." in lines


class TestMain:
    """Tests for the console script entry point."""

    def test_main_exits_cleanly_on_eof(self, monkeypatch):
        """Test closing the input during setup exits with status 0."""

        def closed(prompt):
            raise EOFError

        monkeypatch.setattr(console_main, "ConsolePrompter", lambda: ConsolePrompter(reader=closed))
        monkeypatch.setattr(console_main, "configure_logging", lambda logging_config: None)

        assert console_main.main() == 0

    def test_configure_logging_sets_level(self):
        """Test the configured level is applied to the root logger."""
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging(LoggingConfig(level="DEBUG"))
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)
