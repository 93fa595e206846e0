"""Main entry point for the console Blackjack game."""

import logging
import logging.config
import sys

from config import AppConfig, LoggingConfig, config
from console.prompts import ConsolePrompter, Writer
from console.renderer import ConsoleRenderer
from core.game.engine import BlackjackGame

logger = logging.getLogger(__name__)

WELCOME = "\t\tWelcome to Blackjack\n"


def configure_logging(logging_config: LoggingConfig) -> None:
    """Send log records to stderr so they never mix with the table output."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": logging_config.format},
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "handlers": ["stderr"],
            "level": logging_config.level,
        },
    })


def run(
    prompter: ConsolePrompter,
    writer: Writer = print,
    app_config: AppConfig = config,
) -> int:
    """
    Run one session: seat the players, then play rounds until they quit.

    Returns:
        Number of rounds played
    """
    writer(WELCOME)

    count = prompter.ask_player_count()
    names = prompter.ask_names(count)

    game = BlackjackGame(names, decide=prompter.ask_hit, game_config=app_config.game)
    ConsoleRenderer(writer).attach(game)
    logger.info("Session started with %d player(s)", count)

    while True:
        game.play()
        if not prompter.ask_play_again():
            break

    logger.info("Session ended after %d round(s)", game.round_number)
    return game.round_number


def main() -> int:
    """Console script entry point."""
    configure_logging(config.logging)
    try:
        run(ConsolePrompter())
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
