"""Command-line entry point: ``play``, ``highscore`` and ``reset``."""

from __future__ import annotations

import argparse
import logging
import sys

from term_snake.config import Settings
from term_snake.highscores import HighScoreError, HighScoreStore

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Snake in the terminal, with a top-5 high-score table.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")
    sub.add_parser("play", help="Start the game.")
    sub.add_parser("highscore", help="View high scores.")
    sub.add_parser("reset", help="Clear high scores.")
    return parser


def _run_play(settings: Settings, store: HighScoreStore) -> int:
    from term_snake.terminal import prompt_name, run_curses_game

    outcome = run_curses_game(settings.game)
    if outcome.quit or outcome.score is None:
        return 0

    print(f"Game over! Your score: {outcome.score}")  # noqa: T201
    name = prompt_name()
    try:
        store.record(name, outcome.score)
    except HighScoreError:
        logger.exception("Score for '%s' was not saved.", name)
        return 1
    return 0


def _run_highscore(settings: Settings, store: HighScoreStore) -> int:
    from term_snake.render import format_high_scores

    table = store.load()
    if not table:
        print("No high scores yet.")  # noqa: T201
        return 0
    print("High Scores:")  # noqa: T201
    for line in format_high_scores(table):
        print(line)  # noqa: T201
    return 0


def _run_reset(settings: Settings, store: HighScoreStore) -> int:
    try:
        store.reset()
    except HighScoreError:
        logger.exception("High scores were not cleared.")
        return 1
    print("High scores cleared!")  # noqa: T201
    return 0


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        print('Use the "play" command to start the game!')  # noqa: T201
        return 1

    store = HighScoreStore(
        settings.highscore_path, limit=settings.game.max_high_scores,
    )
    handlers = {
        "play": _run_play,
        "highscore": _run_highscore,
        "reset": _run_reset,
    }
    return handlers[args.command](settings, store)


if __name__ == "__main__":
    sys.exit(main())
