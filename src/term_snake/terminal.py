"""Curses session and name prompt around a single game."""

from __future__ import annotations

import asyncio
import curses
import logging
import sys
from collections.abc import Callable

from term_snake.config import GameConfig
from term_snake.controls import Key
from term_snake.engine import GameEngine
from term_snake.loop import GameLoop, GameOutcome
from term_snake.render import CursesRenderer

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Player"
NAME_PROMPT = f"Enter your name to save your score [{DEFAULT_NAME}]: "


def _drain_keys(window: curses.window, keys: asyncio.Queue[Key]) -> None:
    """Move every pending keypress from curses onto the queue."""
    while True:
        key = window.getch()
        if key == -1:
            return
        keys.put_nowait(key)


async def _play(window: curses.window, config: GameConfig) -> GameOutcome:
    window.nodelay(True)
    window.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor.")

    engine = GameEngine(config)
    keys: asyncio.Queue[Key] = asyncio.Queue()
    renderer = CursesRenderer(window, engine.grid)

    loop = asyncio.get_running_loop()
    fd = sys.stdin.fileno()
    loop.add_reader(fd, _drain_keys, window, keys)
    try:
        return await GameLoop(engine, keys, renderer, config.tick_interval).run()
    finally:
        loop.remove_reader(fd)


def run_curses_game(config: GameConfig | None = None) -> GameOutcome:
    """Play one game in the terminal; curses is torn down before returning."""
    config = config or GameConfig()
    return curses.wrapper(lambda window: asyncio.run(_play(window, config)))


def prompt_name(read: Callable[[str], str] | None = None) -> str:
    """Ask for the player's name, falling back to ``Player``."""
    read = read or input
    try:
        name = read(NAME_PROMPT).strip()
    except EOFError:
        return DEFAULT_NAME
    return name or DEFAULT_NAME
