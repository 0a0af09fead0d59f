"""Fixed-tick asyncio game loop fed by a queue of raw keypresses."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from term_snake.controls import Key, is_quit, resolve_direction
from term_snake.engine import Game, GameEngine

logger = logging.getLogger(__name__)

Renderer = Callable[[Game], None]


@dataclass(frozen=True)
class GameOutcome:
    """How a game ended. ``score`` is ``None`` when the player quit."""

    score: int | None
    quit: bool = False


class GameLoop:
    """Runs one game until collision or quit.

    Two tasks share a single event loop: the tick task advances the
    engine every ``tick_interval`` seconds, and the input task drains
    ``keys`` and latches directions on the engine. A tick sees whatever
    was latched before it started; several keys between two ticks
    collapse to the last accepted one.
    """

    def __init__(
        self,
        engine: GameEngine,
        keys: asyncio.Queue[Key],
        renderer: Renderer | None = None,
        tick_interval: float | None = None,
    ) -> None:
        self.engine = engine
        self._keys = keys
        self._renderer = renderer
        self._tick_interval = (
            tick_interval if tick_interval is not None
            else engine.config.tick_interval
        )
        if self._tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")

    async def run(self) -> GameOutcome:
        """Play until game over or quit, then stop both tasks."""
        self._render()
        ticker = asyncio.create_task(self._tick_loop(), name="snake-tick")
        reader = asyncio.create_task(self._read_keys(), name="snake-input")
        try:
            done, _ = await asyncio.wait(
                {ticker, reader}, return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            ticker.cancel()
            reader.cancel()
            await asyncio.gather(ticker, reader, return_exceptions=True)

        for task in done:
            task.result()  # re-raise failures from either task

        if reader in done:
            logger.info("Game quit at tick %d.", self.engine.game.tick)
            return GameOutcome(score=None, quit=True)
        logger.info("Game over with score %d.", self.engine.score)
        return GameOutcome(score=self.engine.score)

    async def _tick_loop(self) -> None:
        try:
            while not self.engine.game_over:
                await asyncio.sleep(self._tick_interval)
                self.engine.step()
                self._render()
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
            raise

    async def _read_keys(self) -> None:
        """Latch directions until the quit key arrives."""
        while True:
            key = await self._keys.get()
            if is_quit(key):
                return
            direction = resolve_direction(key)
            if direction is None:
                continue
            self.engine.set_direction(direction)

    def _render(self) -> None:
        if self._renderer is not None:
            self._renderer(self.engine.game)
