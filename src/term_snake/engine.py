"""Tick-based game state composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace

import numpy as np

from term_snake.config import GameConfig
from term_snake.controls import accept_direction
from term_snake.grid import Cell, Grid
from term_snake.snake import Direction, Snake, step

logger = logging.getLogger(__name__)


class GameStatus(str, enum.Enum):
    """Lifecycle states of a game. ``GAME_OVER`` is terminal."""

    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Game:
    """Everything that changes while a game is played."""

    snake: Snake
    food: Cell
    direction: Direction
    last_direction: Direction
    score: int = 0
    status: GameStatus = GameStatus.RUNNING
    tick: int = 0

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def with_direction(self, requested: Direction) -> Game:
        """Latch *requested* unless it reverses the last accepted direction."""
        accepted = accept_direction(requested, self.last_direction)
        return replace(self, direction=accepted, last_direction=accepted)


def new_game(grid: Grid, rng: np.random.Generator, config: GameConfig | None = None) -> Game:
    """Create a fresh game with a one-segment snake and food placed."""
    config = config or GameConfig()
    snake = Snake.at(*config.start_cell)
    direction = Direction.from_name(config.start_direction)
    return Game(
        snake=snake,
        food=grid.random_free_cell(snake.body, rng),
        direction=direction,
        last_direction=direction,
    )


def advance(game: Game, grid: Grid, rng: np.random.Generator) -> Game:
    """Advance *game* by one tick and return the new state.

    A finished game is returned unchanged.
    """
    if game.game_over:
        return game

    result = step(game.snake, game.direction, game.food, grid)
    if result.collided:
        logger.info(
            "Snake hit %s at tick %d with score %d.",
            result.new_head, game.tick + 1, game.score,
        )
        return replace(game, status=GameStatus.GAME_OVER, tick=game.tick + 1)

    food = game.food
    score = game.score
    if result.grew:
        score += 1
        food = grid.random_free_cell(result.snake.body, rng)
        logger.debug("Food eaten, score %d, new food at %s.", score, food)

    return replace(
        game,
        snake=result.snake,
        food=food,
        score=score,
        tick=game.tick + 1,
    )


class GameEngine:
    """Single-snake game driven one tick at a time.

    Holds the current :class:`Game` and the RNG used for food placement.
    Each call to :meth:`step` advances the game and returns the new
    :class:`Game`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.grid = Grid(self.config.grid_size)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.game = new_game(self.grid, self.rng, self.config)

    @property
    def score(self) -> int:
        return self.game.score

    @property
    def game_over(self) -> bool:
        return self.game.game_over

    def set_direction(self, direction: Direction) -> Direction:
        """Latch a direction for the next tick; returns the accepted one."""
        self.game = self.game.with_direction(direction)
        return self.game.direction

    def step(self) -> Game:
        """Advance the game by one tick and return the new state."""
        self.game = advance(self.game, self.grid, self.rng)
        return self.game
