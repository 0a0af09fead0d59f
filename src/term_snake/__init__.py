"""Term Snake: terminal snake game core."""

from term_snake.config import GameConfig, Settings
from term_snake.controls import accept_direction, is_quit, resolve_direction
from term_snake.engine import Game, GameEngine, GameStatus, advance, new_game
from term_snake.grid import CellType, Grid
from term_snake.highscores import HighScoreEntry, HighScoreError, HighScoreStore
from term_snake.loop import GameLoop, GameOutcome
from term_snake.snake import Direction, Snake, StepResult, step

__all__ = [
    "CellType",
    "Direction",
    "Game",
    "GameConfig",
    "GameEngine",
    "GameLoop",
    "GameOutcome",
    "GameStatus",
    "Grid",
    "HighScoreEntry",
    "HighScoreError",
    "HighScoreStore",
    "Settings",
    "Snake",
    "StepResult",
    "accept_direction",
    "advance",
    "is_quit",
    "new_game",
    "resolve_direction",
    "step",
]
