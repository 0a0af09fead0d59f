"""Snake representation and the single-step movement rule."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from term_snake.grid import Cell, Grid


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name, e.g. ``"up"``."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Snake:
    """An immutable, head-first sequence of (row, col) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    body: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    @classmethod
    def at(cls, row: int, col: int) -> Snake:
        """A single-segment snake."""
        return cls(((row, col),))

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        dr, dc = direction.value
        r, c = self.head
        return r + dr, c + dc

    def moved_to(self, new_head: Cell, grow: bool = False) -> Snake:
        """Return the snake with *new_head* prepended and, unless growing,
        the tail dropped."""
        kept = self.body if grow else self.body[:-1]
        return Snake((new_head, *kept))


@dataclass(frozen=True)
class StepResult:
    """Outcome of moving a snake one cell."""

    new_head: Cell
    snake: Snake
    grew: bool
    collided: bool


def step(
    snake: Snake,
    direction: Direction,
    food: Cell | None,
    grid: Grid,
) -> StepResult:
    """Move *snake* one cell in *direction*.

    Collision is checked against every segment except the current head,
    tail included, so moving into the cell the tail is leaving is fatal
    whether or not food is eaten on the same step. On collision the
    returned snake is the input snake, unchanged.
    """
    new_head = snake.next_head(direction)
    if grid.is_collision(new_head, snake.body[1:]):
        return StepResult(new_head=new_head, snake=snake, grew=False, collided=True)

    grew = new_head == food
    return StepResult(
        new_head=new_head,
        snake=snake.moved_to(new_head, grow=grew),
        grew=grew,
        collided=False,
    )
