"""Text and curses rendering of the board and the high-score table."""

from __future__ import annotations

import curses

from term_snake.engine import Game
from term_snake.grid import CellType, Grid
from term_snake.highscores import HighScoreEntry

GLYPHS: dict[CellType, str] = {
    CellType.EMPTY: " ",
    CellType.SNAKE: "▒",
    CellType.HEAD: "█",
    CellType.FOOD: "●",
}
_CELLS_BY_GLYPH = {glyph: cell for cell, glyph in GLYPHS.items()}

HELP_LINES = (
    "Welcome to the Snake Game!",
    "Use WASD or arrow keys to move. Press Q to quit.",
)


def render_rows(game: Game, grid: Grid) -> list[str]:
    """Return one string per grid row, without the score line."""
    cells = grid.occupancy(game.snake.body, game.food)
    return ["".join(GLYPHS[CellType(code)] for code in row) for row in cells.tolist()]


def score_line(game: Game) -> str:
    return f"Score: {game.score}"


def format_high_scores(table: list[HighScoreEntry]) -> list[str]:
    """Numbered lines for the ``highscore`` command.

    Dates are shown exactly as they are written to the high-score file.
    """
    lines = []
    for rank, entry in enumerate(table, start=1):
        stored = entry.model_dump(mode="json")
        lines.append(
            f"{rank}. {stored['name']} - {stored['score']} points ({stored['date']})",
        )
    return lines


class CursesRenderer:
    """Draws each frame onto a curses window.

    Color pairs: 1 snake, 2 food, 3 score/help text. Without color support
    the glyphs alone tell cells apart.
    """

    _PAIR_SNAKE = 1
    _PAIR_FOOD = 2
    _PAIR_TEXT = 3

    def __init__(self, window: curses.window, grid: Grid) -> None:
        self.window = window
        self.grid = grid
        self._colors = curses.has_colors()
        if self._colors:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self._PAIR_SNAKE, curses.COLOR_GREEN, -1)
            curses.init_pair(self._PAIR_FOOD, curses.COLOR_RED, -1)
            curses.init_pair(self._PAIR_TEXT, curses.COLOR_CYAN, -1)

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self._colors else curses.A_NORMAL

    def _put(self, row: int, col: int, text: str, attr: int) -> None:
        try:
            self.window.addstr(row, col, text, attr)
        except curses.error:
            # Terminal smaller than the board; the cell is simply not shown.
            pass

    def __call__(self, game: Game) -> None:
        self.draw(game)

    def draw(self, game: Game) -> None:
        self.window.erase()
        for r, row in enumerate(render_rows(game, self.grid)):
            for c, glyph in enumerate(row):
                cell = _CELLS_BY_GLYPH[glyph]
                if cell is CellType.EMPTY:
                    continue
                pair = self._PAIR_FOOD if cell is CellType.FOOD else self._PAIR_SNAKE
                attr = self._attr(pair)
                if cell is CellType.HEAD:
                    attr |= curses.A_BOLD
                self._put(r, c, glyph, attr)

        text = self._attr(self._PAIR_TEXT)
        self._put(self.grid.size, 0, score_line(game), text)
        for offset, line in enumerate(HELP_LINES, start=2):
            self._put(self.grid.size + offset, 0, line, text)
        self.window.refresh()
