"""
Curses rendering of a RenderModel.

The board is a box-drawn grid of max_guesses rows by word_length cells,
centered on the screen, with an on-screen keyboard underneath when there is
room. Anything that would land outside the window is skipped.
"""

from __future__ import annotations

import curses
from typing import Dict, List, Tuple

from wordle.feedback import LetterClass
from wordle.state import Outcome, RenderModel

CELL_WIDTH = 4
KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")
HINT = "type a word, Enter to guess, Esc to quit"


def grid_lines(rows: int, cols: int) -> List[str]:
    """The empty board, one string per screen line."""
    top = "╔" + "╦".join(["═══"] * cols) + "╗"
    mid = "║" + "║".join(["   "] * cols) + "║"
    sep = "╠" + "╬".join(["═══"] * cols) + "╣"
    bot = "╚" + "╩".join(["═══"] * cols) + "╝"

    lines = [top]
    for r in range(rows):
        lines.append(mid)
        lines.append(sep if r < rows - 1 else bot)
    return lines


def grid_size(rows: int, cols: int) -> Tuple[int, int]:
    """(width, height) of the board in characters."""
    return cols * CELL_WIDTH + 1, rows * 2 + 1


def grid_origin(screen_rows: int, screen_cols: int, width: int, height: int) -> Tuple[int, int]:
    """Top-left (y, x) that centers a width x height block, clamped to the screen."""
    return max(0, (screen_rows - height) // 2), max(0, (screen_cols - width) // 2)


def cell_position(origin: Tuple[int, int], row: int, col: int) -> Tuple[int, int]:
    """Screen (y, x) of the letter in board cell (row, col)."""
    y, x = origin
    return y + 1 + 2 * row, x + 2 + CELL_WIDTH * col


def make_palette() -> Dict[LetterClass, int]:
    """
    Curses attributes per LetterClass. Must be called after curses is
    initialized; falls back to mono attributes on terminals without color.
    """
    if not curses.has_colors():
        return {
            LetterClass.CORRECT: curses.A_REVERSE | curses.A_BOLD,
            LetterClass.PRESENT: curses.A_UNDERLINE | curses.A_BOLD,
            LetterClass.ABSENT: curses.A_DIM,
        }

    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(1, curses.COLOR_GREEN, -1)
    curses.init_pair(2, curses.COLOR_YELLOW, -1)
    curses.init_pair(3, curses.COLOR_WHITE, -1)
    return {
        LetterClass.CORRECT: curses.color_pair(1) | curses.A_BOLD,
        LetterClass.PRESENT: curses.color_pair(2) | curses.A_BOLD,
        LetterClass.ABSENT: curses.color_pair(3) | curses.A_DIM,
    }


class CursesDisplay:
    def __init__(self, window, palette: Dict[LetterClass, int] | None = None) -> None:
        self.window = window
        self.palette = palette if palette is not None else {cls: 0 for cls in LetterClass}

    def render(self, model: RenderModel) -> None:
        self.window.erase()
        screen_rows, screen_cols = self.window.getmaxyx()

        width, height = grid_size(model.max_guesses, model.word_length)
        origin = grid_origin(screen_rows, screen_cols, width, height)
        top, left = origin

        self._put(top - 2, left, "WORDLE".center(width), curses.A_BOLD)

        for dy, line in enumerate(grid_lines(model.max_guesses, model.word_length)):
            self._put(top + dy, left, line)

        # previous guesses
        for row, (guess, pattern) in enumerate(model.rows):
            for col, (ch, cls) in enumerate(zip(guess, pattern)):
                y, x = cell_position(origin, row, col)
                self._put(y, x, ch.upper(), self.palette[cls])

        # current guess
        if len(model.rows) < model.max_guesses:
            for col, ch in enumerate(model.current):
                y, x = cell_position(origin, len(model.rows), col)
                self._put(y, x, ch.upper(), curses.A_BOLD)

        y = top + height + 1
        for keys in KEYBOARD_ROWS:
            row_left = max(0, (screen_cols - (2 * len(keys) - 1)) // 2)
            for i, ch in enumerate(keys):
                cls = model.keyboard.get(ch)
                attr = self.palette[cls] if cls is not None else 0
                self._put(y, row_left + 2 * i, ch.upper(), attr)
            y += 1

        status = self.status(model)
        self._put(y + 1, max(0, (screen_cols - len(status)) // 2), status)
        self.window.refresh()

    @staticmethod
    def status(model: RenderModel) -> str:
        if model.outcome is Outcome.WON:
            return "you have won!"
        if model.outcome is Outcome.LOST:
            return f"the answer was {model.answer.upper()}"
        return HINT

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        rows, cols = self.window.getmaxyx()
        if y < 0 or x < 0 or y >= rows:
            return
        # curses refuses to write into the bottom-right cell
        limit = cols - 1 if y == rows - 1 else cols
        if x + len(text) > limit:
            return
        self.window.addstr(y, x, text, attr)
