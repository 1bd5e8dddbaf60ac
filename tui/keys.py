"""Translate curses key codes into game events."""

from __future__ import annotations

import curses
from typing import Callable, Iterator, Union

from wordle.events import BACKSPACE, OTHER, QUIT, SUBMIT, Event

Key = Union[int, str]

ESC = "\x1b"
BACKSPACE_KEYS = {curses.KEY_BACKSPACE, "\b", "\x7f"}
SUBMIT_KEYS = {curses.KEY_ENTER, "\n", "\r"}


def event_from_key(key: Key) -> Event:
    """
    Map one key as returned by `window.get_wch()` (a str for characters, an
    int for special keys) or `window.getch()` (always an int).
    """
    # getch() reports plain characters as their code point
    if isinstance(key, int) and 0 <= key < 256:
        key = chr(key)

    if key == ESC:
        return QUIT
    if key in BACKSPACE_KEYS:
        return BACKSPACE
    if key in SUBMIT_KEYS:
        return SUBMIT
    if isinstance(key, str) and len(key) == 1 and key.isascii() and key.isalpha():
        return Event.letter(key)
    return OTHER


def read_events(read_key: Callable[[], Key]) -> Iterator[Event]:
    """Endless stream of events from a blocking key reader."""
    while True:
        yield event_from_key(read_key())
