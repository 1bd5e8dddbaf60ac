"""
Abstract input events and the loop that feeds them into a GameState.

Where events come from (a keyboard, a script, an agent) does not matter here.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from wordle.state import GameState, Outcome, RenderModel

logger = logging.getLogger(__name__)


class EventKind(enum.Enum):
    LETTER = "letter"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    QUIT = "quit"
    OTHER = "other"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    char: Optional[str] = None

    @classmethod
    def letter(cls, c: str) -> "Event":
        return cls(EventKind.LETTER, c)


BACKSPACE = Event(EventKind.BACKSPACE)
SUBMIT = Event(EventKind.SUBMIT)
QUIT = Event(EventKind.QUIT)
OTHER = Event(EventKind.OTHER)


def apply_event(state: GameState, event: Event) -> bool:
    """Apply one event to `state`. Returns False iff the event asks to quit."""
    if event.kind is EventKind.QUIT:
        return False
    if event.kind is EventKind.LETTER and event.char is not None:
        state.input_letter(event.char)
    elif event.kind is EventKind.BACKSPACE:
        state.erase_letter()
    elif event.kind is EventKind.SUBMIT:
        state.submit_guess()
    return True


def run_game(
    state: GameState,
    events: Iterable[Event],
    render: Callable[[RenderModel], None],
) -> Outcome:
    """
    Drive `state` with `events` until the player quits, the game ends, or the
    events run out. The board is rendered once up front and after every event.

    Returns the final outcome; a game abandoned with QUIT is IN_PROGRESS.
    """
    render(state.render_model())
    for event in events:
        if not apply_event(state, event):
            logger.info("player quit after %d guesses", len(state.guesses))
            break
        render(state.render_model())
        if state.finished:
            break
    return state.outcome()
