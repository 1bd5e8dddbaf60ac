"""
state.py

The Wordle game state machine.

- Letters are typed into a buffer of at most `word_length` letters
- A full buffer that is in the dictionary can be submitted as a guess
- The game is won when the latest guess equals the answer and lost after
  `max_guesses` misses

Bad input is never an error: it is ignored (typing) or rejected (submitting)
and the state stays as it was.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from wordle.feedback import LetterClass, evaluate
from wordle.sampler import WordSampler
from wordle.vocab import WordVocab

logger = logging.getLogger(__name__)

WORD_LENGTH = 5
MAX_GUESSES = 6


class Outcome(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class RenderModel:
    """Everything a display needs to draw one frame."""

    rows: Tuple[Tuple[str, Tuple[LetterClass, ...]], ...]
    current: str
    outcome: Outcome
    answer: Optional[str] = None
    keyboard: Dict[str, LetterClass] = field(default_factory=dict)
    word_length: int = WORD_LENGTH
    max_guesses: int = MAX_GUESSES


class GameState:
    """
    One game of Wordle.

    API
    ---
    input_letter(c)   append a letter to the current input
    erase_letter()    drop the last letter of the current input
    submit_guess()    move a full, known word from the input into the history
    outcome()         IN_PROGRESS, WON or LOST
    render_model()    snapshot for the display, feedback included

    Once the outcome is WON or LOST the three mutating operations are no-ops.
    """

    def __init__(
        self,
        dictionary: WordVocab,
        answer: str,
        *,
        word_length: int = WORD_LENGTH,
        max_guesses: int = MAX_GUESSES,
    ) -> None:
        if not isinstance(dictionary, WordVocab):
            raise TypeError("dictionary must be a WordVocab")
        if not isinstance(answer, str):
            raise TypeError("answer must be a string")
        if len(answer) != word_length or not (answer.isascii() and answer.isalpha() and answer.islower()):
            raise ValueError(f"answer must be {word_length} lowercase letters, got {answer!r}")
        if max_guesses <= 0:
            raise ValueError("max_guesses must be positive")

        self._dictionary = dictionary
        self._answer = answer
        self._word_length = int(word_length)
        self._max_guesses = int(max_guesses)

        self._current: str = ""
        self._guesses: list[str] = []

    @classmethod
    def from_sampler(cls, dictionary: WordVocab, sampler: WordSampler, **kwargs) -> "GameState":
        """Start a game whose answer is drawn from the sampler's vocab."""
        if not isinstance(sampler, WordSampler):
            raise TypeError("sampler must be a WordSampler")
        return cls(dictionary, sampler.choice_word(), **kwargs)

    # -------------------------
    # Input
    # -------------------------
    def input_letter(self, c: str) -> None:
        if self.finished:
            return
        if len(self._current) >= self._word_length:
            return
        if not isinstance(c, str) or len(c) != 1 or not (c.isascii() and c.isalpha()):
            return
        self._current += c.lower()

    def erase_letter(self) -> None:
        if self.finished:
            return
        self._current = self._current[:-1]

    def submit_guess(self) -> bool:
        """
        Submit the current input.

        Returns True if the guess was accepted. A short or unknown word is
        rejected silently and the input is kept so the player can fix it.
        """
        if self.finished:
            return False
        guess = self._current
        if len(guess) != self._word_length or guess not in self._dictionary:
            logger.debug("rejected guess %r", guess)
            return False

        self._guesses.append(guess)
        self._current = ""
        logger.debug("guess %d/%d: %s", len(self._guesses), self._max_guesses, guess)

        outcome = self.outcome()
        if outcome is not Outcome.IN_PROGRESS:
            logger.info("game over: %s after %d guesses", outcome.value, len(self._guesses))
        return True

    # -------------------------
    # Queries
    # -------------------------
    def outcome(self) -> Outcome:
        if self._guesses and self._guesses[-1] == self._answer:
            return Outcome.WON
        if len(self._guesses) >= self._max_guesses:
            return Outcome.LOST
        return Outcome.IN_PROGRESS

    @property
    def finished(self) -> bool:
        return self.outcome() is not Outcome.IN_PROGRESS

    def feedback(self) -> list[tuple[str, list[LetterClass]]]:
        """Each submitted guess paired with its feedback, oldest first."""
        return [(g, evaluate(g, self._answer)) for g in self._guesses]

    def render_model(self) -> RenderModel:
        scored = self.feedback()

        # Best class seen per letter; never downgrade CORRECT to PRESENT etc.
        keyboard: Dict[str, LetterClass] = {}
        for guess, pattern in scored:
            for ch, cls in zip(guess, pattern):
                if ch not in keyboard or cls > keyboard[ch]:
                    keyboard[ch] = cls

        outcome = self.outcome()
        return RenderModel(
            rows=tuple((g, tuple(p)) for g, p in scored),
            current=self._current,
            outcome=outcome,
            answer=self._answer if outcome is not Outcome.IN_PROGRESS else None,
            keyboard=keyboard,
            word_length=self._word_length,
            max_guesses=self._max_guesses,
        )

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def answer(self) -> str:
        return self._answer

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(self._guesses)

    @property
    def current(self) -> str:
        return self._current

    @property
    def dictionary(self) -> WordVocab:
        return self._dictionary

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def max_guesses(self) -> int:
        return self._max_guesses
