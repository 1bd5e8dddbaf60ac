"""
Feedback utilities for Wordle.

A guess is scored against the answer one position at a time. Each position
gets a LetterClass:

- ABSENT  (0): letter not in the answer, or all of its occurrences are used up
- PRESENT (1): letter in the answer, but at another position
- CORRECT (2): letter matches the answer at this position
"""

from __future__ import annotations

import enum
from collections import Counter
from typing import Sequence


class LetterClass(enum.IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


EMOJI = {
    LetterClass.CORRECT: "\U0001f7e9",
    LetterClass.PRESENT: "\U0001f7e8",
    LetterClass.ABSENT: "⬛",
}


def evaluate(guess: str, answer: str) -> list[LetterClass]:
    """
    Compute the per-letter feedback for `guess` against `answer`.

    Duplicate handling (two-pass rule)
    ----------------------------------
    1) CORRECT pass: every position where the letters match is CORRECT and
       consumes one occurrence of that letter from the answer's counts.
    2) PRESENT pass: remaining positions, left to right. A letter with a
       positive remaining count is PRESENT and decrements the count; otherwise
       it is ABSENT.

    So a letter guessed more often than it remains in the answer is PRESENT
    only for its leftmost unmatched occurrences.

    Raises
    ------
    TypeError
        If either argument is not a string.
    ValueError
        If the two strings differ in length.
    """
    if not isinstance(guess, str) or not isinstance(answer, str):
        raise TypeError("guess and answer must be strings")
    if len(guess) != len(answer):
        raise ValueError("guess and answer must have the same length")

    pattern = [LetterClass.ABSENT] * len(guess)
    remaining = Counter(answer)

    # Pass 1: mark exact matches and take them out of the pool
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = LetterClass.CORRECT
            remaining[g] -= 1

    # Pass 2: misplaced letters, while the pool still has them
    for i, g in enumerate(guess):
        if pattern[i] is LetterClass.CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = LetterClass.PRESENT
            remaining[g] -= 1

    return pattern


def is_solved(pattern: Sequence[LetterClass]) -> bool:
    """True iff every position is CORRECT."""
    return bool(pattern) and all(p == LetterClass.CORRECT for p in pattern)


def to_emoji(pattern: Sequence[LetterClass]) -> str:
    """Render one feedback row as colored squares, e.g. for a shareable grid."""
    return "".join(EMOJI[LetterClass(p)] for p in pattern)


if __name__ == "__main__":
    C, P, A = LetterClass.CORRECT, LetterClass.PRESENT, LetterClass.ABSENT
    assert evaluate("crane", "crane") == [C] * 5
    assert evaluate("allot", "total") == [P, P, A, P, P]
    assert evaluate("abbey", "cabin") == [P, A, C, A, A]
    assert evaluate("press", "spree") == [P, P, P, P, A]
    print("feedback.py sanity checks passed.")
