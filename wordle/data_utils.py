from __future__ import annotations

import logging
from pathlib import Path

from wordle.vocab import WordVocab

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_GUESSES = DATA_DIR / "guesses.txt"
DEFAULT_ANSWERS = DATA_DIR / "answers.txt"


def load_vocab(path: str | Path) -> WordVocab:
    """
    Load a word list, choosing the reader from the file suffix.
    `.csv` files need a `word` column; anything else is one word per line.
    """
    path = Path(path)
    if path.suffix.lower() == ".csv":
        return WordVocab.from_csv(str(path), column="word")
    return WordVocab.from_text(str(path))


def load_corpora(
    guesses_path: str | Path | None = None,
    answers_path: str | Path | None = None,
) -> tuple[WordVocab, WordVocab]:
    """
    Load (dictionary, answers). Every answer is also accepted as a guess,
    so the dictionary is the union of both lists.
    """
    guesses = load_vocab(guesses_path or DEFAULT_GUESSES)
    answers = load_vocab(answers_path or DEFAULT_ANSWERS)
    dictionary = guesses.union(answers)
    logger.info(
        "corpora ready: %d accepted guesses, %d answers",
        len(dictionary),
        len(answers),
    )
    return dictionary, answers
