from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

import pandas as pd

logger = logging.getLogger(__name__)


class WordVocab:
    """
    An immutable, ordered word list with O(1) membership checks.

    Used for both corpora: the dictionary of accepted guesses and the pool of
    answers. Nothing mutates a vocab after construction, so one instance can
    be shared by every game in the process.
    """

    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Loaders dedupe with a first-occurrence policy; direct callers must too
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: tuple[str, ...] = tuple(words)
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_text(cls, path: str, *, word_len: int = 5) -> "WordVocab":
        """
        Load a word list stored as one word per line.

        Raises
        ------
        FileNotFoundError, ValueError
        """
        df = pd.read_csv(
            path,
            header=None,
            names=["word"],
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
        return cls._from_series(df["word"].tolist(), path, word_len=word_len)

    @classmethod
    def from_csv(cls, path: str, column: str = "word", *, word_len: int = 5) -> "WordVocab":
        """
        Load words from a CSV with a header row.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int, default=5
            Required word length.

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls._from_series(df[column].tolist(), path, word_len=word_len)

    @classmethod
    def _from_series(cls, raw: Iterable[object], source: str, *, word_len: int) -> "WordVocab":
        # Lowercase, keep alphabetic words of the right length, first occurrence wins
        clean: List[str] = []
        seen = set()
        dropped = 0

        for val in raw:
            w = str(val).strip().lower() if val is not None else ""
            if len(w) != word_len or not (w.isascii() and w.isalpha()):
                dropped += 1
                continue
            if w in seen:
                continue
            seen.add(w)
            clean.append(w)

        if not clean:
            raise ValueError(f"no valid {word_len}-letter words in {source}")

        logger.debug("loaded %d words from %s (%d rejected)", len(clean), source, dropped)
        return cls(clean)

    def union(self, other: "WordVocab") -> "WordVocab":
        """Return a new vocab with this vocab's words followed by any new ones from `other`."""
        if not isinstance(other, WordVocab):
            raise TypeError("other must be a WordVocab")
        extra = [w for w in other if w not in self._index]
        if not extra:
            return self
        return WordVocab(list(self._words) + extra)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordVocab({len(self._words)} words)"

    def words(self) -> List[str]:
        """Return a copy of the word list."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the vocabulary (case-sensitive)."""
        return word in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
