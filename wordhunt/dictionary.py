from __future__ import annotations
import logging
from collections import Counter
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Mapping, Optional, Union

from .errors import DictionaryUnavailable

logger = logging.getLogger(__name__)

Letters = Union[Mapping[str, int], str, Iterable[str]]


def read_word_list(path: Union[Path, str]) -> FrozenSet[str]:
    """Read a one-word-per-line file into a set of lowercase alphabetic words."""
    p = Path(path)
    try:
        # utf-8 with errors ignored to be resilient to odd characters
        with p.open('r', encoding='utf-8', errors='ignore') as f:
            words = set()
            for line in f:
                w = line.strip().lower()
                if w and w.isascii() and w.isalpha():
                    words.add(w)
    except OSError as exc:
        raise DictionaryUnavailable(f"Word list not readable at {p}: {exc}") from exc
    return frozenset(words)


class Dictionary:
    """Immutable word set shared read-only by every game.

    A dictionary whose word list failed to load stays usable: ``available`` is
    False, ``error`` holds the reason and every query answers False.
    """

    def __init__(self, words: Iterable[str] = (), error: Optional[str] = None):
        self._words: FrozenSet[str] = frozenset(
            w for w in (w.strip().lower() for w in words if w) if w.isascii() and w.isalpha()
        )
        self.error = error

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'Dictionary':
        return cls(words)

    @classmethod
    def load(cls, path: Union[Path, str]) -> 'Dictionary':
        try:
            words = read_word_list(path)
        except DictionaryUnavailable as exc:
            logger.error("Dictionary unavailable, every word will be rejected: %s", exc)
            return cls(error=str(exc))
        logger.info("Loaded %s words from %s", len(words), path)
        return cls(words)

    @property
    def available(self) -> bool:
        return self.error is None

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def is_valid_word(self, word: str) -> bool:
        if not word:
            return False
        return word.lower() in self._words

    @staticmethod
    def can_form_from_letters(word: str, available: Letters) -> bool:
        """True if every letter of ``word`` is covered by ``available``.

        ``available`` is a letter -> count mapping, or anything countable
        (a string or a list of letters).
        """
        if not isinstance(available, Mapping):
            available = Counter(available)
        for ch, count in Counter(word).items():
            if available.get(ch, 0) < count:
                return False
        return True
