from __future__ import annotations
from collections import Counter
from typing import Set

from .dictionary import Dictionary


def possible_words(dictionary: Dictionary, letters: str) -> Set[str]:
    """Every dictionary word that can be spelled from ``letters``. Unordered."""
    pool = Counter(letters.lower())
    size = sum(pool.values())
    if not size:
        return set()
    return {
        word for word in dictionary
        if len(word) <= size and dictionary.can_form_from_letters(word, pool)
    }
