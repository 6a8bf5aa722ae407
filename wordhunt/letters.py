"""
Letter accounting for a puzzle session.

A session owns two multisets: the fixed puzzle letters and the append-only
log of letters consumed by accepted words. Everything here is a pure function
of the session as it is at call time; nothing mutates it.
"""

from __future__ import annotations
import json
import logging
from collections import Counter
from typing import TYPE_CHECKING, Any, List

from .errors import MalformedSessionState

if TYPE_CHECKING:
    from .schemas import PuzzleSession

logger = logging.getLogger(__name__)


def parse_used_letters(raw: Any) -> List[str]:
    """
    Turn a stored ledger into a list of characters.

    Accepts a list/tuple of characters or a JSON-encoded list of them.
    Raises MalformedSessionState for anything else.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw) if raw.strip() else []
        except ValueError as exc:
            raise MalformedSessionState(f"undecodable used letters: {raw!r}") from exc
    if not isinstance(raw, (list, tuple)):
        raise MalformedSessionState(f"used letters must be a list, got {type(raw).__name__}")
    if not all(isinstance(ch, str) and len(ch) == 1 for ch in raw):
        raise MalformedSessionState(f"used letters must be single characters: {raw!r}")
    return [ch.lower() for ch in raw]


def decode_used_letters(raw: Any) -> List[str]:
    """Like parse_used_letters, but a malformed ledger is treated as empty."""
    try:
        return parse_used_letters(raw)
    except MalformedSessionState as exc:
        logger.warning("Ignoring malformed used letters ledger: %s", exc)
        return []


def available_letters(session: PuzzleSession) -> Counter:
    # Counter subtraction drops counts at or below zero
    return Counter(session.puzzle.lower()) - Counter(session.usedLetters)


def can_use_word(word: str, session: PuzzleSession) -> bool:
    available = available_letters(session)
    for ch, count in Counter(word.lower()).items():
        if available[ch] < count:
            logger.debug("Cannot form %r in game %s, short of %r", word, session.id, ch)
            return False
    return True


def append_used(word: str, session: PuzzleSession) -> List[str]:
    return [*session.usedLetters, *word.lower()]


def remaining_letters(session: PuzzleSession) -> str:
    """
    Puzzle letters not yet consumed, in their original order.

    Each used letter removes its first remaining occurrence from the puzzle.
    Used letters missing from the puzzle are ignored.
    """
    puzzle = list(session.puzzle.lower())
    for ch in session.usedLetters:
        if ch in puzzle:
            puzzle.remove(ch)
    return ''.join(puzzle)
