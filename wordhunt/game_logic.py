from __future__ import annotations
import logging
import random
from typing import List, Optional

from .config import MAX_WORD_LENGTH, MIN_WORD_LENGTH, PUZZLE_LENGTH
from .dictionary import Dictionary
from .letters import append_used, can_use_word
from .schemas import PuzzleSession, Rejection, Submission, SubmissionResult

logger = logging.getLogger(__name__)


def generate_tile_bag() -> List[str]:
    return (
        ['a']*9 + ['b']*2 + ['c']*2 + ['d']*4 + ['e']*12 +
        ['f']*2 + ['g']*3 + ['h']*2 + ['i']*9 + ['j']*1 +
        ['k']*1 + ['l']*4 + ['m']*2 + ['n']*6 + ['o']*8 +
        ['p']*2 + ['q']*1 + ['r']*6 + ['s']*4 + ['t']*6 +
        ['u']*4 + ['v']*2 + ['w']*2 + ['x']*1 + ['y']*2 + ['z']*1
    )


def generate_puzzle(length: int = PUZZLE_LENGTH, rng: Optional[random.Random] = None) -> str:
    # Drawing from a weighted bag keeps enough vowels in play
    rng = rng or random
    bag = generate_tile_bag()
    if not 1 <= length <= len(bag):
        raise ValueError(f"Puzzle length must be between 1 and {len(bag)}, got {length}")
    rng.shuffle(bag)
    return ''.join(bag[:length])


def is_well_formed(word: Optional[str]) -> bool:
    if not word:
        return False
    return MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH and word.isascii() and word.isalpha()


def judge_submission(word: Optional[str], session: PuzzleSession, dictionary: Dictionary) -> Optional[Rejection]:
    """Return why ``word`` cannot be played in ``session``, or None if it can."""
    word = (word or '').strip().lower()
    if not is_well_formed(word):
        return Rejection.VALIDATION_ERROR
    if session.completed:
        return Rejection.SESSION_COMPLETED
    if not dictionary.is_valid_word(word):
        return Rejection.INVALID_WORD
    if not can_use_word(word, session):
        return Rejection.LETTERS_UNAVAILABLE
    return None


def apply_submission(word: Optional[str], session: PuzzleSession, dictionary: Dictionary) -> SubmissionResult:
    """
    Judge a word and, if accepted, record it on the session.

    The submission record, score and used letters are computed first and then
    assigned together, so a caller never sees one without the others.
    """
    word = (word or '').strip().lower()
    reason = judge_submission(word, session, dictionary)
    if reason is not None:
        logger.debug("Rejected %r in game %s: %s", word, session.id, reason.value)
        return SubmissionResult(accepted=False, word=word, totalScore=session.score, reason=reason)

    points = len(word)
    submissions = [*session.submissions, Submission(word=word, score=points)]
    score = session.score + points
    used = append_used(word, session)

    session.submissions, session.score, session.usedLetters = submissions, score, used
    logger.info("Accepted %r in game %s for %s points (total %s)", word, session.id, points, score)
    return SubmissionResult(accepted=True, word=word, points=points, totalScore=score)
