import pytest

from wordhunt.dictionary import Dictionary
from wordhunt.schemas import PuzzleSession

WORDS = ["apple", "pal", "ape", "pea", "leap", "pale", "lava", "val", "al", "la", "lap", "pep", "ale"]


@pytest.fixture
def dictionary():
    return Dictionary.from_words(WORDS)


@pytest.fixture
def make_session():
    def _make(puzzle="apple", used=None, score=0, completed=False):
        return PuzzleSession(
            id="g1",
            playerName="Test Student",
            puzzle=puzzle,
            usedLetters=used if used is not None else [],
            score=score,
            completed=completed,
        )
    return _make
