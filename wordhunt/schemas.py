from __future__ import annotations
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StringConstraints, field_validator

from .config import MAX_WORD_LENGTH, MIN_WORD_LENGTH
from .letters import decode_used_letters


class Submission(BaseModel):
    word: str
    score: int


class PuzzleSession(BaseModel):
    id: str
    playerName: str = Field(..., min_length=1)
    puzzle: str = Field(..., min_length=1)
    usedLetters: List[str] = []
    score: int = Field(0, ge=0)
    completed: bool = False
    submissions: List[Submission] = []

    # Stored ledgers may arrive JSON-encoded; decode once here
    @field_validator('usedLetters', mode='before')
    @classmethod
    def _decode_used_letters(cls, value):
        return decode_used_letters(value)


class Rejection(str, Enum):
    VALIDATION_ERROR = 'validation_error'
    SESSION_COMPLETED = 'session_completed'
    INVALID_WORD = 'invalid_word'
    LETTERS_UNAVAILABLE = 'letters_unavailable'


REJECTION_MESSAGES = {
    Rejection.VALIDATION_ERROR: f"Word must be {MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} letters a-z.",
    Rejection.SESSION_COMPLETED: 'Game already finished.',
    Rejection.INVALID_WORD: 'Invalid English word.',
    Rejection.LETTERS_UNAVAILABLE: 'Letters not available or reused.',
}


class SubmissionResult(BaseModel):
    accepted: bool
    word: str
    points: int = 0
    totalScore: int = 0
    reason: Optional[Rejection] = None

    @property
    def message(self) -> str:
        if self.accepted:
            return 'Word accepted'
        return REJECTION_MESSAGES[self.reason]


class FinishResult(BaseModel):
    finalScore: int
    remainingLetters: str
    possibleRemainingWords: List[str]


# Request bodies

class StartRequest(BaseModel):
    playerName: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class SubmitRequest(BaseModel):
    word: str = Field(..., min_length=MIN_WORD_LENGTH, max_length=MAX_WORD_LENGTH, pattern=r'^[A-Za-z]+$')


# Leaderboard rows

class WordScore(BaseModel):
    word: str
    score: int


class PlayerScore(BaseModel):
    id: str
    playerName: str
    score: int
