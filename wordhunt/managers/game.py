from __future__ import annotations
import asyncio
import logging
import uuid
from typing import Dict, List, Optional

from ..config import LEADERBOARD_SIZE
from ..dictionary import Dictionary
from ..enumerator import possible_words
from ..errors import SessionNotFound
from ..game_logic import apply_submission, generate_puzzle
from ..letters import remaining_letters
from ..schemas import FinishResult, PlayerScore, PuzzleSession, SubmissionResult, WordScore
from .store import SessionStore

logger = logging.getLogger(__name__)


class GameManager:
    def __init__(self, sio, dictionary: Dictionary, store: Optional[SessionStore] = None):
        self.sio = sio
        self.dictionary = dictionary
        self.store = store or SessionStore()
        # one lock per game; submissions and finish for a game never interleave
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lock(self, session_id: str) -> asyncio.Lock:
        if session_id not in self.store:
            raise SessionNotFound(session_id)
        if session_id not in self._locks:
            self._locks[session_id] = asyncio.Lock()
        return self._locks[session_id]

    def get(self, session_id: str) -> PuzzleSession:
        return self.store.load(session_id)

    async def _broadcast(self, event: str, data, session_id: str):
        await self.sio.emit(event, data, room=session_id)

    async def start_session(self, player_name: str, puzzle: Optional[str] = None) -> PuzzleSession:
        session = PuzzleSession(
            id=uuid.uuid4().hex,
            playerName=player_name,
            puzzle=(puzzle or generate_puzzle()).lower(),
        )
        self.store.save(session)
        logger.info("Started game %s for %s with puzzle %s", session.id, player_name, session.puzzle)
        await self._broadcast('game:state', session.model_dump(), session.id)
        return session

    async def submit_word(self, session_id: str, word: str) -> SubmissionResult:
        async with self._lock(session_id):
            session = self.store.load(session_id)
            result = apply_submission(word, session, self.dictionary)
            if result.accepted:
                self.store.save(session)
        if result.accepted:
            await self._broadcast('word:accepted', result.model_dump(mode='json'), session_id)
        return result

    async def finish_session(self, session_id: str) -> FinishResult:
        async with self._lock(session_id):
            session = self.store.load(session_id)
            session.completed = True
            self.store.save(session)
            # completed games reject every submission, so the lock is no longer needed
            self._locks.pop(session_id, None)
        remaining = remaining_letters(session)
        # full dictionary scan; keep it off the event loop
        words = sorted(await asyncio.to_thread(possible_words, self.dictionary, remaining))
        result = FinishResult(
            finalScore=session.score,
            remainingLetters=remaining,
            possibleRemainingWords=words,
        )
        logger.info("Finished game %s with score %s, %s words left on the table", session_id, session.score, len(words))
        await self._broadcast('game:finished', result.model_dump(), session_id)
        return result

    def leaderboard(self, limit: int = LEADERBOARD_SIZE) -> List[WordScore]:
        # Best score per distinct word across every game
        best: Dict[str, int] = {}
        for session in self.store:
            for sub in session.submissions:
                best[sub.word] = max(best.get(sub.word, 0), sub.score)
        top = sorted(best.items(), key=lambda item: (-item[1], item[0]))[:limit]
        return [WordScore(word=w, score=s) for w, s in top]

    def player_leaderboard(self, limit: int = LEADERBOARD_SIZE) -> List[PlayerScore]:
        sessions = sorted(self.store, key=lambda s: (-s.score, s.playerName))[:limit]
        return [PlayerScore(id=s.id, playerName=s.playerName, score=s.score) for s in sessions]
