from __future__ import annotations
import json
from typing import Dict, Iterator

from ..errors import SessionNotFound
from ..schemas import PuzzleSession


class SessionStore:
    """In-memory stand-in for the games table.

    Records are kept the way a database row would hold them, with the used
    letters ledger JSON-encoded. Loading decodes it once into a PuzzleSession.
    """

    def __init__(self):
        self._rows: Dict[str, dict] = {}

    def save(self, session: PuzzleSession) -> None:
        row = session.model_dump()
        row['usedLetters'] = json.dumps(row['usedLetters'])
        self._rows[session.id] = row

    def load(self, session_id: str) -> PuzzleSession:
        row = self._rows.get(session_id)
        if row is None:
            raise SessionNotFound(session_id)
        return PuzzleSession.model_validate(row)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._rows

    def __iter__(self) -> Iterator[PuzzleSession]:
        for session_id in list(self._rows):
            yield self.load(session_id)
