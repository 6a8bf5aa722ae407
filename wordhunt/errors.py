from __future__ import annotations


class DictionaryUnavailable(Exception):
    """The word list could not be read. The dictionary runs in degraded mode."""


class MalformedSessionState(ValueError):
    """A stored used-letters ledger is neither a list nor a JSON list of characters."""


class SessionNotFound(KeyError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Game {self.session_id} not found"
