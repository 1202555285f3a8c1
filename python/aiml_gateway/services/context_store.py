# Context Store - per-session conversation memory
# Process-local: turns are lost on restart and never expire.

import logging
from typing import Dict, Iterable, List

from ..models import ConversationTurn

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 10


class ConversationContextStore:
    """
    Keyed append-only log of conversation turns, capped at the most recent
    `limit` turns per session (oldest evicted first).

    Concurrent appends for the same session are not serialized; two
    overlapping requests may interleave their turns.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self._sessions: Dict[str, List[ConversationTurn]] = {}

    def append(self, session_id: str, turn: ConversationTurn) -> None:
        turns = self._sessions.setdefault(session_id, [])
        turns.append(turn)
        if len(turns) > self.limit:
            del turns[: len(turns) - self.limit]

    def extend(self, session_id: str, turns: Iterable[ConversationTurn]) -> None:
        for turn in turns:
            self.append(session_id, turn)

    def get(self, session_id: str) -> List[ConversationTurn]:
        """Copy of the session's turns, oldest first; empty for unknown sessions"""
        return list(self._sessions.get(session_id, []))

    def has(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
