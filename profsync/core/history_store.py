# Role: In-memory conversation log. Owns the list of ConversationTurn objects for the process lifetime:
# append on every request, read back only the most recent window. Nothing is evicted or persisted.

from __future__ import annotations

import threading
from typing import List

from profsync.models.conversation_turn import ConversationTurn


class ConversationHistoryStore:
    def __init__(self, window_size: int = 5) -> None:
        self._turns: List[ConversationTurn] = []
        self._window_size = window_size
        # Sync routes run in a thread pool, so append/read share a lock.
        self._lock = threading.Lock()

    def record(self, message: str, classification: str) -> ConversationTurn:
        turn = ConversationTurn(message=message, classification=classification)
        with self._lock:
            self._turns.append(turn)
        return turn

    def recent_window(self) -> List[ConversationTurn]:
        # Last N turns in insertion order (fewer when history is shorter).
        with self._lock:
            return list(self._turns[-self._window_size :])

    def __len__(self) -> int:
        with self._lock:
            return len(self._turns)
