# candlelens/core/pair_memory.py
import threading
from typing import Dict, List, Optional

DEFAULT_SESSION = "default"


class PairMemoryStore:
    """
    In-process store of the last successfully extracted pair, per session.

    Concurrent requests on the same session are last-writer-wins; the lock
    only keeps the mapping itself consistent. Nothing is persisted.
    """
    def __init__(self):
        self._lock = threading.RLock()
        self._pairs: Dict[str, str] = {}

    @staticmethod
    def _key(session: Optional[str]) -> str:
        return (session or "").strip() or DEFAULT_SESSION

    def get(self, session: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._pairs.get(self._key(session))

    def remember(self, session: Optional[str], pair: str):
        if not pair:
            raise ValueError("Cannot remember an empty pair")
        with self._lock:
            self._pairs[self._key(session)] = pair

    def forget(self, session: Optional[str] = None):
        with self._lock:
            self._pairs.pop(self._key(session), None)

    def clear(self):
        with self._lock:
            self._pairs.clear()

    def sessions(self) -> List[str]:
        with self._lock:
            return sorted(self._pairs)
