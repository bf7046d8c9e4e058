import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional

from .errors import SessionBusy, SessionNotFound
from .session import GameSession

log = logging.getLogger(__name__)


class _Slot:
    __slots__ = ('session', 'lock')

    def __init__(self, session: GameSession):
        self.session = session
        self.lock = threading.Lock()


class SessionRegistry:
    """Games in progress keyed by session id.

    Each session has its own lock so a roll or mark on one game never waits
    on another. ``_map_lock`` only guards the dict itself and is never held
    while a session lock is being waited on.
    """

    def __init__(self, lock_timeout: float = 5.0, session_factory: Callable[[], GameSession] = GameSession):
        self.lock_timeout = lock_timeout
        self._session_factory = session_factory
        self._slots: Dict[str, _Slot] = {}
        self._map_lock = threading.Lock()

    def __contains__(self, session_id) -> bool:
        with self._map_lock:
            return session_id in self._slots

    def __len__(self) -> int:
        with self._map_lock:
            return len(self._slots)

    def get(self, session_id: str) -> Optional[GameSession]:
        with self._map_lock:
            slot = self._slots.get(session_id)
        return slot.session if slot else None

    def get_or_create(self, session_id: str) -> GameSession:
        with self._map_lock:
            slot = self._slots.get(session_id)
            if slot is None:
                slot = _Slot(self._session_factory())
                self._slots[session_id] = slot
                log.info(f"[session-new] id={session_id} live={len(self._slots)}")
        return slot.session

    def remove(self, session_id: str) -> None:
        with self._map_lock:
            removed = self._slots.pop(session_id, None)
        if removed is not None:
            log.info(f"[session-remove] id={session_id}")

    def clear(self) -> None:
        with self._map_lock:
            self._slots.clear()

    @contextmanager
    def locked(self, session_id: str) -> Iterator[GameSession]:
        """Hold ``session_id``'s lock for the duration of the block.

        Raises SessionNotFound for unknown ids, including a session removed
        while this caller was waiting, and SessionBusy on lock timeout.
        """
        with self._map_lock:
            slot = self._slots.get(session_id)
        if slot is None:
            raise SessionNotFound(session_id)

        if not slot.lock.acquire(timeout=self.lock_timeout):
            log.warning(f"[lock-timeout] id={session_id} timeout={self.lock_timeout}s")
            raise SessionBusy(session_id, self.lock_timeout)
        try:
            with self._map_lock:
                current = self._slots.get(session_id)
            if current is not slot:
                raise SessionNotFound(session_id)
            yield slot.session
        finally:
            slot.lock.release()
