"""
Session-scoped pagination state for resumable searches.

Each (session id, query fingerprint) pair owns a cursor that advances by one
page on every read and expires after a period of inactivity.
"""

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from ..constants import PagingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PagingKey:
    """Identity of a resumable search: session id plus query fingerprint."""

    session_id: str
    fingerprint: str


@dataclass
class PagingState:
    """Where the next read for a key resumes."""

    offset: int
    updated_at: float


@dataclass(frozen=True)
class PageWindow:
    """Offsets handed back to the caller for one read."""

    offset: int
    next_offset: int


@dataclass
class _KeyLock:
    """Per-key lock plus the number of readers holding or waiting on it."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class PaginationStore:
    """In-memory, TTL-expiring map from PagingKey to PagingState.

    Features:
    - Lazy expiry on access, plus an explicit purge_expired() sweep
    - Per-key locking so concurrent reads of one key never share an offset
    - Bounded key count with least-recently-updated eviction
    """

    def __init__(
        self,
        ttl_seconds: float = PagingConfig.TTL_SECONDS,
        max_keys: int = PagingConfig.MAX_KEYS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._max_keys = max_keys
        self._clock = clock
        self._states: OrderedDict[PagingKey, PagingState] = OrderedDict()
        self._key_locks: dict[PagingKey, _KeyLock] = {}
        self._lock = threading.Lock()

    @contextmanager
    def _hold(self, key: PagingKey) -> Iterator[_KeyLock]:
        """Hold the lock for key. The entry stays registered while anyone uses it."""
        with self._lock:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = _KeyLock()
                self._key_locks[key] = entry
            entry.users += 1
        try:
            with entry.lock:
                yield entry
        finally:
            with self._lock:
                entry.users -= 1
                if key not in self._states:
                    self._drop_lock(key)

    def _drop_lock(self, key: PagingKey) -> None:
        """Forget the lock for key unless a reader holds or awaits it. Caller holds _lock."""
        entry = self._key_locks.get(key)
        if entry is not None and entry.users == 0:
            del self._key_locks[key]

    def _is_expired(self, state: PagingState, now: float) -> bool:
        return now - state.updated_at > self._ttl

    def _put(self, key: PagingKey, state: PagingState) -> None:
        """Store state as most recently updated, evicting the oldest key at capacity."""
        with self._lock:
            if key in self._states:
                self._states.move_to_end(key)
            elif len(self._states) >= self._max_keys:
                evicted, _ = self._states.popitem(last=False)
                self._drop_lock(evicted)
                logger.debug("Evicted paging state for session %s", evicted.session_id)
            self._states[key] = state

    def _discard(self, key: PagingKey) -> None:
        with self._lock:
            self._states.pop(key, None)

    def get_and_advance(
        self,
        key: PagingKey,
        page_size: int,
        reset: bool = False,
        explicit_offset: int | None = None,
    ) -> PageWindow:
        """Return the current offset for key and advance the cursor by page_size.

        Args:
            key: Session id + query fingerprint
            page_size: Items per page (caller guarantees > 0)
            reset: Discard any stored cursor before reading
            explicit_offset: Offset to use for this read, overriding stored state

        Returns:
            PageWindow with the offset to read from and the offset stored for
            the next read
        """
        with self._hold(key):
            now = self._clock()
            with self._lock:
                state = self._states.get(key)
            if state is not None and self._is_expired(state, now):
                self._discard(key)
                state = None
            if reset:
                self._discard(key)
                state = None

            if explicit_offset is not None:
                current = explicit_offset
            elif state is not None:
                current = state.offset
            else:
                current = 0

            # No notion of "end of results" here; the caller decides whether to
            # surface next_offset.
            next_offset = current + page_size
            self._put(key, PagingState(offset=next_offset, updated_at=now))
            return PageWindow(offset=current, next_offset=next_offset)

    def clear_session(self, session_id: str) -> int:
        """Drop every cursor belonging to session_id. Returns the number removed."""
        with self._lock:
            keys = [k for k in self._states if k.session_id == session_id]
            for k in keys:
                del self._states[k]
                self._drop_lock(k)
        return len(keys)

    def purge_expired(self) -> int:
        """Remove all expired cursors. Returns the number removed."""
        now = self._clock()
        with self._lock:
            expired = [k for k, s in self._states.items() if self._is_expired(s, now)]
            for k in expired:
                del self._states[k]
                self._drop_lock(k)
        return len(expired)

    def peek(self, key: PagingKey) -> PagingState | None:
        """Stored state for key, or None if absent or expired. Does not mutate."""
        with self._lock:
            state = self._states.get(key)
        if state is None or self._is_expired(state, self._clock()):
            return None
        return state

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, key: object) -> bool:
        return key in self._states
