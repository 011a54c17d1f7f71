import math
import threading
import time
from collections import deque


class InMemoryRateLimiter:
    """
    Sliding-window limiter keyed by an arbitrary string (client ip + path).
    Each key keeps the timestamps of its recent hits; state is per process.
    Keys with no hit inside the last window are swept at most once per window.
    """

    def __init__(self, clock=time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._hits)

    def _sweep(self, cutoff: float) -> None:
        stale = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in stale:
            del self._hits[key]

    def allow(self, key: str, limit: int, window_seconds: int) -> tuple[bool, int]:
        """Record a hit for key if under limit. Returns (allowed, retry_after_seconds)."""
        now = self._clock()
        cutoff = now - window_seconds
        with self._lock:
            if now - self._last_sweep >= window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now
            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= cutoff:
                hits.popleft()
            if len(hits) >= limit:
                # the oldest hit leaving the window frees a slot
                return False, max(1, math.ceil(hits[0] - cutoff))
            hits.append(now)
            return True, 0

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


rate_limiter = InMemoryRateLimiter()
