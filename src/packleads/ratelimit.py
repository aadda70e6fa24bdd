"""In-memory sliding-window rate limiting."""

from __future__ import annotations

from collections import defaultdict
from datetime import UTC, datetime, timedelta

__all__ = ["SlidingWindowRateLimiter"]


class SlidingWindowRateLimiter:
    """Limit how many times an action may happen per key within a window.

    Checking whether an action is allowed does not count as an action. Call
    `record` once the action has actually succeeded.

    State is kept in process memory, so limits are per worker process. Keys
    whose actions have all expired are swept at most once per window, so
    memory stays proportional to the keys active in the last two windows.

    Parameters
    ----------
    limit
        Number of recorded actions allowed within the window.
    window
        Length of the sliding window.
    """

    def __init__(self, limit: int, window: timedelta) -> None:
        if limit < 1:
            raise ValueError("Rate limit must be at least 1")
        if window <= timedelta(0):
            raise ValueError("Rate limit window must be positive")
        self.limit = limit
        self.window = window
        self._events: defaultdict[str, list[datetime]] = defaultdict(list)
        self._last_sweep: datetime | None = None

    def __len__(self) -> int:
        return len(self._events)

    def is_allowed(self, key: str, now: datetime | None = None) -> bool:
        """Whether another action is allowed for this key.

        Expired timestamps for the key are discarded as a side effect.

        Parameters
        ----------
        key
            Identity being limited, such as a client IP address.
        now
            Current time, defaulting to the current UTC time.
        """
        recent = self._prune(key, now or datetime.now(tz=UTC))
        return len(recent) < self.limit

    def record(self, key: str, now: datetime | None = None) -> None:
        """Record an action for this key."""
        now = now or datetime.now(tz=UTC)
        self._sweep(now)
        self._events[key].append(now)

    def reset(self) -> None:
        """Forget all recorded actions."""
        self._events.clear()
        self._last_sweep = None

    def _prune(self, key: str, now: datetime) -> list[datetime]:
        cutoff = now - self.window
        recent = [t for t in self._events.get(key, []) if t > cutoff]
        if recent:
            self._events[key] = recent
        else:
            self._events.pop(key, None)
        return recent

    def _sweep(self, now: datetime) -> None:
        if self._last_sweep and now - self._last_sweep < self.window:
            return
        cutoff = now - self.window
        expired = [k for k, v in self._events.items() if max(v) <= cutoff]
        for key in expired:
            del self._events[key]
        self._last_sweep = now
