"""
In-memory fixed-window rate limiting.

`ClientWindowStore` keeps one `ClientRecord` per client identifier (the
request's source address) behind a single lock, so admits from event-loop
tasks and threadpool workers never interleave. A background asyncio task
sweeps out clients that have been idle longer than the idle threshold.

Window policy: the count is compared with `count > limit` before it is
incremented, so each window admits `limit + 1` requests before the first
denial. This matches the behaviour the API has always shipped with and is
kept deliberately.
"""
import asyncio
import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SECONDS = 60
DEFAULT_IDLE_SECONDS = 600
DEFAULT_CLEANUP_INTERVAL_SECONDS = 300


@dataclass
class ClientRecord:
    """Request counter for one client."""
    count: int
    window_reset_at: float
    last_seen_at: float


@dataclass(frozen=True)
class Decision:
    """Outcome of a single admit() call."""
    allowed: bool
    retry_after: int = 0
    count: int = 0


class ClientWindowStore:
    """
    Process-wide mapping from client identifier to its request window.

    Timestamps come from `clock` (monotonic by default) so tests can drive
    time explicitly by passing `now`.
    """

    def __init__(
        self,
        window_seconds: int = DEFAULT_WINDOW_SECONDS,
        idle_seconds: int = DEFAULT_IDLE_SECONDS,
        cleanup_interval_seconds: int = DEFAULT_CLEANUP_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.window_seconds = window_seconds
        self.idle_seconds = idle_seconds
        self.cleanup_interval_seconds = cleanup_interval_seconds
        self._clock = clock
        self._clients: Dict[str, ClientRecord] = {}
        self._lock = threading.Lock()
        self._eviction_task: Optional[asyncio.Task] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def __contains__(self, client_id: str) -> bool:
        with self._lock:
            return client_id in self._clients

    def get(self, client_id: str) -> Optional[ClientRecord]:
        """Return a copy of the client's record, if any."""
        with self._lock:
            record = self._clients.get(client_id)
            if record is None:
                return None
            return ClientRecord(record.count, record.window_reset_at, record.last_seen_at)

    def admit(self, client_id: str, limit: int, now: Optional[float] = None) -> Decision:
        """
        Check and count one request from `client_id`.

        The lookup, comparison and increment happen under one lock, so
        concurrent callers for the same client each observe a distinct count.
        """
        if now is None:
            now = self._clock()

        with self._lock:
            record = self._clients.get(client_id)

            if record is None:
                self._clients[client_id] = ClientRecord(
                    count=1,
                    window_reset_at=now + self.window_seconds,
                    last_seen_at=now
                )
                return Decision(allowed=True, count=1)

            record.last_seen_at = now

            if now >= record.window_reset_at:
                record.count = 1
                record.window_reset_at = now + self.window_seconds
                return Decision(allowed=True, count=1)

            if record.count > limit:
                retry_after = max(1, math.ceil(record.window_reset_at - now))
                return Decision(allowed=False, retry_after=retry_after, count=record.count)

            record.count += 1
            return Decision(allowed=True, count=record.count)

    def evict_idle(self, now: Optional[float] = None) -> int:
        """Remove every client idle for longer than `idle_seconds`."""
        if now is None:
            now = self._clock()

        with self._lock:
            stale = [
                client_id
                for client_id, record in self._clients.items()
                if now - record.last_seen_at > self.idle_seconds
            ]
            for client_id in stale:
                del self._clients[client_id]

        return len(stale)

    async def _eviction_loop(self):
        while True:
            await asyncio.sleep(self.cleanup_interval_seconds)
            removed = self.evict_idle()
            logger.info(f"Rate limiter cleanup completed: {removed} idle clients removed")

    def start(self) -> asyncio.Task:
        """
        Start the background eviction task on the running event loop.

        Calling this again while the task is alive returns the same task.
        """
        if self._eviction_task is None or self._eviction_task.done():
            self._eviction_task = asyncio.create_task(self._eviction_loop())
            logger.info(
                f"Rate limiter eviction started "
                f"(every {self.cleanup_interval_seconds}s, idle > {self.idle_seconds}s)"
            )
        return self._eviction_task

    async def stop(self):
        """Cancel the eviction task and wait for it to finish."""
        task = self._eviction_task
        self._eviction_task = None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Rate limiter eviction stopped")

    @property
    def running(self) -> bool:
        return self._eviction_task is not None and not self._eviction_task.done()


class RateLimiter:
    """Requests-per-minute policy over a shared ClientWindowStore."""

    def __init__(self, store: ClientWindowStore, requests_per_minute: int):
        if requests_per_minute < 0:
            raise ValueError("requests_per_minute must be >= 0")
        self.store = store
        self.requests_per_minute = requests_per_minute

    def admit(self, client_id: str, now: Optional[float] = None) -> Decision:
        decision = self.store.admit(client_id, self.requests_per_minute, now=now)
        if not decision.allowed:
            logger.warning(
                f"Rate limit exceeded for {client_id}: "
                f"count={decision.count}, retry_after={decision.retry_after}s"
            )
        return decision
