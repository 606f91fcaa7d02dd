"""
Time-windowed in-process cache for weather payloads.
"""
import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional, Tuple

from ...common.exceptions import WeatherProviderError
from ...common.metrics import MetricsCollector

@dataclass
class CacheEntry:
    value: Any
    expires_at: float


def make_key(variant: str, lat: float, lon: float, ttl: float, now: float) -> Tuple:
    """
    Key by variant, coordinates (~11 m precision) and the TTL-sized time bucket.
    """
    bucket = int(now // ttl) if ttl > 0 else 0
    return (variant, round(lat, 4), round(lon, 4), bucket)


class WeatherCache:
    """
    TTL cache safe for concurrent coroutines.
    At most one fetch is in flight per key; failed fetches are not stored.
    """

    def __init__(self, metrics: Optional[MetricsCollector] = None,
                 timer: Callable[[], float] = time.time):
        self._entries: Dict[Hashable, CacheEntry] = {}
        self._inflight: Dict[Hashable, asyncio.Future] = {}
        self._lock = asyncio.Lock()
        self.metrics = metrics
        self.timer = timer

    async def get_or_fetch(self, variant: str, lat: float, lon: float, ttl: float,
                           fetch: Callable[[], Awaitable[Any]]) -> Any:
        now = self.timer()
        key = make_key(variant, lat, lon, ttl, now)

        async with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.expires_at > now:
                self._record(hit=True)
                return entry.value

            future = self._inflight.get(key)
            owner = future is None
            if owner:
                future = asyncio.get_running_loop().create_future()
                self._inflight[key] = future
            self._record(hit=False)

        if not owner:
            # Shield so a cancelled waiter does not cancel the shared fetch
            return await asyncio.shield(future)

        try:
            value = await fetch()
        except asyncio.CancelledError:
            # Waiters get a provider error instead of the owner's cancellation
            self._inflight.pop(key, None)
            future.set_exception(WeatherProviderError("weather fetch cancelled"))
            future.exception()
            raise
        except Exception as e:
            async with self._lock:
                self._inflight.pop(key, None)
            future.set_exception(e)
            # Mark retrieved so an unawaited future does not warn
            future.exception()
            raise

        async with self._lock:
            self._inflight.pop(key, None)
            self._entries[key] = CacheEntry(value=value, expires_at=now + ttl)
            self._prune(now)
        future.set_result(value)
        return value

    def clear(self):
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _prune(self, now: float):
        expired = [k for k, e in self._entries.items() if e.expires_at <= now]
        for k in expired:
            del self._entries[k]

    def _record(self, hit: bool):
        if self.metrics is None:
            return
        if hit:
            self.metrics.record_cache_hit()
        else:
            self.metrics.record_cache_miss()
