from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Any, Dict, Optional, Protocol, Tuple

from .entities import WeatherSnapshot
from .errors import CacheUnavailable


class CacheBackend(Protocol):
    """Anything with Django-cache style ``get``/``set``."""

    def get(self, key: str) -> Any:
        ...

    def set(self, key: str, value: Any, timeout: float) -> Any:
        ...


class WeatherCache:
    """A lightweight TTL cache emulating Redis behaviour for tests."""

    def __init__(self, time_func=time.monotonic) -> None:
        self._time_func = time_func
        self._storage: Dict[str, Tuple[float, Any]] = {}
        self._lock = Lock()

    def get(self, key: str) -> Any:
        with self._lock:
            item = self._storage.get(key)
            if not item:
                return None
            expires_at, value = item
            if expires_at <= self._time_func():
                self._storage.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any, ttl: float) -> None:
        with self._lock:
            now = self._time_func()
            self._purge_expired(now)
            self._storage[key] = (now + ttl, value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._storage.pop(key, None)

    def expires_at(self, key: str) -> Optional[float]:
        with self._lock:
            item = self._storage.get(key)
        if not item:
            return None
        return item[0]

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def _purge_expired(self, now: float) -> None:
        # caller holds the lock
        expired = [key for key, (expires_at, _) in self._storage.items() if expires_at <= now]
        for key in expired:
            del self._storage[key]


class WeatherCacheStore:
    """Snapshot store over a cache backend.

    Misses, expired entries, undecodable entries and backend failures all
    come back from :meth:`get` as ``None``. :meth:`put` reports failure with
    ``False`` instead of raising.
    """

    def __init__(self, backend: Optional[CacheBackend] = None, *, logger: Optional[logging.Logger] = None) -> None:
        self.backend = backend if backend is not None else WeatherCache()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def get(self, key: str) -> Optional[WeatherSnapshot]:
        try:
            payload = self._read(key)
        except CacheUnavailable as exc:
            self._log.warning("Cache read for %s failed, treating as miss: %s", key, exc)
            return None
        if payload is None:
            return None
        try:
            snapshot = WeatherSnapshot.from_dict(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            self._log.warning("Discarding undecodable cache entry for %s: %s", key, exc)
            return None
        self._log.debug("Cache hit for %s", key)
        return snapshot

    def put(self, key: str, snapshot: WeatherSnapshot, ttl: float) -> bool:
        try:
            self._write(key, snapshot.to_dict(), ttl)
        except CacheUnavailable as exc:
            self._log.error("Error adding %s to cache: %s", key, exc)
            return False
        self._log.debug("Stored %s in cache for %ss", key, ttl)
        return True

    # Helpers ------------------------------------------------------------
    def _read(self, key: str) -> Any:
        try:
            return self.backend.get(key)
        except Exception as exc:  # noqa: BLE001 - backend specific connection errors
            raise CacheUnavailable(f"cache read failed: {exc}") from exc

    def _write(self, key: str, payload: Dict[str, Any], ttl: float) -> None:
        try:
            self.backend.set(key, payload, ttl)
        except Exception as exc:  # noqa: BLE001 - backend specific connection errors
            raise CacheUnavailable(f"cache write failed: {exc}") from exc


__all__ = ["CacheBackend", "WeatherCache", "WeatherCacheStore"]
