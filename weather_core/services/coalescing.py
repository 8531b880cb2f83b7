from __future__ import annotations

import logging
from concurrent.futures import Future
from threading import Lock
from typing import Any, Dict, Optional

from ..entities import WeatherSnapshot


class CoalescingLookup:
    """Share one in-flight lookup between concurrent callers of the same location."""

    def __init__(self, service: Any, logger: Optional[logging.Logger] = None) -> None:
        self.service = service
        self._inflight: Dict[str, Future] = {}
        self._lock = Lock()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def lookup(self, location: str) -> WeatherSnapshot:
        key = (location or "").strip()
        with self._lock:
            future = self._inflight.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._inflight[key] = future

        if not owner:
            self._log.debug("Joining in-flight lookup for %s", key)
            return future.result()

        try:
            snapshot = self.service.lookup(location)
        except BaseException as exc:
            future.set_exception(exc)
            raise
        else:
            future.set_result(snapshot)
            return snapshot
        finally:
            with self._lock:
                self._inflight.pop(key, None)

    def pending(self) -> int:
        with self._lock:
            return len(self._inflight)


__all__ = ["CoalescingLookup"]
