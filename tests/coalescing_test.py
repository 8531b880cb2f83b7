from __future__ import annotations

import threading

import pytest

from weather_core.errors import ProviderError
from weather_core.services.coalescing import CoalescingLookup
from weather_core.services.weather import WeatherLookupService


class _BlockingProvider:
    """Provider that holds the first fetch until released."""

    def __init__(self, payload: dict) -> None:
        self.payload = payload
        self.calls = 0
        self.started = threading.Event()
        self.release = threading.Event()

    def fetch_current(self, location: str) -> dict:
        self.calls += 1
        self.started.set()
        self.release.wait(timeout=5)
        return self.payload


class _FailingService:
    def lookup(self, location: str):
        raise ProviderError("boom", status=502)


def test_concurrent_lookups_share_one_fetch(london_payload):
    provider = _BlockingProvider(london_payload)
    lookup = CoalescingLookup(WeatherLookupService(provider=provider))
    results = []

    def worker():
        results.append(lookup.lookup("London"))

    first = threading.Thread(target=worker)
    first.start()
    assert provider.started.wait(timeout=5)
    assert lookup.pending() == 1

    second = threading.Thread(target=worker)
    second.start()
    provider.release.set()
    first.join(timeout=5)
    second.join(timeout=5)

    assert provider.calls == 1
    assert len(results) == 2
    assert results[0] == results[1]
    assert lookup.pending() == 0


def test_failure_is_raised_and_inflight_entry_cleared():
    lookup = CoalescingLookup(_FailingService())

    with pytest.raises(ProviderError):
        lookup.lookup("London")

    assert lookup.pending() == 0
