from __future__ import annotations

import logging
import math
from typing import Any, Dict, Mapping, Optional

from ..cache import WeatherCacheStore
from ..entities import Condition, CurrentConditions, Location, WeatherSnapshot
from ..errors import NormalizationError, UpstreamError

_FLOAT_FIELDS = (
    "temp_c",
    "temp_f",
    "wind_mph",
    "wind_kph",
    "pressure_mb",
    "pressure_in",
    "precip_mm",
    "precip_in",
    "feelslike_c",
    "feelslike_f",
    "windchill_c",
    "windchill_f",
    "heatindex_c",
    "heatindex_f",
    "dewpoint_c",
    "dewpoint_f",
    "vis_km",
    "vis_miles",
    "uv",
    "gust_mph",
    "gust_kph",
)
_INT_FIELDS = ("last_updated_epoch", "is_day", "wind_degree", "humidity", "cloud")


class WeatherLookupService:
    """Cache-aside lookup of current weather by location name.

    Concurrent misses for the same location each call the provider and each
    write the cache; the last write wins. Wrap the service in
    :class:`~weather_core.services.coalescing.CoalescingLookup` when at most
    one upstream call per location is required.
    """

    CURRENT_TTL = 60 * 60

    def __init__(
        self,
        *,
        provider: Any,
        cache: Optional[WeatherCacheStore] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self.cache = cache or WeatherCacheStore(logger=logger)
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def lookup(self, location: str) -> WeatherSnapshot:
        key = self._cache_key(location)
        cached = self.cache.get(key)
        if cached is not None:
            self._log.info("Returning cached weather data for %s", key)
            return cached

        self._log.info("No cached weather data for %s, fetching from provider", key)
        try:
            payload = self.provider.fetch_current(key)
            snapshot = normalize_payload(payload)
        except UpstreamError as exc:
            self._log.error("Failed to fetch weather data for %s: %s", key, exc)
            raise

        if not self.cache.put(key, snapshot, self.CURRENT_TTL):
            self._log.warning("Weather data for %s was not cached", key)
        return snapshot

    # Helpers ------------------------------------------------------------
    def _cache_key(self, location: str) -> str:
        key = (location or "").strip()
        if not key:
            raise ValueError("location must be provided")
        return key


def normalize_payload(payload: Mapping[str, Any]) -> WeatherSnapshot:
    """Map a provider payload onto a :class:`WeatherSnapshot`.

    The provider nests ``condition`` inside ``current``; it is lifted into
    :attr:`CurrentConditions.condition`.
    """
    if not isinstance(payload, Mapping):
        raise NormalizationError("payload is not an object")
    location = _section(payload, "location")
    current = _section(payload, "current")
    condition = _section(current, "condition", "current.condition")

    name = location.get("name")
    if not name:
        raise NormalizationError("missing location.name")

    return WeatherSnapshot(
        location=Location(
            name=str(name),
            region=_safe_str(location.get("region")),
            country=_safe_str(location.get("country")),
            lat=_safe_float(location.get("lat")),
            lon=_safe_float(location.get("lon")),
            tz_id=_safe_str(location.get("tz_id")),
            localtime_epoch=_safe_int(location.get("localtime_epoch")),
            localtime=_safe_str(location.get("localtime")),
        ),
        current=CurrentConditions(
            condition=Condition(
                text=str(condition.get("text") or ""),
                icon=_safe_str(condition.get("icon")),
                code=_safe_int(condition.get("code")),
            ),
            last_updated=_safe_str(current.get("last_updated")),
            wind_dir=_safe_str(current.get("wind_dir")),
            **{field: _safe_float(current.get(field)) for field in _FLOAT_FIELDS},
            **{field: _safe_int(current.get(field)) for field in _INT_FIELDS},
        ),
    )


def _section(payload: Mapping[str, Any], key: str, label: Optional[str] = None) -> Dict[str, Any]:
    value = payload.get(key)
    if not isinstance(value, Mapping):
        raise NormalizationError(f"missing {label or key} object")
    return dict(value)


def _safe_float(value: Optional[object]) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _safe_int(value: Optional[object]) -> Optional[int]:
    number = _safe_float(value)
    if number is None:
        return None
    return int(number)


def _safe_str(value: Optional[object]) -> Optional[str]:
    if value is None:
        return None
    return str(value)


__all__ = ["WeatherLookupService", "normalize_payload"]
