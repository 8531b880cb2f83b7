"""REST API views for weather information."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Union

from django.conf import settings
from django.core.cache import caches
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weather_core.cache import WeatherCacheStore
from weather_core.entities import WeatherSnapshot
from weather_core.providers.base import RequestConfig
from weather_core.providers.weatherapi import WeatherApiProvider
from weather_core.services.coalescing import CoalescingLookup
from weather_core.services.weather import WeatherLookupService


@lru_cache(maxsize=1)
def get_weather_service() -> Union[WeatherLookupService, CoalescingLookup]:
    logger = logging.getLogger("weather_core")
    provider = WeatherApiProvider(
        api_key=settings.WEATHER_API_KEY,
        base_url=settings.WEATHER_API_URL,
        request_config=RequestConfig(timeout=settings.WEATHER_API_TIMEOUT),
        logger=logger.getChild("provider"),
    )
    store = WeatherCacheStore(caches[settings.WEATHER_CACHE_ALIAS], logger=logger.getChild("cache"))
    service = WeatherLookupService(provider=provider, cache=store, logger=logger.getChild("lookup"))
    if settings.WEATHER_COALESCE_REQUESTS:
        return CoalescingLookup(service, logger=logger.getChild("coalescing"))
    return service


def serialize_snapshot(snapshot: WeatherSnapshot) -> Dict[str, Any]:
    """Render a snapshot in the ``{location, currentWeather}`` wire shape."""
    payload = snapshot.to_dict()
    return {"location": payload["location"], "currentWeather": payload["current"]}


class WeatherView(APIView):
    """Provide current weather for the requested location."""

    permission_classes = [AllowAny]

    def get(self, request, city: str, *args, **kwargs):  # noqa: D401
        """Return the weather snapshot for ``city``."""
        if not city.strip():
            return Response({"detail": "city must not be blank"}, status=status.HTTP_400_BAD_REQUEST)

        snapshot = get_weather_service().lookup(city)
        return Response(serialize_snapshot(snapshot), status=status.HTTP_200_OK)
