"""Error taxonomy shared by the cache store, the provider client and the service."""
from __future__ import annotations

from typing import Optional


class WeatherError(RuntimeError):
    """Base error for the weather lookup pipeline."""


class CacheUnavailable(WeatherError):
    """Raised when the cache backend cannot be reached."""


class UpstreamError(WeatherError):
    """Base upstream failure carrying the provider's status and message."""

    def __init__(self, message: str, *, status: Optional[int] = None, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"HTTP {self.status}: {self.message}"


class ClientRequestError(UpstreamError):
    """The provider rejected the request (4xx), usually an unknown location."""


class ProviderError(UpstreamError):
    """The provider failed (5xx) or could not be reached."""


class NormalizationError(ProviderError):
    """The provider payload did not have the expected shape."""


__all__ = [
    "WeatherError",
    "CacheUnavailable",
    "UpstreamError",
    "ClientRequestError",
    "ProviderError",
    "NormalizationError",
]
