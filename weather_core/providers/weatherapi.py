"""WeatherAPI.com current conditions provider."""
from __future__ import annotations

import os
from typing import Optional, Tuple

from requests import Response

from ..errors import NormalizationError
from .base import WeatherProvider


class WeatherApiProvider(WeatherProvider):
    """Integration with the WeatherAPI.com ``current.json`` endpoint."""

    name = "weatherapi"
    base_url = "https://api.weatherapi.com/v1/current.json"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or self.base_url
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"

    def fetch_current(self, location: str) -> dict:
        """Return the raw provider payload for ``location``."""
        params = {"key": self.api_key, "q": location}
        response = self._request("GET", self.base_url, params=params)
        self._log_response(location, response)
        data = self._json(response)
        if not isinstance(data, dict):
            raise NormalizationError("expected a JSON object", status=response.status_code)
        return data

    def _error_details(self, response: Response) -> Tuple[str, Optional[int]]:
        # WeatherAPI reports failures as {"error": {"code": 1006, "message": "..."}}
        try:
            error = response.json().get("error") or {}
        except (ValueError, AttributeError):
            return super()._error_details(response)
        message = error.get("message")
        if not message:
            return super()._error_details(response)
        code = error.get("code")
        return message, code if isinstance(code, int) else None

    def _log_response(self, location: str, response: Response) -> None:
        if not self._testing_mode:
            return
        self._log.info(
            "WeatherAPI request",
            extra={"location": location, "status": response.status_code, "body": response.text[:500]},
        )


__all__ = ["WeatherApiProvider"]
