from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import requests
from requests import Response

from ..errors import ClientRequestError, NormalizationError, ProviderError


@dataclass
class RequestConfig:
    timeout: float = 10.0


class WeatherProvider:
    """Base class for HTTP providers.

    Failures are classified from the response status code: 4xx becomes
    :class:`ClientRequestError`, 5xx and transport errors become
    :class:`ProviderError`. Nothing is retried.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def fetch_current(self, location: str) -> dict:
        raise NotImplementedError

    def _handle_response(self, response: Response) -> Response:
        if response.status_code < 400:
            return response
        message, code = self._error_details(response)
        if response.status_code < 500:
            self._log.warning("Provider rejected request with %s: %s", response.status_code, message)
            raise ClientRequestError(message, status=response.status_code, code=code)
        self._log.error("Provider returned %s: %s", response.status_code, message)
        raise ProviderError(message, status=response.status_code, code=code)

    def _error_details(self, response: Response) -> Tuple[str, Optional[int]]:
        return (response.text[:200] or response.reason or f"HTTP {response.status_code}"), None

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderError("request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise NormalizationError("invalid json", status=response.status_code) from exc


__all__ = ["WeatherProvider", "RequestConfig"]
