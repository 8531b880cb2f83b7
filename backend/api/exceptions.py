"""Map lookup failures onto HTTP responses."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from weather_core.errors import ClientRequestError, UpstreamError

logger = logging.getLogger(__name__)


def weather_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    if isinstance(exc, ClientRequestError):
        return _problem(status.HTTP_400_BAD_REQUEST, exc.message, exc.status)
    if isinstance(exc, UpstreamError):
        return _problem(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message, exc.status)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    logger.error("Unhandled error in %s", context.get("view").__class__.__name__, exc_info=exc)
    return _problem(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), None)


def _problem(status_code: int, message: str, upstream_status: Optional[int]) -> Response:
    body = {
        "type": "about:blank",
        "title": "ERROR",
        "status": status_code,
        "detail": f"An error occurred: {message}",
        "upstream_status": upstream_status,
    }
    return Response(body, status=status_code)


__all__ = ["weather_exception_handler"]
