"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_weather_service, serialize_snapshot
from weather_core.errors import ClientRequestError, UpstreamError


class Command(BaseCommand):
    help = "Fetch current weather for the provided location"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="Location name, e.g. London")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options["city"]
        try:
            snapshot = get_weather_service().lookup(city)
        except ValueError as exc:
            raise CommandError(str(exc)) from exc
        except ClientRequestError as exc:
            raise CommandError(f"Provider rejected {city!r}: {exc}") from exc
        except UpstreamError as exc:
            raise CommandError(f"Provider failed: {exc}") from exc

        self.stdout.write(json.dumps(serialize_snapshot(snapshot)))
