from __future__ import annotations

import os

import django


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings")
os.environ.setdefault("TESTING_MODE", "1")
os.environ.setdefault("WEATHER_API_KEY", "test-key")
os.environ.setdefault("WEATHER_API_URL", "https://weatherapi.test/v1/current.json")
os.environ.setdefault("REDIS_URL", "")

django.setup()
