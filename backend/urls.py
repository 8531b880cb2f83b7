"""Root URL configuration."""
from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("weatherAPI/v1/", include("backend.api.urls")),
]
