"""Cache key construction for the weather cache alias."""
from __future__ import annotations

from urllib.parse import quote


def make_key(key: str, key_prefix: str, version: int) -> str:
    """Percent-encode the location so keys like "New York" stay memcached-safe."""
    return f"{key_prefix}:{version}:{quote(key, safe='')}"
