from __future__ import annotations

from typing import Protocol


class CacheStore(Protocol):
    """String key/value store with per-entry expiry.

    ``get`` returns None for absent or expired keys. ``put`` replaces any
    existing value and restarts its TTL. Backend failures raise
    ``CacheStoreError``.
    """

    def get(self, key: str) -> str | None: ...

    def put(self, key: str, value: str, ttl_seconds: int) -> None: ...
