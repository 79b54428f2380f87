"""Serialization for cache storage.

Cached values use the same JSON object shape the HTTP API returns under
``data``::

    {"address": "...", "latitude": 35.6595, "longitude": 139.7005, "formatted": "35.6595, 139.7005"}
"""

from __future__ import annotations

import json
from typing import Any, Protocol, TypeVar

from geocode_cache.domain import GeocodeResult
from geocode_cache.exceptions import CorruptCacheEntryError


T = TypeVar("T")


class Serializer(Protocol[T]):
    """Protocol for serializing and deserializing values for cache storage."""

    def serialize(self, value: T) -> str:
        """Convert a value to a string for cache storage."""
        ...

    def deserialize(self, data: str) -> T:
        """Convert a cached string back to the original value."""
        ...


def result_to_dict(result: GeocodeResult) -> dict[str, Any]:
    return {
        "address": result.address,
        "latitude": result.latitude,
        "longitude": result.longitude,
        "formatted": result.formatted,
    }


def _require_number(raw: dict[str, Any], name: str) -> float:
    value = raw.get(name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CorruptCacheEntryError(f"field '{name}' must be a number, got {value!r}")
    return float(value)


class GeocodeResultSerializer:
    """JSON serializer for ``GeocodeResult``.

    ``formatted`` is stored for readers of the raw cache but is ignored on
    load and re-derived from the coordinates.
    """

    def serialize(self, value: GeocodeResult) -> str:
        return json.dumps(result_to_dict(value), ensure_ascii=False)

    def deserialize(self, data: str) -> GeocodeResult:
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as e:
            raise CorruptCacheEntryError(f"cached value is not valid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise CorruptCacheEntryError(f"cached value must be a JSON object, got {type(raw).__name__}")

        address = raw.get("address")
        if not isinstance(address, str):
            raise CorruptCacheEntryError(f"field 'address' must be a string, got {address!r}")
        return GeocodeResult(
            address=address,
            latitude=_require_number(raw, "latitude"),
            longitude=_require_number(raw, "longitude"),
        )
