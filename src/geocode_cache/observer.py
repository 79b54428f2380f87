from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from geocode_cache.domain import GeocodeError, GeocodeResult
    from geocode_cache.provider.protocol import ProviderResponse

logger = logging.getLogger("geocode_cache.lookup")


class LookupObserver(Protocol):
    """Receives lookup events from ``GeocodeService`` for logging or metrics.

    An exception raised by an observer is logged by the service and never
    changes the lookup outcome.
    """

    def cache_hit(self, key: str) -> None: ...

    def cache_miss(self, key: str) -> None: ...

    def provider_response(self, query: str, response: ProviderResponse) -> None: ...

    def stored(self, key: str, result: GeocodeResult, ttl_seconds: int) -> None: ...

    def failed(self, query: str | None, error: GeocodeError) -> None: ...


class LoggingObserver:
    """Default observer: writes each lookup event through the stdlib logger."""

    def cache_hit(self, key: str) -> None:
        logger.debug("Cache hit for %r", key)

    def cache_miss(self, key: str) -> None:
        logger.debug("Cache miss for %r", key)

    def provider_response(self, query: str, response: ProviderResponse) -> None:
        logger.debug("Provider returned %s with %d result(s) for %r", response.status, len(response.results), query)

    def stored(self, key: str, result: GeocodeResult, ttl_seconds: int) -> None:
        logger.debug("Cached %r -> %s (ttl=%ds)", key, result.formatted, ttl_seconds)

    def failed(self, query: str | None, error: GeocodeError) -> None:
        logger.warning("Lookup failed for %r [%s]: %s", query, error.kind.value, error.message)
