"""Cache-aside geocoding service.

Each call is a single linear sequence:
validate -> cache read -> provider call -> normalize -> cache write -> respond.

Lookups read the cache first and only write on a miss. Refreshes skip the read
and always write through on success, which resets the entry's TTL. A cached
value that cannot be decoded is reported as an internal error in every mode;
it is never treated as a miss.

Usage:
    service = GeocodeService(SqliteCacheStore(db_path), GoogleGeocodingProvider(api_key))
    match service.lookup("Shibuya, Tokyo"):
        case Ok(LookupSuccess(result=result, from_cache=from_cache)):
            print(result.formatted, from_cache)
        case Err(error):
            print(error.kind, error.message)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from geocode_cache.cache.keys import cache_key
from geocode_cache.cache.serialization import GeocodeResultSerializer
from geocode_cache.domain import Err, ErrorKind, GeocodeError, GeocodeResult, LookupSuccess, Ok
from geocode_cache.exceptions import CacheStoreError, CorruptCacheEntryError, ProviderFaultError
from geocode_cache.observer import LoggingObserver

if TYPE_CHECKING:
    from geocode_cache.cache.protocol import CacheStore
    from geocode_cache.cache.serialization import Serializer
    from geocode_cache.domain import LookupOutcome
    from geocode_cache.observer import LookupObserver
    from geocode_cache.provider.protocol import GeoProvider, ProviderResponse

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 60 * 60 * 24 * 30

MISSING_QUERY_MESSAGE = "No address was specified"


def not_found_message(response: ProviderResponse) -> str:
    if response.error_message:
        return f"Address not found: {response.status} - {response.error_message}"
    return f"Address not found: {response.status}"


class GeocodeService:
    def __init__(
        self,
        store: CacheStore,
        provider: GeoProvider,
        *,
        observer: LookupObserver | None = None,
        serializer: Serializer[GeocodeResult] | None = None,
    ) -> None:
        self._store = store
        self._provider = provider
        self._observer = observer or LoggingObserver()
        self._serializer = serializer or GeocodeResultSerializer()

    def lookup(self, query: str | None) -> LookupOutcome:
        """Return the cached result for *query*, fetching and caching it on a miss."""
        if not query or not query.strip():
            return self._fail(query, ErrorKind.INVALID_INPUT, MISSING_QUERY_MESSAGE)

        key = cache_key(query)
        try:
            cached = self._store.get(key)
            result = None if cached is None else self._serializer.deserialize(cached)
        except CorruptCacheEntryError as e:
            return self._fail(query, ErrorKind.INTERNAL, f"Corrupt cache entry for {key!r}: {e}")
        except CacheStoreError as e:
            return self._fail(query, ErrorKind.INTERNAL, str(e))
        except Exception as e:
            logger.exception("Unexpected error reading cache for %r", key)
            return self._fail(query, ErrorKind.INTERNAL, f"An error occurred: {e}")

        if result is not None:
            self._notify("cache_hit", key)
            return Ok(LookupSuccess(result=result, from_cache=True))

        self._notify("cache_miss", key)
        return self._fetch_and_store(query)

    def refresh(self, query: str | None) -> LookupOutcome:
        """Re-fetch *query* from the provider, overwriting any cached entry."""
        if not query or not query.strip():
            return self._fail(query, ErrorKind.INVALID_INPUT, MISSING_QUERY_MESSAGE)
        return self._fetch_and_store(query)

    def _fetch_and_store(self, query: str) -> LookupOutcome:
        try:
            response = self._provider.geocode(query)
        except ProviderFaultError as e:
            return self._fail(query, ErrorKind.PROVIDER_ERROR, f"An error occurred: {e}")
        except Exception as e:
            logger.exception("Unexpected error calling geocoding provider for %r", query)
            return self._fail(query, ErrorKind.PROVIDER_ERROR, f"An error occurred: {e}")

        self._notify("provider_response", query, response)
        if not response.is_usable:
            return self._fail(query, ErrorKind.NOT_FOUND, not_found_message(response))

        best = response.results[0]
        result = GeocodeResult(address=best.formatted_address, latitude=best.lat, longitude=best.lng)

        key = cache_key(query)
        try:
            self._store.put(key, self._serializer.serialize(result), CACHE_TTL_SECONDS)
        except CacheStoreError as e:
            return self._fail(query, ErrorKind.INTERNAL, str(e))
        except Exception as e:
            logger.exception("Unexpected error writing cache for %r", key)
            return self._fail(query, ErrorKind.INTERNAL, f"An error occurred: {e}")

        self._notify("stored", key, result, CACHE_TTL_SECONDS)
        return Ok(LookupSuccess(result=result, from_cache=False))

    def _fail(self, query: str | None, kind: ErrorKind, message: str) -> LookupOutcome:
        error = GeocodeError(kind=kind, message=message)
        self._notify("failed", query, error)
        return Err(error)

    def _notify(self, event: str, *args: object) -> None:
        try:
            getattr(self._observer, event)(*args)
        except Exception:
            logger.exception("Lookup observer failed handling %s", event)

    def close(self) -> None:
        """Release the provider's resources, if it holds any."""
        close = getattr(self._provider, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
