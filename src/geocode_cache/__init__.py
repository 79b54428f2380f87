"""Cache-aside geocoding proxy.

Public API:
    GeocodeService(store, provider) -> service with lookup()/refresh()
    to_json(outcome) / to_plain_text(outcome) / status_code(outcome)
"""

from geocode_cache.domain import ErrorKind, GeocodeError, GeocodeResult, LookupOutcome, LookupSuccess
from geocode_cache.formatting import status_code, to_json, to_plain_text
from geocode_cache.service import CACHE_TTL_SECONDS, GeocodeService

__all__ = [
    "CACHE_TTL_SECONDS",
    "ErrorKind",
    "GeocodeError",
    "GeocodeResult",
    "GeocodeService",
    "LookupOutcome",
    "LookupSuccess",
    "status_code",
    "to_json",
    "to_plain_text",
]
