import logging
import math
from typing import Any

import httpx

from geocode_cache.exceptions import ProviderFaultError
from geocode_cache.provider.protocol import ProviderCandidate, ProviderResponse

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

_REDACTED = "API_KEY_HIDDEN"


def _parse_candidate(raw: Any) -> ProviderCandidate:
    try:
        location = raw["geometry"]["location"]
        lat, lng = location["lat"], location["lng"]
        address = raw["formatted_address"]
    except (KeyError, TypeError) as e:
        raise ProviderFaultError(f"Malformed geocoding result: missing {e}") from e
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (lat, lng)):
        raise ProviderFaultError(f"Malformed geocoding result: non-numeric location {location!r}")
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ProviderFaultError(f"Malformed geocoding result: non-finite location {location!r}")
    if not isinstance(address, str):
        raise ProviderFaultError(f"Malformed geocoding result: formatted_address {address!r}")
    return ProviderCandidate(formatted_address=address, lat=float(lat), lng=float(lng))


class GoogleGeocodingProvider:
    """``GeoProvider`` backed by the Google Maps Geocoding API.

    Only the first result is parsed; callers never see alternates. Faults are
    raised once and never retried here.
    """

    def __init__(
        self,
        api_key: str,
        client: httpx.Client | None = None,
        *,
        base_url: str = GOOGLE_GEOCODE_URL,
        language: str = "ja",
        timeout_seconds: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._language = language
        timeout = httpx.Timeout(timeout_seconds, connect=min(5.0, timeout_seconds))
        self._client = client or httpx.Client(timeout=timeout)

    def _redact(self, text: str) -> str:
        return text.replace(self._api_key, _REDACTED) if self._api_key else text

    def geocode(self, query: str) -> ProviderResponse:
        params = {"address": query, "key": self._api_key, "language": self._language}
        try:
            response = self._client.get(self._base_url, params=params)
            logger.debug("GET %s", self._redact(str(response.request.url)))
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderFaultError(f"Geocoding API responded {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ProviderFaultError(self._redact(f"Geocoding request failed: {e}")) from e
        except ValueError as e:
            raise ProviderFaultError(f"Geocoding API returned invalid JSON: {e}") from e

        logger.debug("Geocoding API response for %r: %s", query, data)
        if not isinstance(data, dict) or not isinstance(data.get("status"), str):
            raise ProviderFaultError(f"Geocoding API response has no status: {data!r}")

        status: str = data["status"]
        raw_results = data.get("results") or []
        if not isinstance(raw_results, list):
            raise ProviderFaultError(f"Geocoding API 'results' must be a list, got {type(raw_results).__name__}")
        error_message = data.get("error_message")
        if error_message is not None:
            error_message = str(error_message)

        if status != "OK" or not raw_results:
            return ProviderResponse(status=status, results=(), error_message=error_message)
        return ProviderResponse(
            status=status,
            results=(_parse_candidate(raw_results[0]),),
            error_message=error_message,
        )

    def close(self) -> None:
        self._client.close()
