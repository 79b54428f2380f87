from geocode_cache.provider.google import GoogleGeocodingProvider
from geocode_cache.provider.protocol import GeoProvider, ProviderCandidate, ProviderResponse

__all__ = ["GeoProvider", "GoogleGeocodingProvider", "ProviderCandidate", "ProviderResponse"]
