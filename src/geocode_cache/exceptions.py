class GeocodeCacheException(Exception):
    """Base exception for geocode-cache collaborator faults."""


class ConfigurationError(GeocodeCacheException):
    """Raised when required configuration is missing or invalid."""


class CacheStoreError(GeocodeCacheException):
    """Raised when the cache backend fails to read or write."""


class CorruptCacheEntryError(GeocodeCacheException):
    """Raised when a cached value cannot be decoded into a GeocodeResult."""


class ProviderFaultError(GeocodeCacheException):
    """Raised on transport or parse faults while talking to the geocoding provider."""
