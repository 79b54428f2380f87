from geocode_cache.cache.keys import cache_key
from geocode_cache.cache.protocol import CacheStore
from geocode_cache.cache.sqlite_store import SqliteCacheStore

__all__ = ["CacheStore", "SqliteCacheStore", "cache_key"]
