from __future__ import annotations

from typing import TYPE_CHECKING

from geocode_cache.cache.sqlite_store import SqliteCacheStore
from geocode_cache.config import create_config, load_cache_path, load_provider_settings
from geocode_cache.provider.google import GoogleGeocodingProvider
from geocode_cache.service import GeocodeService

if TYPE_CHECKING:
    from geocode_cache.config import AppConfig


def build_service(config: AppConfig | None = None) -> GeocodeService:
    """Wire a GeocodeService to the SQLite cache and Google provider named in *config*."""
    if config is None:
        config = create_config()
    settings = load_provider_settings(config)
    provider = GoogleGeocodingProvider(
        settings.api_key,
        base_url=settings.base_url,
        language=settings.language,
        timeout_seconds=settings.timeout_seconds,
    )
    return GeocodeService(SqliteCacheStore(load_cache_path(config)), provider)
