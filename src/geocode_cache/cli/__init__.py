from geocode_cache.cli.commands import app

__all__ = ["app"]
