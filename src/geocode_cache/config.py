from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from geocode_cache.exceptions import ConfigurationError
from geocode_cache.provider.google import GOOGLE_GEOCODE_URL


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "provider": {
        "api_key": "",
        "base_url": GOOGLE_GEOCODE_URL,
        "language": "ja",
        "timeout_seconds": 10.0,
    },
    "cache": {
        "db_path": "~/.config/geocache/cache.db",
    },
    "server": {
        "host": "127.0.0.1",
        "port": 8787,
    },
}


@dataclass(frozen=True)
class ProviderSettings:
    api_key: str
    base_url: str
    language: str
    timeout_seconds: float


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int


def create_config(
    yaml_path: str = "config.yaml",
    env_prefix: str = "GEOCODE",
    defaults: dict[str, object] | None = None,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Environment variables use ``__`` as the section separator, e.g.
    ``GEOCODE__PROVIDER__API_KEY``. Values read from the environment are strings.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def load_provider_settings(cfg: AppConfig) -> ProviderSettings:
    api_key = str(cfg["provider.api_key"] or "")
    if not api_key:
        raise ConfigurationError("provider.api_key is required (set GEOCODE__PROVIDER__API_KEY)")
    try:
        timeout_seconds = float(str(cfg["provider.timeout_seconds"]))
    except ValueError as e:
        raise ConfigurationError(f"provider.timeout_seconds must be a number: {e}") from e
    if timeout_seconds <= 0:
        raise ConfigurationError("provider.timeout_seconds must be positive")
    return ProviderSettings(
        api_key=api_key,
        base_url=str(cfg["provider.base_url"]),
        language=str(cfg["provider.language"]),
        timeout_seconds=timeout_seconds,
    )


def load_cache_path(cfg: AppConfig) -> Path:
    return Path(str(cfg["cache.db_path"])).expanduser()


def load_server_settings(cfg: AppConfig) -> ServerSettings:
    try:
        port = int(str(cfg["server.port"]))
    except ValueError as e:
        raise ConfigurationError(f"server.port must be an integer: {e}") from e
    return ServerSettings(host=str(cfg["server.host"]), port=port)
