from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from geocode_cache.config import create_config
from geocode_cache.exceptions import ConfigurationError
from geocode_cache.factory import build_service
from geocode_cache.service import GeocodeService

if TYPE_CHECKING:
    from pathlib import Path


def test_build_service_from_config(tmp_path: Path) -> None:
    cfg = create_config(
        yaml_path="/nonexistent/config.yaml",
        overrides={"provider": {"api_key": "k"}, "cache": {"db_path": str(tmp_path / "geo.db")}},
    )
    assert isinstance(build_service(cfg), GeocodeService)


def test_build_service_requires_api_key(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEOCODE__PROVIDER__API_KEY", raising=False)
    cfg = create_config(yaml_path="/nonexistent/config.yaml", overrides={"cache": {"db_path": str(tmp_path / "g.db")}})
    with pytest.raises(ConfigurationError):
        build_service(cfg)
