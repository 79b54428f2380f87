"""Shared pytest fixtures for test modules."""

import pytest

from geocode_cache.service import GeocodeService
from tests.fakes.cache import InMemoryCacheStore
from tests.fakes.provider import ScriptedProvider, ok_response


@pytest.fixture
def store() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture
def provider() -> ScriptedProvider:
    return ScriptedProvider(ok_response("Shibuya, Tokyo, Japan", 35.6595, 139.7005))


@pytest.fixture
def service(store: InMemoryCacheStore, provider: ScriptedProvider) -> GeocodeService:
    return GeocodeService(store, provider)
