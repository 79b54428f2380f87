from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ProviderCandidate:
    formatted_address: str
    lat: float
    lng: float


@dataclass(frozen=True)
class ProviderResponse:
    status: str
    results: tuple[ProviderCandidate, ...] = ()
    error_message: str | None = None

    @property
    def is_usable(self) -> bool:
        return self.status == "OK" and len(self.results) > 0


class GeoProvider(Protocol):
    def geocode(self, query: str) -> ProviderResponse:
        """Look up *query*; raise ``ProviderFaultError`` on transport or parse faults."""
        ...
