from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]


def format_coordinates(latitude: float, longitude: float) -> str:
    """Render a coordinate pair as ``"<lat>, <lng>"``.

    Uses ``repr`` so the text matches the numbers JSON emits for the same floats.
    """
    return f"{latitude!r}, {longitude!r}"


@dataclass(frozen=True)
class GeocodeResult:
    address: str
    latitude: float
    longitude: float
    formatted: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "formatted", format_coordinates(self.latitude, self.longitude))


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    PROVIDER_ERROR = "provider_error"
    INTERNAL = "internal"


@dataclass(frozen=True)
class GeocodeError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class LookupSuccess:
    result: GeocodeResult
    from_cache: bool


LookupOutcome: TypeAlias = Result[LookupSuccess, GeocodeError]
