from typing import Any

from geocode_cache.cache.serialization import result_to_dict
from geocode_cache.domain import Err, ErrorKind, LookupOutcome, LookupSuccess, Ok

ERROR_PREFIX = "Error: "

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PROVIDER_ERROR: 500,
    ErrorKind.INTERNAL: 500,
}


def to_json(outcome: LookupOutcome) -> dict[str, Any]:
    """Shape an outcome as the JSON response body.

    Failures carry only ``success`` and ``error``; ``data`` and ``fromCache``
    are present only on success.
    """
    match outcome:
        case Ok(LookupSuccess(result=result, from_cache=from_cache)):
            return {"success": True, "data": result_to_dict(result), "fromCache": from_cache}
        case Err(error):
            return {"success": False, "error": error.message}
    raise TypeError(f"Unexpected outcome: {outcome!r}")


def to_plain_text(outcome: LookupOutcome) -> str:
    match outcome:
        case Ok(LookupSuccess(result=result)):
            return result.formatted
        case Err(error):
            return f"{ERROR_PREFIX}{error.message}"
    raise TypeError(f"Unexpected outcome: {outcome!r}")


def status_code(outcome: LookupOutcome) -> int:
    match outcome:
        case Ok():
            return 200
        case Err(error):
            return _STATUS_BY_KIND[error.kind]
    raise TypeError(f"Unexpected outcome: {outcome!r}")
