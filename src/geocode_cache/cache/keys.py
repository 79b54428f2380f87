KEY_PREFIX = "geocode:"


def cache_key(query: str) -> str:
    """Return the store key for *query*, verbatim: no trimming or case folding."""
    return f"{KEY_PREFIX}{query}"
