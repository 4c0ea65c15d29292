"""Exception hierarchy for geocode lookups."""


class GeocodeError(Exception):
    """Base exception for all lookup errors."""


class InvalidInput(GeocodeError):
    """A lookup parameter could not be accepted."""

    def __init__(self, field: str, value: object, detail: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {detail}")


class StoreUnavailable(GeocodeError):
    """The record store could not be reached or timed out."""

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        msg = f"Record store unavailable during {operation}"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class CacheUnavailable(GeocodeError):
    """The cache could not be reached. Callers degrade to the store."""


class MalformedCacheEntry(GeocodeError):
    """A cached payload could not be decoded."""

    def __init__(self, key: str, detail: str):
        self.key = key
        super().__init__(f"Malformed cache entry '{key}': {detail}")
