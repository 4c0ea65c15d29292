"""Port interface for the key-value string cache."""

from abc import ABC, abstractmethod


class CachePort(ABC):
    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored string, or None when absent.

        Raises CacheUnavailable if the backend cannot be reached.
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store *value* under *key*. Expiry is the adapter's concern.

        Raises CacheUnavailable if the backend cannot be reached.
        """
        ...

    @abstractmethod
    async def ping(self) -> bool:
        ...

    async def close(self) -> None:
        """Release backend connections. No-op by default."""
        return None
