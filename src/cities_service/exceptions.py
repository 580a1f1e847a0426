from __future__ import annotations


class CitiesServiceError(Exception):
    """Base class for errors raised by the cities service."""


class StoreError(CitiesServiceError):
    """A single store operation failed; the message is the backend's error text."""

    def __init__(self, store: str, message: str):
        super().__init__(message)
        self.store = store
        self.message = message

    def __str__(self) -> str:
        return self.message


class StoreUnavailableError(StoreError):
    """The store handle is missing or failed its liveness check."""


class StoreTimeoutError(StoreError):
    """The store did not answer within the configured deadline."""


__all__ = [
    "CitiesServiceError",
    "StoreError",
    "StoreUnavailableError",
    "StoreTimeoutError",
]
