"""
Error taxonomy for PokeAPI calls.

Every failure raised by the clients is one of three kinds:
- RequestError: the request never produced a response (connect, DNS, TLS, timeout)
- DeserializationError: a 2xx response whose body did not match the expected model
- ApiError: the server answered with a non-2xx status

Callers can branch on the base class helpers (`is_not_found()`, `status_code`,
`url`) without checking the concrete subclass.
"""
from __future__ import annotations
from typing import Optional


class PokeApiError(Exception):
    """Base class for all PokeAPI client failures."""

    def is_not_found(self) -> bool:
        return False

    @property
    def status_code(self) -> Optional[int]:
        return None

    @property
    def url(self) -> Optional[str]:
        return None


class RequestError(PokeApiError):
    def __init__(self, cause: Exception):
        super().__init__(f"Request error: {cause}")
        self.cause = cause


class DeserializationError(PokeApiError):
    def __init__(self, cause: Exception):
        super().__init__(f"Deserialization error: {cause}")
        self.cause = cause


class ApiError(PokeApiError):
    def __init__(self, status: int, url: str):
        super().__init__(f"API error {status}: {url}")
        self.status = status
        self._url = url

    def is_not_found(self) -> bool:
        return self.status == 404

    @property
    def status_code(self) -> Optional[int]:
        return self.status

    @property
    def url(self) -> Optional[str]:
        return self._url
