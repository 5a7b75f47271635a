"""Service for the 'tsig' endpoint."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from .util import APIError, Service


class TsigKeyExistsError(APIError):
    """A TSIG key being created already exists."""

    default_message = "TSIG key already exists"


class TsigKeyMissingError(APIError):
    """The TSIG key addressed does not exist."""

    default_message = "TSIG key does not exist"


def _missing_on_404(err: APIError) -> type[APIError] | None:
    return TsigKeyMissingError if err.status_code == HTTPStatus.NOT_FOUND else None


def _exists_on_409(err: APIError) -> type[APIError] | None:
    return TsigKeyExistsError if err.status_code == HTTPStatus.CONFLICT else None


class TsigService(Service):
    """Reads and changes TSIG keys."""

    def list(self) -> list[dict[str, Any]]:
        """Return every TSIG key with its basic configuration."""
        data, _ = self._send("GET", "tsig")
        return list(data or [])

    def get(self, name: str) -> dict[str, Any]:
        """Return a single TSIG key."""
        with self._translating(_missing_on_404):
            data, _ = self._send("GET", f"tsig/{name}")
        return data

    def create(self, key: dict[str, Any]) -> dict[str, Any]:
        """Create a TSIG key; returns it as the API holds it."""
        with self._translating(_exists_on_409):
            data, _ = self._send("PUT", f"tsig/{key['name']}", key)
        return {**key, **(data or {})}

    def update(self, key: dict[str, Any]) -> dict[str, Any]:
        """Change the details of a TSIG key; returns it as the API holds it."""
        with self._translating(_missing_on_404):
            data, _ = self._send("POST", f"tsig/{key['name']}", key)
        return {**key, **(data or {})}

    def delete(self, name: str) -> Any:
        """Destroy a TSIG key; returns the HTTP response."""
        with self._translating(_missing_on_404):
            _, response = self._send("DELETE", f"tsig/{name}")
        return response