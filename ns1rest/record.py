"""Service for the 'zones/ZONE/DOMAIN/TYPE' record endpoint."""

from __future__ import annotations

from typing import Any

from .util import APIError, Service


class ZoneMissingError(APIError):
    """The zone addressed does not exist."""

    default_message = "zone does not exist"


class RecordExistsError(APIError):
    """A record being created already exists."""

    default_message = "record already exists"


class RecordMissingError(APIError):
    """The record addressed does not exist."""

    default_message = "record does not exist"


def _record_path(zone: str, domain: str, record_type: str) -> str:
    return f"zones/{zone}/{domain}/{record_type}"


class RecordsService(Service):
    """Reads and changes DNS records."""

    def get(self, zone: str, domain: str, record_type: str) -> dict[str, Any]:
        """Return the full configuration of a record."""
        with self._translating({"record not found": RecordMissingError}):
            data, _ = self._send("GET", _record_path(zone, domain, record_type))
        return data

    def create(self, record: dict[str, Any]) -> dict[str, Any]:
        """Create a record; it needs at least one answer. Returns it as the API holds it."""
        path = _record_path(record["zone"], record["domain"], record["type"])
        with self._translating(
            {
                "zone not found": ZoneMissingError,
                "record already exists": RecordExistsError,
            }
        ):
            data, _ = self._send("PUT", path, record)
        return {**record, **(data or {})}

    def update(self, record: dict[str, Any]) -> dict[str, Any]:
        """Change an existing record; only the changed fields are needed."""
        path = _record_path(record["zone"], record["domain"], record["type"])
        with self._translating(
            {
                "zone not found": ZoneMissingError,
                "record not found": RecordMissingError,
                "record already exists": RecordExistsError,
            }
        ):
            data, _ = self._send("POST", path, record)
        return {**record, **(data or {})}

    def delete(self, zone: str, domain: str, record_type: str) -> Any:
        """Remove a record with all its answers; returns the HTTP response."""
        with self._translating({"record not found": RecordMissingError}):
            _, response = self._send("DELETE", _record_path(zone, domain, record_type))
        return response