"""Service for the 'zones' endpoint."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from .record import ZoneMissingError as _RecordZoneMissingError
from .util import APIError, Service

__all__ = ["ZoneExistsError", "ZoneMissingError", "ZonesService"]

_NEXT_LINK = re.compile(r'<([^>]*)>\s*;\s*rel="?next"?')

_ZONE_EXISTS_MESSAGES = (
    "zone already exists",
    "invalid: FQDN already exists",
    "invalid: FQDN already exists in the view",
)


class ZoneExistsError(APIError):
    """A zone being created already exists."""

    default_message = "zone already exists"


class ZoneMissingError(_RecordZoneMissingError):
    """The zone asked for does not exist."""

    default_message = "zone does not exist"


def _next_page_uri(response: Any) -> str | None:
    """Return the target of the response's ``rel="next"`` link, if any."""
    headers = getattr(response, "headers", None) or {}
    link = headers.get("Link")
    if not link:
        return None
    match = _NEXT_LINK.search(link)
    return match.group(1) if match else None


def _append_zones(zones: Any, page: Any) -> list[Any]:
    return list(zones or []) + list(page or [])


def _append_records(zone: Any, page: Any) -> dict[str, Any]:
    # Apart from the records, each page repeats the same zone data.
    records = list((zone or {}).get("records") or [])
    records.extend((page or {}).get("records") or [])
    return {**(zone or {}), "records": records}


class ZonesService(Service):
    """Reads and changes DNS zones."""

    def _fetch(self, path: str, merge: Callable[[Any, Any], Any]) -> Any:
        data, response = self._send("GET", path)
        if getattr(self.client, "follow_pagination", False):
            uri = _next_page_uri(response)
            while uri:
                page, response = self._send("GET", uri)
                data = merge(data, page)
                uri = _next_page_uri(response)
        return data

    def list(self) -> list[dict[str, Any]]:
        """Return every active zone with its basic configuration."""
        return list(self._fetch("zones", _append_zones) or [])

    def get(self, zone: str, records: bool) -> dict[str, Any]:
        """Return a zone; when ``records`` is false its records come back empty."""
        path = f"zones/{zone}" if records else f"zones/{zone}?records=false"
        with self._translating({"zone not found": ZoneMissingError}):
            return self._fetch(path, _append_records)

    def create(self, zone: dict[str, Any]) -> dict[str, Any]:
        """Create a zone; returns it as the API holds it."""
        exists = dict.fromkeys(_ZONE_EXISTS_MESSAGES, ZoneExistsError)
        with self._translating(exists):
            data, _ = self._send("PUT", f"zones/{zone['zone']}", zone)
        return {**zone, **(data or {})}

    def update(self, zone: dict[str, Any]) -> dict[str, Any]:
        """Change the basic details of a zone; returns it as the API holds it."""
        with self._translating({"zone not found": ZoneMissingError}):
            data, _ = self._send("POST", f"zones/{zone['zone']}", zone)
        return {**zone, **(data or {})}

    def delete(self, zone: str) -> Any:
        """Destroy a zone and all its records; returns the HTTP response."""
        with self._translating({"zone not found": ZoneMissingError}):
            _, response = self._send("DELETE", f"zones/{zone}")
        return response