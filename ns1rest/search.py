"""Services for the record and zone search endpoints."""

from __future__ import annotations

from typing import Any

from .util import Service


class RecordSearchService(Service):
    """Searches DNS records."""

    def search(self, params: str) -> dict[str, Any]:
        """Return the records matching the encoded query ``params``."""
        data, _ = self._send("GET", f"dns/record/search?{params}")
        return data


class ZoneSearchService(Service):
    """Searches DNS zones."""

    def search(self, params: str) -> dict[str, Any]:
        """Return the zones matching the encoded query ``params``."""
        data, _ = self._send("GET", f"dns/zone/search?{params}")
        return data