"""Service for the 'zones/ZONE/versions' endpoints."""

from __future__ import annotations

from typing import Any

from .util import Service


class VersionsService(Service):
    """Lists, creates, deletes and activates zone versions."""

    def list(self, zone: str) -> list[dict[str, Any]]:
        """Return every version of a zone."""
        data, _ = self._send("GET", f"zones/{zone}/versions")
        return list(data or [])

    def create(self, zone: str, force: bool) -> dict[str, Any]:
        """Create a new version of a zone."""
        flag = "true" if force else "false"
        data, _ = self._send("PUT", f"zones/{zone}/versions?force={flag}")
        return data

    def delete(self, zone: str, version_id: int) -> Any:
        """Delete a zone version; returns the HTTP response."""
        _, response = self._send("DELETE", f"zones/{zone}/versions/{version_id}")
        return response

    def activate(self, zone: str, version_id: int) -> Any:
        """Activate a zone version; returns the HTTP response."""
        _, response = self._send(
            "POST", f"/v1/zones/{zone}/versions/{version_id}/activate"
        )
        return response