"""Service for the 'redirect/certificates' endpoint."""

from __future__ import annotations

from typing import Any

from .redirect import _list_results, _not_found
from .util import APIError, Service

_BASE = "redirect/certificates"


class RedirectCertificateNilError(APIError):
    """A required parameter was not given."""

    default_message = "parameter missing"


class RedirectCertificateExistsError(APIError):
    """A redirect certificate being created already exists."""

    default_message = "redirect certificate id already exists"


class RedirectCertificateNotFoundError(APIError):
    """The redirect certificate addressed does not exist."""

    default_message = "redirect certificate id not found"


class RedirectCertificateService(Service):
    """Reads, requests, renews and revokes redirect certificates."""

    def list(self) -> list[dict[str, Any]]:
        """Return every redirect certificate."""
        return _list_results(self, _BASE)

    def get(self, cert_id: str) -> dict[str, Any]:
        """Return a single redirect certificate."""
        with self._translating(_not_found(RedirectCertificateNotFoundError)):
            data, _ = self._send("GET", f"{_BASE}/{cert_id}")
        return data

    def create(self, domain: str) -> dict[str, Any]:
        """Request a certificate for ``domain``; returns it as the API holds it."""
        with self._translating(
            {"certificate already exists": RedirectCertificateExistsError}
        ):
            data, _ = self._send("PUT", _BASE, {"domain": domain})
        return data

    def update(self, cert_id: str) -> Any:
        """Ask for a certificate to be renewed; returns the HTTP response."""
        with self._translating(_not_found(RedirectCertificateNotFoundError)):
            _, response = self._send("POST", f"{_BASE}/{cert_id}")
        return response

    def delete(self, cert_id: str) -> Any:
        """Ask for a certificate to be revoked; returns the HTTP response."""
        with self._translating(_not_found(RedirectCertificateNotFoundError)):
            _, response = self._send("DELETE", f"{_BASE}/{cert_id}")
        return response