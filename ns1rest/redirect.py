"""Service for the 'redirect' endpoint."""

from __future__ import annotations

from typing import Any

from .util import APIError, Service
from .zone import _next_page_uri


class RedirectNilError(APIError):
    """A required parameter was not given."""

    default_message = "parameter missing"


class RedirectExistsError(APIError):
    """A redirect configuration being created already exists."""

    default_message = "redirect configuration id already exists"


class RedirectNotFoundError(APIError):
    """The redirect configuration addressed does not exist."""

    default_message = "redirect configuration id not found"


def _merge_page(collected: Any, page: Any) -> dict[str, Any]:
    """Fold one page of a paginated list into what was gathered so far."""
    collected = dict(collected or {})
    page = page or {}
    collected["total"] = page.get("total", 0)
    collected["count"] = collected.get("count", 0) + page.get("count", 0)
    collected["results"] = list(collected.get("results") or []) + list(
        page.get("results") or []
    )
    return collected


def _list_results(service: Service, path: str) -> list[dict[str, Any]]:
    """GET a paginated list and return its results, following pages if asked to."""
    data, response = service._send("GET", path)
    if getattr(service.client, "follow_pagination", False):
        uri = _next_page_uri(response)
        while uri:
            page, response = service._send("GET", uri)
            data = _merge_page(data, page)
            uri = _next_page_uri(response)
    return list((data or {}).get("results") or [])


def _not_found(error_type: type[APIError]):
    def choose(err: APIError) -> type[APIError] | None:
        return error_type if err.message.endswith(" not found") else None

    return choose


class RedirectService(Service):
    """Reads and changes URL redirect configurations."""

    def list(self) -> list[dict[str, Any]]:
        """Return every configured redirect."""
        return _list_results(self, "redirect")

    def get(self, cfg_id: str) -> dict[str, Any]:
        """Return a single redirect configuration."""
        with self._translating(_not_found(RedirectNotFoundError)):
            data, _ = self._send("GET", f"redirect/{cfg_id}")
        return data

    def create(self, cfg: dict[str, Any] | None) -> dict[str, Any]:
        """Create a redirect; returns it as the API holds it."""
        if cfg is None:
            raise RedirectNilError()
        with self._translating({"configuration already exists": RedirectExistsError}):
            data, _ = self._send("PUT", "redirect", cfg)
        return {**cfg, **(data or {})}

    def update(self, cfg: dict[str, Any] | None) -> dict[str, Any]:
        """Change a redirect identified by ``cfg['id']``; returns it as the API holds it."""
        if cfg is None or cfg.get("id") is None:
            raise RedirectNilError()
        with self._translating(_not_found(RedirectNotFoundError)):
            data, _ = self._send("POST", f"redirect/{cfg['id']}", cfg)
        return {**cfg, **(data or {})}

    def delete(self, cfg_id: str) -> Any:
        """Destroy a redirect configuration; returns the HTTP response."""
        with self._translating(_not_found(RedirectNotFoundError)):
            _, response = self._send("DELETE", f"redirect/{cfg_id}")
        return response