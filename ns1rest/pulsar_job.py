"""Service for the 'pulsar/apps/APPID/jobs/JOBID' endpoint."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from .util import APIError, Service

_APP_NOT_FOUND = "pulsar app not found"


class AppMissingError(APIError):
    """The Pulsar application addressed does not exist."""

    default_message = "pulsar application does not exist"


class JobMissingError(APIError):
    """The Pulsar job addressed does not exist."""

    default_message = "pulsar job does not exist"


def _app_missing_on_404(err: APIError) -> type[APIError] | None:
    return AppMissingError if err.status_code == HTTPStatus.NOT_FOUND else None


def _missing_by_message(app_id: str, job_id: str) -> dict[str, type[APIError]]:
    return {
        f"pulsar job {job_id} not found for appid {app_id}": JobMissingError,
        _APP_NOT_FOUND: AppMissingError,
    }


class PulsarJobsService(Service):
    """Reads and changes Pulsar jobs."""

    def list(self, app_id: str) -> list[dict[str, Any]]:
        """Return every job of an application."""
        with self._translating(_app_missing_on_404):
            data, _ = self._send("GET", f"pulsar/apps/{app_id}/jobs")
        return list(data or [])

    def get(self, app_id: str, job_id: str) -> dict[str, Any]:
        """Return the full configuration of a job."""
        with self._translating(_missing_by_message(app_id, job_id)):
            data, _ = self._send("GET", f"pulsar/apps/{app_id}/jobs/{job_id}")
        return data

    def create(self, job: dict[str, Any]) -> dict[str, Any]:
        """Create a job in the application ``job['appid']``; returns it as the API holds it."""
        with self._translating(_app_missing_on_404):
            data, _ = self._send("PUT", f"pulsar/apps/{job['appid']}/jobs", job)
        return {**job, **(data or {})}

    def update(self, job: dict[str, Any]) -> dict[str, Any]:
        """Change an existing job; only the changed fields are needed."""
        app_id, job_id = job["appid"], job["jobid"]
        with self._translating(_missing_by_message(app_id, job_id)):
            data, _ = self._send("POST", f"pulsar/apps/{app_id}/jobs/{job_id}", job)
        return {**job, **(data or {})}

    def delete(self, job: dict[str, Any]) -> Any:
        """Remove a job; returns the HTTP response."""
        app_id, job_id = job["appid"], job["jobid"]
        with self._translating(_missing_by_message(app_id, job_id)):
            _, response = self._send("DELETE", f"pulsar/apps/{app_id}/jobs/{job_id}")
        return response