"""Service for the 'stats/qps' endpoint."""

from __future__ import annotations

from typing import Any

from .record import RecordMissingError, ZoneMissingError
from .util import Service

_QPS_ENDPOINT = "stats/qps"


def _qps_of(data: Any) -> float:
    # Field names are matched case-insensitively; other fields are ignored.
    for key, value in (data or {}).items():
        if key.lower() == "qps":
            return float(value)
    return 0.0


class StatsService(Service):
    """Reads queries-per-second figures.

    Figures lag by about 30 seconds and are rates over the preceding minute.
    """

    def _qps(self, path: str) -> float:
        with self._translating(
            {"zone not found": ZoneMissingError, "record not found": RecordMissingError}
        ):
            data, _ = self._send("GET", path)
        return _qps_of(data)

    def get_qps(self) -> float:
        """Return the current QPS of the account."""
        return self._qps(_QPS_ENDPOINT)

    def get_zone_qps(self, zone: str) -> float:
        """Return the current QPS of a zone."""
        return self._qps(f"{_QPS_ENDPOINT}/{zone}")

    def get_record_qps(self, zone: str, record: str, record_type: str) -> float:
        """Return the current QPS of a record."""
        return self._qps(f"{_QPS_ENDPOINT}/{zone}/{record}/{record_type}")