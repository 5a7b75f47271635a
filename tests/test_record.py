from types import SimpleNamespace

import pytest

from ns1rest.record import (
    RecordExistsError,
    RecordMissingError,
    RecordsService,
    ZoneMissingError,
)
from ns1rest.util import APIError

KEY = ("example.com", "www.example.com", "A")
PATH = "zones/example.com/www.example.com/A"


def record():
    return {
        "zone": KEY[0],
        "domain": KEY[1],
        "type": KEY[2],
        "answers": [{"answer": ["192.0.2.1"]}],
    }


class CannedApi:
    """Gives one canned reply to every request and remembers what was asked."""

    def __init__(self, status=200, payload=None, failure=None):
        self.status = status
        self.payload = payload
        self.failure = failure
        self.seen = []

    def new_request(self, method, path, body=None):
        return method, path, body

    def do(self, request):
        self.seen.append(request)
        if self.failure is not None:
            raise self.failure
        reply = SimpleNamespace(status_code=self.status)
        if self.status >= 400:
            raise APIError(self.payload["message"], reply)
        return self.payload, reply


CALLS = {
    "get": ("GET", lambda svc: svc.get(*KEY)),
    "create": ("PUT", lambda svc: svc.create(record())),
    "update": ("POST", lambda svc: svc.update(record())),
    "delete": ("DELETE", lambda svc: svc.delete(*KEY)),
}


def test_get_returns_record():
    api = CannedApi(payload=record())
    assert RecordsService(api).get(*KEY) == record()
    assert api.seen == [("GET", PATH, None)]


def test_create_merges_api_data():
    api = CannedApi(payload={"id": "abc", "ttl": 3600})
    sent = record()
    result = RecordsService(api).create(sent)
    assert (result["id"], result["ttl"]) == ("abc", 3600)
    assert result["answers"] == record()["answers"]
    assert api.seen[0][:2] == ("PUT", PATH)
    assert api.seen[0][2] == sent


def test_update_keeps_unreturned_fields():
    api = CannedApi(payload={"ttl": 60})
    result = RecordsService(api).update(record())
    assert result["ttl"] == 60
    assert result["domain"] == KEY[1]
    assert api.seen[0][:2] == ("POST", PATH)


def test_delete_returns_response():
    api = CannedApi(payload=None)
    assert RecordsService(api).delete(*KEY).status_code == 200
    assert api.seen == [("DELETE", PATH, None)]


@pytest.mark.parametrize(
    "call, status, message, expected, text",
    [
        ("get", 404, "record not found", RecordMissingError, "record does not exist"),
        ("get", 500, "test error", APIError, "test error"),
        ("create", 400, "zone not found", ZoneMissingError, "zone does not exist"),
        ("create", 400, "record already exists", RecordExistsError, "record already exists"),
        ("update", 404, "zone not found", ZoneMissingError, "zone does not exist"),
        ("update", 404, "record not found", RecordMissingError, "record does not exist"),
        ("update", 404, "record already exists", RecordExistsError, "record already exists"),
        ("delete", 404, "record not found", RecordMissingError, "record does not exist"),
    ],
)
def test_api_errors(call, status, message, expected, text):
    method, invoke = CALLS[call]
    api = CannedApi(status=status, payload={"message": message})
    with pytest.raises(APIError) as info:
        invoke(RecordsService(api))
    assert type(info.value) is expected
    assert text in str(info.value)
    assert info.value.status_code == status
    assert api.seen[0][:2] == (method, PATH)


def test_transport_error_propagates():
    api = CannedApi(failure=RuntimeError("oops"))
    with pytest.raises(RuntimeError, match="oops"):
        RecordsService(api).get(*KEY)