import pytest

from ns1rest.record import RecordMissingError, ZoneMissingError
from ns1rest.stat import StatsService
from ns1rest.util import APIError

ACCOUNT = "stats/qps"
ZONE = "stats/qps/example.com"
RECORD = "stats/qps/example.com/www.example.com/A"

CALLS = {
    ACCOUNT: lambda svc: svc.get_qps(),
    ZONE: lambda svc: svc.get_zone_qps("example.com"),
    RECORD: lambda svc: svc.get_record_qps("example.com", "www.example.com", "A"),
}


class StatusReply:
    def __init__(self, code):
        self.status_code = code
        self.headers = {}


class QpsApi:
    """Answers a single path with a fixed status and payload."""

    def __init__(self, path, payload, code=200):
        self.path, self.payload, self.code = path, payload, code
        self.asked = []

    def new_request(self, method, path, body=None):
        return (method, path, body)

    def do(self, request):
        self.asked.append(request[:2])
        assert request[:2] == ("GET", self.path)
        if self.code >= 400:
            raise APIError(self.payload["message"], StatusReply(self.code))
        return self.payload, StatusReply(self.code)


@pytest.mark.parametrize(
    "path, payload, expected",
    [
        (ACCOUNT, {"qps": 12.5, "networks": [{"network": 0, "qps": 12.5}]}, 12.5),
        (ZONE, {"qps": 3.25}, 3.25),
        (RECORD, {"qps": 1.5}, 1.5),
        (ACCOUNT, {"QPS": 7}, 7.0),
        (ACCOUNT, {}, 0.0),
    ],
)
def test_qps_values(path, payload, expected):
    api = QpsApi(path, payload)
    assert CALLS[path](StatsService(api)) == expected
    assert api.asked == [("GET", path)]


@pytest.mark.parametrize(
    "path, code, message, expected",
    [
        (ZONE, 404, "zone not found", ZoneMissingError),
        (RECORD, 404, "record not found", RecordMissingError),
        (ACCOUNT, 500, "test error", APIError),
    ],
)
def test_errors(path, code, message, expected):
    api = QpsApi(path, {"message": message}, code)
    with pytest.raises(APIError) as info:
        CALLS[path](StatsService(api))
    assert type(info.value) is expected


def test_other_error_keeps_details():
    api = QpsApi(ACCOUNT, {"message": "test error"}, 500)
    with pytest.raises(APIError) as info:
        StatsService(api).get_qps()
    assert (info.value.message, info.value.status_code) == ("test error", 500)