# ns1rest

Service objects for a managed DNS REST API. Each endpoint family has its
own service class, and errors the API reports are raised as exceptions
that can be caught by type.

## What the package does not include

There is no HTTP client in this package. Every service is built around a
client object that you supply:

- `client.new_request(method, path, body)` builds a request;
- `client.do(request)` sends it and returns a `(decoded_body, response)`
  pair, raising `ns1rest.util.APIError` when the API answers with an error;
- `client.follow_pagination` (optional, false if absent) tells the listing
  services whether to follow further pages.

The response is expected to have `headers` (for the `Link` header) and a
`status_code`. Resources are plain dicts; there are no model classes.

## Services

| Module                         | Service                      | Endpoint                  |
|--------------------------------|------------------------------|---------------------------|
| `ns1rest.zone`                 | `ZonesService`               | `zones`                   |
| `ns1rest.record`               | `RecordsService`             | `zones/ZONE/DOMAIN/TYPE`  |
| `ns1rest.search`               | `RecordSearchService`        | `dns/record/search`       |
| `ns1rest.search`               | `ZoneSearchService`          | `dns/zone/search`         |
| `ns1rest.tsig_key`             | `TsigService`                | `tsig`                    |
| `ns1rest.version`              | `VersionsService`            | `zones/ZONE/versions`     |
| `ns1rest.stat`                 | `StatsService`               | `stats/qps`               |
| `ns1rest.pulsar_job`           | `PulsarJobsService`          | `pulsar/apps/APPID/jobs`  |
| `ns1rest.redirect`             | `RedirectService`            | `redirect`                |
| `ns1rest.redirect_certificate` | `RedirectCertificateService` | `redirect/certificates`   |

Each service is constructed with the client: `ZonesService(client)`.

- `list`, `get`, `create`, `update`, `delete` on most services.
  `create` and `update` return the given dict updated with what the API
  sent back; `delete` returns the HTTP response.
- `ZonesService.get(zone, records)` adds `?records=false` when `records`
  is false.
- `VersionsService.create(zone, force)`, `delete(zone, version_id)` and
  `activate(zone, version_id)`.
- `StatsService.get_qps()`, `get_zone_qps(zone)` and
  `get_record_qps(zone, record, record_type)` return a float.
- `RecordSearchService.search(params)` and `ZoneSearchService.search(params)`
  take an already encoded query string.
- `RedirectCertificateService.create(domain)` requests a certificate;
  `update(cert_id)` asks for renewal and `delete(cert_id)` for revocation.

When `client.follow_pagination` is true, `ZonesService.list`,
`ZonesService.get` (for a zone's records), `RedirectService.list` and
`RedirectCertificateService.list` keep fetching the `rel="next"` target
of the `Link` header and join the pages.

## Errors

`APIError` (in `ns1rest.util`) carries `message`, `response` and
`status_code`. Errors the services recognise are raised as subclasses,
still holding the response:

- `ns1rest.zone`: `ZoneExistsError`, `ZoneMissingError`
- `ns1rest.record`: `ZoneMissingError`, `RecordExistsError`,
  `RecordMissingError` (the stats service raises these too)
- `ns1rest.tsig_key`: `TsigKeyExistsError` (on 409), `TsigKeyMissingError` (on 404)
- `ns1rest.pulsar_job`: `AppMissingError`, `JobMissingError`
- `ns1rest.redirect`: `RedirectNilError`, `RedirectExistsError`,
  `RedirectNotFoundError`
- `ns1rest.redirect_certificate`: `RedirectCertificateExistsError`,
  `RedirectCertificateNotFoundError` (and `RedirectCertificateNilError`)

`ns1rest.zone.ZoneMissingError` is a subclass of
`ns1rest.record.ZoneMissingError`, so catching the latter covers both.

```python
from ns1rest.zone import ZoneMissingError, ZonesService

zones = ZonesService(client)
try:
    zones.delete("example.com")
except ZoneMissingError:
    print("nothing to delete")
```

## Wrapping the transport

A "doer" is anything with a `do(request)` method. `DoerFunc` turns a plain
function into one, `decorate(doer, *decorators)` applies the decorators in
order (the last ends up outermost), and `logging_decorator(logger)` returns
a decorator that logs, at INFO, each `urllib.request.Request`'s user agent,
method and URL with line breaks removed.

```python
import logging

from ns1rest.util import DoerFunc, decorate, logging_decorator

logger = logging.getLogger("dns-api")
doer = decorate(DoerFunc(send), logging_decorator(logger))
```

## Running the tests

Install with the `test` extra, then run `pytest` from the project root.