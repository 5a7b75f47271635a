"""Shared pieces for the REST services: the API error, the service base and request decorators."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Protocol, Union
from urllib.request import Request


class APIError(Exception):
    """An error reported by the API, carrying the HTTP response it arrived with."""

    default_message = "API error"

    def __init__(self, message: str | None = None, response: Any = None) -> None:
        self.message = self.default_message if message is None else message
        self.response = response
        super().__init__(self.message)

    @property
    def status_code(self) -> int | None:
        """HTTP status of the response, if there is one."""
        return getattr(self.response, "status_code", None)


class _Doer(Protocol):
    def do(self, request: Any) -> Any: ...


@dataclass(frozen=True)
class DoerFunc:
    """Turns a plain function of a request into a doer."""

    func: Callable[[Any], Any]

    def do(self, request: Any) -> Any:
        return self.func(request)


Decorator = Callable[[_Doer], _Doer]

_ErrorChooser = Union[
    Mapping[str, type[APIError]],
    Callable[[APIError], Union[type[APIError], None]],
]


def decorate(doer: _Doer, *args: Decorator) -> _Doer:
    """Wrap ``doer`` with each decorator in turn; the last one ends up outermost."""
    decorated = doer
    for decorator in args:
        decorated = decorator(decorated)
    return decorated


def _strip_line_breaks(text: str) -> str:
    return text.replace("\n", "").replace("\r", "")


def logging_decorator(logger: logging.Logger) -> Decorator:
    """Return a decorator that logs user agent, method and URL of each request."""

    def decorator(doer: _Doer) -> _Doer:
        def logged(request: Request) -> Any:
            agent = _strip_line_breaks(request.get_header("User-agent", "") or "")
            url = _strip_line_breaks(request.full_url)
            logger.info("%s: %s %s", agent, request.get_method(), url)
            return doer.do(request)

        return DoerFunc(logged)

    return decorator


class Service:
    """Base for endpoint services.

    The client must offer ``new_request(method, path, body)`` and ``do(request)``;
    ``do`` returns a ``(decoded_body, response)`` pair and raises ``APIError`` for
    error responses.
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Any]:
        request = self.client.new_request(method, path, body)
        return self.client.do(request)

    @contextmanager
    def _translating(self, choose: _ErrorChooser) -> Iterator[None]:
        """Replace API errors by specific ones; a mapping chooses by message."""
        try:
            yield
        except APIError as err:
            if isinstance(choose, Mapping):
                replacement = choose.get(err.message)
            else:
                replacement = choose(err)
            if replacement is None:
                raise
            raise replacement(response=err.response) from err