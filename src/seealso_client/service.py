"""SeeAlso sources and remote services."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from bs4 import Tag

from .models import ResponseCallback, Transport, View
from .response import ResultSet, normalize

QueryFunction = Callable[..., Any]


class Source:
    """Delivers ``ResultSet`` objects from an arbitrary query function.

    A synchronous function takes ``(identifier)`` and returns a response.
    An asynchronous one takes ``(identifier, callback)`` and calls
    ``callback`` later; it cannot answer a query made without a callback.
    """

    def __init__(self, query: QueryFunction | None = None, *, asynchronous: bool = False) -> None:
        self._query_method = query
        self.asynchronous = asynchronous

    def query(self, identifier: str, callback: ResponseCallback | None = None) -> ResultSet | None:
        """Return a ``ResultSet``, or hand it to ``callback`` and return None."""
        if self._query_method is None:
            return ResultSet()
        if callback is None:
            if self.asynchronous:
                return ResultSet()
            return normalize(self._query_method(identifier))

        if self.asynchronous:
            self._query_method(identifier, lambda data: callback(normalize(data)))
        else:
            callback(normalize(self._query_method(identifier)))
        return None

    def query_display(self, identifier: str, element: Tag, view: View) -> None:
        """Query and display the response with ``view`` inside ``element``."""
        self.query(identifier, lambda data: view.display(element, data))


class Service(Source):
    """A SeeAlso server reached through its base URL."""

    def __init__(self, url: str, transport: Transport, *, logger: logging.Logger) -> None:
        super().__init__(self._remote_query, asynchronous=True)
        self.url = url
        self._transport = transport
        self._logger = logger

    def query_url(self, identifier: str, callback: str | None = None) -> str:
        """Build the lookup URL; the identifier is passed through verbatim."""
        separator = "&" if "?" in self.url else "?"
        url = f"{self.url}{separator}format=seealso&id={identifier}"
        if callback:
            url += f"&callback={callback}"
        return url

    def _remote_query(self, identifier: str, callback: Callable[[Any], None]) -> None:
        future = self._transport.fetch_json(self.query_url(identifier, "?"), callback)
        future.add_done_callback(lambda done: self._log_failure(identifier, done))

    def _log_failure(self, identifier: str, future: Future[Any]) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            self._logger.debug("No SeeAlso response for %r from %s: %s", identifier, self.url, exc)

    def __repr__(self) -> str:
        return f"Service({self.url!r})"
