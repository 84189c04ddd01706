"""JSONP transport for SeeAlso lookups.

Every call gets its own callback token so concurrent responses can be told
apart, and the channel for that token is torn down once, after the single
response has been handed to the caller.
"""

from __future__ import annotations

import itertools
import json
import logging
import re
import time
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Any

from requests import Session
from requests.exceptions import RequestException

from .errors import PayloadError, TransportError

DEFAULT_USER_AGENT = "seealso-client/0.6 (+https://www.gbv.de/wikis/cls/SeeAlso)"
DEFAULT_WORKERS = 8

_CALLBACK_PLACEHOLDER = re.compile(r"=\?(&|$)")
_JSONP_ENVELOPE = re.compile(r"^\s*([a-zA-Z0-9._\[\]]+)\s*\((.*)\)\s*;?\s*$", re.DOTALL)

_token_lock = Lock()
_token_counter = itertools.count(int(time.time() * 1000))


def next_callback_token() -> str:
    """Return a process-unique JSONP callback name."""
    with _token_lock:
        return f"jsonp{next(_token_counter)}"


def apply_callback_token(url: str, token: str) -> str:
    """Replace the ``=?`` callback placeholder in ``url`` with ``token``."""
    return _CALLBACK_PLACEHOLDER.sub(lambda match: f"={token}{match.group(1)}", url)


def unwrap_jsonp(body: str, token: str | None = None) -> Any:
    """Decode a JSONP (or bare JSON) response body."""
    text = body.strip()
    match = _JSONP_ENVELOPE.match(text)
    if match and (token is None or match.group(1) == token):
        text = match.group(2)
    elif match:
        raise PayloadError(f"Unexpected JSONP callback {match.group(1)!r}, expected {token!r}.")
    try:
        return json.loads(text)
    except ValueError as exc:
        raise PayloadError(f"Response is not valid JSON: {exc}") from exc


def make_session(user_agent: str = DEFAULT_USER_AGENT) -> Session:
    """Create a requests session for lookups."""
    session = Session()
    session.headers.update({"User-Agent": user_agent, "Accept": "application/json, */*"})
    return session


class JsonpTransport:
    """Thread-pool backed JSONP requests with serialized callback delivery."""

    def __init__(
        self,
        session: Session,
        *,
        workers: int = DEFAULT_WORKERS,
        timeout: float | None = None,
        logger: logging.Logger,
    ) -> None:
        self._session = session
        self._timeout = timeout
        self._logger = logger
        self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="seealso")
        self._channels: dict[str, str] = {}
        self._channels_lock = Lock()
        self._deliver_lock = Lock()
        self._pending: list[Future[Any]] = []

    def fetch_json(
        self, url: str, callback: Callable[[Any], None] | None = None
    ) -> Future[Any]:
        """Issue one GET and resolve to the decoded payload."""
        future = self._executor.submit(self._call, url, callback)
        with self._channels_lock:
            self._pending.append(future)
        return future

    def open_channels(self) -> list[str]:
        with self._channels_lock:
            return list(self._channels)

    def drain(self) -> list[Future[Any]]:
        """Return and forget every future issued since the previous drain."""
        with self._channels_lock:
            pending, self._pending = self._pending, []
        return pending

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def _open(self, url: str) -> tuple[str, str]:
        token = next_callback_token()
        with self._channels_lock:
            self._channels[token] = url
        return token, apply_callback_token(url, token)

    def _teardown(self, token: str) -> None:
        with self._channels_lock:
            self._channels.pop(token, None)

    def _call(self, url: str, callback: Callable[[Any], None] | None) -> Any:
        token, channel_url = self._open(url)
        try:
            self._logger.debug("Requesting %s", channel_url)
            try:
                response = self._session.get(channel_url, timeout=self._timeout)
                response.raise_for_status()
            except RequestException as exc:
                raise TransportError(f"Lookup failed for {channel_url}: {exc}") from exc
            expected = token if channel_url != url else None
            payload = unwrap_jsonp(str(response.text), expected)
            if callback is not None:
                with self._deliver_lock:
                    callback(payload)
            return payload
        finally:
            self._teardown(token)
