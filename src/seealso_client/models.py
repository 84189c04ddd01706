"""Protocols and lightweight model types."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from bs4 import Tag

    from .response import ResultSet
    from .service import Source
    from .view import Renderer

ResponseCallback = Callable[["ResultSet"], None]


class Transport(Protocol):
    """Contract for the JSON delivery channel."""

    def fetch_json(self, url: str, callback: Callable[[Any], None] | None = None) -> Future[Any]:
        """Request ``url`` and hand the decoded payload to ``callback`` once."""


class View(Protocol):
    """Contract for anything that can render a response into an element."""

    def render(self, response: Any) -> str:
        """Return HTML for a response."""

    def display(self, element: Tag, response: Any) -> ResultSet:
        """Write HTML for a response into ``element``."""


@dataclass(frozen=True)
class MatchTask:
    """One element selected by a scan, waiting to be queried."""

    service: Source
    identifier: str
    element: Tag
    view: Renderer
