"""Registry of named services and views, and the declarative tag scanner."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import Tag

from .dom import class_tokens, iter_elements, read_identifier
from .models import MatchTask
from .service import Source
from .view import Renderer


class Collection:
    """Named services and views plus the scan-and-dispatch driver.

    Services are tried in registration order, so an element carrying two
    service classes is always sent to the one registered first.
    """

    def __init__(
        self, default_view: Renderer | None = None, *, logger: logging.Logger | None = None
    ) -> None:
        self.services: dict[str, Source] = {}
        self.views: dict[str, Renderer] = {}
        self.default_view = default_view if default_view is not None else Renderer()
        self._logger = logger or logging.getLogger(__name__)

    def add_service(self, name: str, service: Source) -> None:
        self.services[name] = service

    def add_view(self, name: str, view: Renderer) -> None:
        self.views[name] = view

    def scan(self, root: Tag) -> list[MatchTask]:
        """Collect one task per element that opts into a registered service."""
        tasks: list[MatchTask] = []
        for element in iter_elements(root):
            tokens = class_tokens(element)
            if not tokens:
                continue
            identifier = read_identifier(element)
            if identifier is None:
                continue
            service = next(
                (self.services[name] for name in self.services if name in tokens), None
            )
            if service is None:
                continue
            view = next((self.views[token] for token in tokens if token in self.views), None)
            tasks.append(
                MatchTask(
                    service=service,
                    identifier=identifier,
                    element=element,
                    view=view if view is not None else self.default_view,
                )
            )
        return tasks

    def dispatch(self, tasks: Iterable[MatchTask]) -> None:
        for task in tasks:
            task.service.query_display(task.identifier, task.element, task.view)

    def replace_tags(self, root: Tag) -> list[MatchTask]:
        """Scan ``root`` first, then query every match; returns the tasks."""
        tasks = self.scan(root)
        self._logger.debug("Dispatching %d SeeAlso lookups", len(tasks))
        self.dispatch(tasks)
        return tasks
