"""Runtime configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from .transport import DEFAULT_USER_AGENT, DEFAULT_WORKERS
from .validation import validate_runtime_constraints
from .view import DEFAULT_MAX_ITEMS, VIEW_FLAVOURS

DEFAULT_VIEW = "csv"


@dataclass(frozen=True)
class ClientConfig:
    """Validated configuration for lookups and document rendering."""

    services: tuple[tuple[str, str], ...]
    views: tuple[tuple[str, str], ...] = ()
    default_view: str = DEFAULT_VIEW
    input: str | None = None
    output: str | None = None
    workers: int = DEFAULT_WORKERS
    request_timeout: float | None = None
    max_items: int = DEFAULT_MAX_ITEMS
    user_agent: str = DEFAULT_USER_AGENT
    show_progress: bool = True

    def __post_init__(self) -> None:
        validate_runtime_constraints(
            services=self.services,
            views=self.views,
            view_flavours=tuple(VIEW_FLAVOURS),
            default_view=self.default_view,
            workers=self.workers,
            request_timeout=self.request_timeout,
            max_items=self.max_items,
        )
