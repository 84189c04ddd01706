"""Validation and runtime guardrails."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import urlparse

from .errors import ConfigError

_CLASS_TOKEN = re.compile(r"[A-Za-z_\-][\w\-]*")


def is_supported_url(url: str) -> bool:
    """Allow only absolute HTTP(S) URLs with a hostname."""
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def is_class_token(name: str) -> bool:
    """Return True when ``name`` can be used as a single CSS class token."""
    return bool(_CLASS_TOKEN.fullmatch(name or ""))


def parse_named_value(raw: str) -> tuple[str, str]:
    """Split a ``name=value`` CLI argument."""
    name, sep, value = raw.partition("=")
    name, value = name.strip(), value.strip()
    if not sep or not name or not value:
        raise ConfigError(f"Expected NAME=VALUE, got {raw!r}.")
    return name, value


def load_lines_from_file(path: str) -> list[str]:
    """Load non-empty, non-comment lines from a UTF-8 text file."""
    content = Path(path).read_text(encoding="utf-8")
    lines = (line.strip() for line in content.splitlines())
    return [line for line in lines if line and not line.startswith("#")]


def validate_runtime_constraints(
    *,
    services: tuple[tuple[str, str], ...],
    views: tuple[tuple[str, str], ...],
    view_flavours: tuple[str, ...],
    default_view: str,
    workers: int,
    request_timeout: float | None,
    max_items: int,
) -> None:
    """Validate CLI/runtime configuration and raise ConfigError on invalid values."""
    if not services:
        raise ConfigError("Register at least one service with --service NAME=URL.")
    for name, url in services:
        if not is_class_token(name):
            raise ConfigError(f"Service name {name!r} is not a valid class token.")
        if not is_supported_url(url):
            raise ConfigError(f"Service {name!r} needs an absolute http(s) URL, got {url!r}.")
    for name, flavour in views:
        if not is_class_token(name):
            raise ConfigError(f"View name {name!r} is not a valid class token.")
        if flavour not in view_flavours:
            raise ConfigError(f"View {name!r} uses unknown flavour {flavour!r}.")
    if default_view not in view_flavours:
        raise ConfigError(f"Unknown default view flavour {default_view!r}.")
    if workers < 1:
        raise ConfigError("--workers must be >= 1.")
    if request_timeout is not None and request_timeout <= 0:
        raise ConfigError("--timeout must be > 0.")
    if max_items < 0:
        raise ConfigError("--max-items must be >= 0.")
