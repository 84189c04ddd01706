"""HTML rendering of SeeAlso responses."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, Union

from bs4 import Tag

from .dom import CONTAINER_CLASS, ancestors, has_class, reveal, set_inner_html
from .errors import ConfigError
from .response import Entry, ResultSet, normalize

Template = Union[str, Callable[[Any], str]]
ItemTemplate = Callable[[Entry], str]

DEFAULT_DELIMITER = ", "
DEFAULT_MAX_ITEMS = 10
DEFAULT_OVERFLOW = " ..."


def resolve_template(template: Any, argument: Any) -> str:
    """Evaluate a template slot: call it, use it, or fall back to ``""``."""
    if callable(template):
        value = template(argument)
        return value if isinstance(value, str) else ""
    if isinstance(template, str):
        return template
    return ""


def default_item_html(entry: Entry) -> str:
    """Link the label to the uri; the uri doubles as label when none is given."""
    label = entry.label or entry.uri
    if not label:
        return ""
    if entry.uri:
        return f'<a href="{entry.uri}">{label}</a>'
    return label


@dataclass(frozen=True)
class TemplateConfig:
    item_html: ItemTemplate = default_item_html
    delimiter: Template = DEFAULT_DELIMITER
    prefix: Template = ""
    suffix: Template = ""
    empty: Template = ""
    max_items: int = DEFAULT_MAX_ITEMS
    overflow: Template = DEFAULT_OVERFLOW

    def __post_init__(self) -> None:
        if not callable(self.item_html):
            object.__setattr__(self, "item_html", default_item_html)
        if isinstance(self.max_items, bool) or not isinstance(self.max_items, int):
            raise ConfigError(f"max_items must be an integer, got {self.max_items!r}.")
        if self.max_items < 0:
            raise ConfigError("max_items must be >= 0.")


def csv_config(**overrides: Any) -> TemplateConfig:
    """Comma separated inline list."""
    return TemplateConfig(**overrides)


def list_config(**overrides: Any) -> TemplateConfig:
    """Unordered ``<ul>`` list; ``item_html`` overrides are wrapped in ``<li>``."""
    inner = overrides.pop("item_html", default_item_html)
    if not callable(inner):
        inner = default_item_html

    def item_html(entry: Entry) -> str:
        return f"<li>{resolve_template(inner, entry)}</li>"

    base = TemplateConfig(prefix="<ul>", suffix="</ul>", delimiter="", item_html=item_html)
    return replace(base, **overrides)


VIEW_FLAVOURS: dict[str, Callable[..., TemplateConfig]] = {
    "csv": csv_config,
    "list": list_config,
}


@dataclass
class Renderer:
    """Turns a ``ResultSet`` into HTML under one ``TemplateConfig``."""

    config: TemplateConfig = field(default_factory=TemplateConfig)

    def render(self, response: Any) -> str:
        result = normalize(response)
        config = self.config
        if not result.size():
            return resolve_template(config.empty, result.identifier)

        parts = [resolve_template(config.prefix, result)]
        for index, entry in enumerate(result.entries):
            if index >= config.max_items:
                parts.append(resolve_template(config.overflow, result))
                break
            if index > 0:
                parts.append(resolve_template(config.delimiter, result))
            parts.append(resolve_template(config.item_html, entry))
        parts.append(resolve_template(config.suffix, result))
        return "".join(parts)

    def display(self, element: Tag, response: Any) -> ResultSet:
        """Render into ``element`` and reveal hidden containers around it."""
        result = normalize(response)
        set_inner_html(element, self.render(result))
        if result.size():
            for ancestor in ancestors(element):
                if has_class(ancestor, CONTAINER_CLASS):
                    reveal(ancestor)
        return result


def make_renderer(flavour: str = "csv", **overrides: Any) -> Renderer:
    """Build a renderer from a named flavour (``csv`` or ``list``)."""
    try:
        factory = VIEW_FLAVOURS[flavour]
    except KeyError as exc:
        raise ConfigError(
            f"Unknown view flavour {flavour!r}; choose from {sorted(VIEW_FLAVOURS)}."
        ) from exc
    return Renderer(factory(**overrides))
