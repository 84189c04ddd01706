"""BeautifulSoup helpers for the parts of the document the client touches."""

from __future__ import annotations

import re
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

CONTAINER_CLASS = "seealso-container"
_WHITESPACE = re.compile(r"\s+")


def class_tokens(element: Tag) -> list[str]:
    """Return the element's class tokens in document order, without duplicates."""
    raw = element.get("class")
    if raw is None:
        return []
    values = raw if isinstance(raw, list) else [str(raw)]
    tokens: list[str] = []
    for value in values:
        for token in _WHITESPACE.split(value):
            if token and token not in tokens:
                tokens.append(token)
    return tokens


def has_class(element: Tag, token: str) -> bool:
    """Whole-token class membership."""
    return token in class_tokens(element)


def read_identifier(element: Tag) -> str | None:
    """Return the trimmed ``title`` attribute, or None when it is absent."""
    title = element.get("title")
    if title is None:
        return None
    if isinstance(title, list):
        title = " ".join(title)
    return str(title).strip()


def set_inner_html(element: Tag, html: str) -> None:
    """Replace the element's children with raw, unescaped markup."""
    element.clear()
    if not html:
        return
    fragment = BeautifulSoup(html, "html.parser")
    for child in list(fragment.contents):
        element.append(child.extract())


def reveal(element: Tag) -> None:
    """Drop any ``display`` declaration so the element falls back to its default."""
    style = element.get("style")
    if style is None:
        return
    declarations = [part.strip() for part in str(style).split(";") if part.strip()]
    kept = [
        part for part in declarations if part.split(":", maxsplit=1)[0].strip().lower() != "display"
    ]
    if kept:
        element["style"] = "; ".join(kept)
    else:
        del element["style"]


def iter_elements(root: Tag) -> Iterator[Tag]:
    """Yield every element under ``root`` in document order."""
    if not isinstance(root, BeautifulSoup):
        yield root
    yield from root.find_all(True)


def ancestors(element: Tag) -> Iterator[Tag]:
    """Yield the parent chain up to, but excluding, the document object."""
    parent = element.parent
    while parent is not None and not isinstance(parent, BeautifulSoup):
        yield parent
        parent = parent.parent
