"""HTML document loading and saving."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup


def read_document(path: str) -> BeautifulSoup:
    """Parse an HTML file into a document tree."""
    text = Path(path).read_text(encoding="utf-8")
    return BeautifulSoup(text, "html.parser")


def write_document(path: str, document: BeautifulSoup) -> None:
    """Write the (possibly updated) document tree as UTF-8 HTML."""
    Path(path).write_text(str(document), encoding="utf-8")
