"""SeeAlso response model and wire normalization.

A SeeAlso Simple Response is the OpenSearch Suggestions array
``[identifier, [labels], [descriptions], [uris]]``. Servers are loose about
it: description and uri lists may be short or missing, and clients may be
handed a bare identifier or the raw JSON text instead of a parsed array.
``normalize`` accepts all of those and always yields a ``ResultSet``.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

CALLBACK_PATTERN = re.compile(r"[a-zA-Z0-9._\[\]]+")
_JSON_ARRAY_START = re.compile(r"^\s*\[")


@dataclass(frozen=True)
class Entry:
    """One (label, description, uri) triple."""

    label: str = ""
    description: str = ""
    uri: str = ""


@dataclass
class ResultSet:
    """Normalized response for one identifier."""

    identifier: str = ""
    entries: list[Entry] = field(default_factory=list)

    def add(self, label: Any = "", description: Any = "", uri: Any = "") -> None:
        """Append one entry; values that are not strings are stored as ``""``."""
        self.entries.append(
            Entry(
                label=label if isinstance(label, str) else "",
                description=description if isinstance(description, str) else "",
                uri=uri if isinstance(uri, str) else "",
            )
        )

    def get(self, index: int) -> Entry | None:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def size(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def labels(self) -> list[str]:
        return [entry.label for entry in self.entries]

    @property
    def descriptions(self) -> list[str]:
        return [entry.description for entry in self.entries]

    @property
    def uris(self) -> list[str]:
        return [entry.uri for entry in self.entries]

    def to_wire(self, callback: str | None = None) -> str:
        return to_wire(self, callback)


def _is_composite(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, Mapping))


def _at(container: Any, index: int) -> Any:
    """Positional lookup shared by arrays and array-like mappings."""
    if isinstance(container, Mapping):
        if index in container:
            return container[index]
        return container.get(str(index))
    if isinstance(container, Sequence) and 0 <= index < len(container):
        return container[index]
    return None


def _length(container: Any) -> int:
    # Mappings carry no length of their own, like a plain JS object.
    if isinstance(container, Mapping):
        return 0
    return len(container)


def _from_composite(value: Any) -> ResultSet:
    result = ResultSet()
    identifier = _at(value, 0)
    if isinstance(identifier, str):
        result.identifier = identifier

    labels = _at(value, 1)
    if not _is_composite(labels):
        return result

    descriptions = _at(value, 2)
    uris = _at(value, 3)
    if not _is_composite(descriptions):
        descriptions = None
    if not _is_composite(uris):
        uris = None

    for index in range(_length(labels)):
        result.add(
            _at(labels, index),
            _at(descriptions, index) if descriptions is not None else "",
            _at(uris, index) if uris is not None else "",
        )
    return result


def normalize(value: Any) -> ResultSet:
    """Turn any accepted response shape into a ``ResultSet``.

    Raises ``json.JSONDecodeError`` when ``value`` is a string that looks
    like a JSON array but is not valid JSON.
    """
    if isinstance(value, ResultSet):
        return value
    if _is_composite(value):
        return _from_composite(value)
    if isinstance(value, str):
        if _JSON_ARRAY_START.match(value):
            return normalize(json.loads(value))
        return ResultSet(identifier=value)
    return ResultSet()


def is_valid_callback(callback: Any) -> bool:
    """Return True when ``callback`` may be used as a JSONP function name."""
    return isinstance(callback, str) and CALLBACK_PATTERN.fullmatch(callback) is not None


def to_wire(result: ResultSet, callback: str | None = None) -> str:
    """Serialize to the four-element JSON array, optionally as JSONP."""
    payload = json.dumps(
        [result.identifier, result.labels, result.descriptions, result.uris],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    if is_valid_callback(callback):
        return f"{callback}({payload});"
    return payload
