# src/localizedstrings/models.py
"""
Data models for localizedstrings.

String tables are stored as a small tree of tagged values instead of raw
dictionaries, so the merge code can dispatch on the variant rather than on
whatever type a caller happened to put in the props dictionary.

Classes:
    StringValue: A single translated string (leaf)
    GroupValue: A nested table of translated values
    PlainValue: Explicit "insert as-is" wrapper for formatter arguments
    CompositeValue: Formatter argument made of several renderable children
    KeyedChild: One child of a CompositeValue tagged with its segment key
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Union


@dataclass(frozen=True)
class StringValue:
    """
    A leaf translation.

    Attributes:
        text (str): The translated text
    """
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass
class GroupValue:
    """
    A nested string table.

    Supports read access by key (``group["morning"]``), membership tests,
    ``len()`` and iteration over keys in insertion order.

    Attributes:
        entries (Dict[str, TableValue]): Child values keyed by string key
    """
    entries: Dict[str, "TableValue"] = field(default_factory=dict)

    def __getitem__(self, key: str) -> "TableValue":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Any = None) -> Any:
        return self.entries.get(key, default)

    def to_plain(self) -> Dict[str, Any]:
        return {key: to_plain(value) for key, value in self.entries.items()}


TableValue = Union[StringValue, GroupValue]


def to_value(raw: Any) -> TableValue:
    """
    Build the tagged value tree for a raw props entry.

    Mappings become :class:`GroupValue` (recursively), strings and numbers
    become :class:`StringValue`. Entries whose value is ``None`` are left out
    of their group, so they count as missing and get the default language's
    value. Values that are already tagged are returned as is.

    Args:
        raw: A string, a number, a nested mapping or an existing tagged value.

    Returns:
        The corresponding :class:`StringValue` or :class:`GroupValue`.

    Raises:
        TypeError: For any other leaf (``None`` at the top, bools, lists...).
    """
    if isinstance(raw, (StringValue, GroupValue)):
        return raw
    if isinstance(raw, Mapping):
        return GroupValue({
            str(key): to_value(value) for key, value in raw.items() if value is not None
        })
    if isinstance(raw, str):
        return StringValue(raw)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return StringValue(str(raw))
    raise TypeError(f"Unsupported string table value {raw!r} ({type(raw).__name__})")


def to_plain(value: TableValue) -> Any:
    """Convert a tagged value back to plain strings and dicts."""
    if isinstance(value, GroupValue):
        return value.to_plain()
    return value.text


# ── formatter argument variants ────────────────────────────────────────────

@dataclass(frozen=True)
class PlainValue:
    """
    A formatter argument that is inserted unchanged.

    Wrapping is optional: unwrapped arguments are treated the same way. It
    exists so callers can pass a value that must never be expanded.
    """
    value: Any


@dataclass(frozen=True)
class CompositeValue:
    """
    A formatter argument made of several renderable children.

    The formatter expands it into a list of :class:`KeyedChild` items so a
    rendering layer can tell repeated placeholders apart.

    Attributes:
        children (Sequence[Any]): Child nodes in render order
    """
    children: Sequence[Any] = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.children)


@dataclass(frozen=True)
class KeyedChild:
    """
    A composite child tagged with the position of the segment it came from.

    Attributes:
        key (str): Index of the placeholder segment, as a string
        value (Any): The child node
    """
    key: str
    value: Any


FormattedSegments = List[Any]
