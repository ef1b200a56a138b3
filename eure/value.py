"""The EURE data model: values, key-comparable values and paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from eure.identifier import Identifier

_I64_MIN = -(1 << 63)
_U64_MAX = (1 << 64) - 1


class Unit:
    """The unit value; all instances are equal."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __hash__(self) -> int:
        return hash(Unit)

    def __repr__(self) -> str:
        return "Unit()"


@dataclass(frozen=True)
class TypedString:
    """A string tagged with a type name."""

    type_name: str
    value: str


@dataclass(frozen=True)
class Code:
    """A piece of code in a named language."""

    language: str
    content: str


class Array(list):
    """An ordered, mutable sequence of values."""

    def __repr__(self) -> str:
        return f"Array({list.__repr__(self)})"


class Tuple(tuple):
    """A fixed sequence of values; hashable when its items are."""

    def __new__(cls, items: Iterable[Any] = ()) -> "Tuple":
        return super().__new__(cls, items)

    def __repr__(self) -> str:
        return f"Tuple({list(self)!r})"


@dataclass(frozen=True)
class Variant:
    """A value tagged with the name of its variant."""

    tag: str
    content: Any


def is_key_value(value: Any) -> bool:
    """Return whether ``value`` may be used as a map key."""
    if value is None or isinstance(value, (bool, str, Unit)):
        return True
    if isinstance(value, int):
        return _I64_MIN <= value <= _U64_MAX
    if isinstance(value, Tuple):
        return all(is_key_value(item) for item in value)
    return False


def _tag(key: Any) -> tuple:
    # Keeps True and 1 apart, as they are different keys in the data model.
    if key is None:
        return ("null",)
    if isinstance(key, bool):
        return ("bool", key)
    if isinstance(key, int):
        return ("int", key)
    if isinstance(key, str):
        return ("str", key)
    if isinstance(key, Unit):
        return ("unit",)
    return ("tuple", tuple(_tag(item) for item in key))


class Map(MutableMapping):
    """A mapping from key-comparable values to values."""

    def __init__(self, entries: Union[Mapping, Iterable[tuple[Any, Any]]] = ()) -> None:
        self._entries: dict[tuple, tuple[Any, Any]] = {}
        items = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in items:
            self[key] = value

    def __getitem__(self, key: Any) -> Any:
        if not is_key_value(key):
            raise KeyError(key)
        try:
            return self._entries[_tag(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: Any, value: Any) -> None:
        if not is_key_value(key):
            raise TypeError(f"not a key-comparable value: {key!r}")
        self._entries[_tag(key)] = (key, value)

    def __delitem__(self, key: Any) -> None:
        if not is_key_value(key):
            raise KeyError(key)
        try:
            del self._entries[_tag(key)]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Map):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self == Map(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self._entries.values())
        return f"Map({{{body}}})"


Value = Union[
    None, bool, int, float, str, TypedString, Code, Array, Tuple, Map, Variant, Unit
]


@dataclass(frozen=True)
class ExtensionSegment:
    """A path segment naming an extension."""

    name: Identifier


@dataclass(frozen=True)
class ValueSegment:
    """A path segment keyed by a value."""

    value: Any


@dataclass(frozen=True)
class ArraySegment:
    """A path segment into an array, optionally at a given index."""

    key: Any
    index: Optional[Any] = None


PathSegment = Union[ExtensionSegment, ValueSegment, ArraySegment]


class Path(list):
    """A sequence of path segments."""

    def __repr__(self) -> str:
        return f"Path({list.__repr__(self)})"