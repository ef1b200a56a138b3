"""A span-free representation of a EURE document."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterable, Optional, Union

_U32_MAX = (1 << 32) - 1
_U8_MAX = (1 << 8) - 1


class KeyKind(IntEnum):
    """The kinds of key; their order is the order of keys of different kinds."""

    IDENT = 0
    STRING = 1
    EXTENSION = 2
    ARRAY_INDEX = 3
    ARRAY = 4
    TUPLE_INDEX = 5


_TEXT_KINDS = {KeyKind.IDENT, KeyKind.STRING, KeyKind.EXTENSION}
_INDEX_LIMITS = {KeyKind.ARRAY_INDEX: _U32_MAX, KeyKind.TUPLE_INDEX: _U8_MAX}


@dataclass(frozen=True, order=True)
class EureKey:
    """One key of a binding or section path."""

    kind: KeyKind
    value: Optional[Union[str, int]] = None

    def __post_init__(self) -> None:
        kind = KeyKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if kind in _TEXT_KINDS:
            if not isinstance(self.value, str):
                raise TypeError(f"{kind.name} key needs a str value")
        elif kind is KeyKind.ARRAY:
            if self.value is not None:
                raise ValueError("ARRAY key takes no value")
        else:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise TypeError(f"{kind.name} key needs an int value")
            limit = _INDEX_LIMITS[kind]
            if not 0 <= self.value <= limit:
                raise ValueError(f"{kind.name} key must be between 0 and {limit}")

    @classmethod
    def ident(cls, name: str) -> "EureKey":
        return cls(KeyKind.IDENT, name)

    @classmethod
    def string(cls, text: str) -> "EureKey":
        return cls(KeyKind.STRING, text)

    @classmethod
    def extension(cls, name: str) -> "EureKey":
        return cls(KeyKind.EXTENSION, name)

    @classmethod
    def array_index(cls, index: int) -> "EureKey":
        return cls(KeyKind.ARRAY_INDEX, index)

    @classmethod
    def array(cls) -> "EureKey":
        return cls(KeyKind.ARRAY)

    @classmethod
    def tuple_index(cls, index: int) -> "EureKey":
        return cls(KeyKind.TUPLE_INDEX, index)


def _check_key(item: Any) -> EureKey:
    if not isinstance(item, EureKey):
        raise TypeError(f"expected EureKey, got {type(item).__name__}")
    return item


class EureKeys(list):
    """A list of keys that accepts only EureKey items."""

    def __init__(self, keys: Iterable[EureKey] = ()) -> None:
        super().__init__(_check_key(k) for k in keys)

    def append(self, key: EureKey) -> None:
        super().append(_check_key(key))

    def insert(self, index: int, key: EureKey) -> None:
        super().insert(index, _check_key(key))

    def extend(self, keys: Iterable[EureKey]) -> None:
        super().extend(_check_key(k) for k in keys)

    def __repr__(self) -> str:
        return f"EureKeys({list.__repr__(self)})"


@dataclass(frozen=True)
class Text:
    """A text binding's content."""

    content: str


# Values in a document: str, float, int, bool, list (array), tuple, a list of
# (key, value) pairs wrapped in dict for maps, or a nested EureDocument.
EureValue = Union[str, float, int, bool, list, tuple, dict, "EureDocument"]
BindingRhs = Union[EureValue, Text, "EureDocument"]


@dataclass
class EureBinding:
    """Keys bound to a value, a text or a nested document."""

    keys: list[EureKey]
    rhs: Any


@dataclass
class EureSection:
    """A section: its keys and either a nested document or a list of bindings."""

    keys: EureKeys
    body: Union["EureDocument", list[EureBinding]]


@dataclass
class EureDocument:
    """A whole document: its sections and its top-level bindings."""

    sections: list[EureSection] = field(default_factory=list)
    bindings: list[EureBinding] = field(default_factory=list)