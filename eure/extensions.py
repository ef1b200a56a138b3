"""Extension namespaces and the types their values may take."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Union


class ScalarType(Enum):
    """Extension types that carry no further structure."""

    STRING = auto()
    INTEGER = auto()
    FLOAT = auto()
    BOOLEAN = auto()
    NULL = auto()


def _check_type(item: Any) -> Any:
    if not isinstance(item, _EXTENSION_TYPES):
        raise TypeError(f"not an extension type: {item!r}")
    return item


@dataclass(frozen=True)
class UnionType:
    """Any one of several types."""

    members: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(_check_type(m) for m in self.members))


@dataclass(frozen=True)
class MapType:
    """A map with named fields of given types."""

    fields: tuple

    def __post_init__(self) -> None:
        checked = []
        for name, kind in self.fields:
            if not isinstance(name, str):
                raise TypeError(f"field name must be a str: {name!r}")
            checked.append((name, _check_type(kind)))
        object.__setattr__(self, "fields", tuple(checked))


@dataclass(frozen=True)
class ArrayType:
    """An array whose items have one type."""

    item: Any

    def __post_init__(self) -> None:
        _check_type(self.item)


@dataclass(frozen=True)
class TupleType:
    """A tuple with one type per position."""

    elements: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(_check_type(e) for e in self.elements))


_EXTENSION_TYPES = (ScalarType, UnionType, MapType, ArrayType, TupleType)

ExtensionType = Union[ScalarType, UnionType, MapType, ArrayType, TupleType]


class ExtensionNamespace(ABC):
    """A namespace of extensions that documents may use."""

    @abstractmethod
    def name(self) -> str:
        """The name of the namespace."""

    @abstractmethod
    def top_level_only(self) -> bool:
        """Whether the namespace is allowed only at the top level of a document."""

    @abstractmethod
    def extension_type(self) -> ExtensionType:
        """The type that values in the namespace take."""

    @classmethod
    @abstractmethod
    def parse(cls, s: str) -> Optional["ExtensionNamespace"]:
        """Return the namespace named by ``s``, or None."""


class CoreExtension(Enum):
    """The extensions built into EURE."""

    EURE = auto()
    VARIANT = auto()