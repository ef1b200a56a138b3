"""Spans within input text and character positions within it."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional

_U32_MAX = (1 << 32) - 1


@dataclass(frozen=True)
class CharInfo:
    """Where a character sits in a text; all numbers count from zero."""

    line_number: int
    column_number: int
    last_newline: Optional[int]
    """Index of the last newline before the character, or None on the first line."""


class LineNumbers:
    """The positions of the newline characters of a text, for finding lines."""

    def __init__(self, text: str) -> None:
        self.newlines: tuple[int, ...] = tuple(
            i for i, char in enumerate(text) if char == "\n"
        )

    def char_info(self, index: int) -> CharInfo:
        """Return the line and column of the character at ``index``.

        Indexes past the end of the text are placed on the last line.
        """
        if index < 0:
            raise ValueError(f"character index must not be negative: {index}")
        line_number = bisect_left(self.newlines, index)
        if line_number == 0:
            return CharInfo(line_number=0, column_number=index, last_newline=None)
        last_newline = self.newlines[line_number - 1]
        return CharInfo(
            line_number=line_number,
            column_number=index - (last_newline + 1),
            last_newline=last_newline,
        )

    def line_number(self, index: int) -> int:
        """Return the line of the character at ``index``."""
        return self.char_info(index).line_number


@dataclass(frozen=True)
class InputSpan:
    """A range of character offsets, valid only within its input text."""

    start: int
    end: int

    EMPTY: ClassVar["InputSpan"]

    def merge(self, other: "InputSpan") -> "InputSpan":
        """Return the smallest span that covers both spans."""
        return InputSpan(min(self.start, other.start), max(self.end, other.end))

    def merge_many(self, others: Iterable["InputSpan"]) -> "InputSpan":
        """Return the smallest span that covers this span and all of ``others``."""
        merged = self
        for other in others:
            merged = merged.merge(other)
        return merged

    def as_str(self, text: str) -> str:
        """Return the part of ``text`` that the span covers."""
        if not 0 <= self.start <= self.end <= len(text):
            raise IndexError(
                f"span {self.start}..{self.end} is out of range for text of length {len(text)}"
            )
        return text[self.start : self.end]


# Neutral element of merge: it covers nothing.
InputSpan.EMPTY = InputSpan(start=_U32_MAX, end=0)