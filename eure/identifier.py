"""Identifiers: an XID_Start character followed by XID_Continue characters or hyphens."""

from __future__ import annotations

from dataclasses import dataclass


class IdentifierError(ValueError):
    """Raised when a string is not a valid identifier."""


class EmptyIdentifierError(IdentifierError):
    """Raised for the empty string."""

    def __init__(self) -> None:
        super().__init__("Empty identifier")


class InvalidCharError(IdentifierError):
    """Raised when a character may not appear at its position in an identifier."""

    def __init__(self, at: int, invalid_char: str) -> None:
        super().__init__(f"Invalid character for identifier: {invalid_char} at {at}")
        self.at = at
        self.invalid_char = invalid_char


def _is_start(char: str) -> bool:
    # str.isidentifier also admits "_" as a first character, which XID_Start does not.
    return char != "_" and char.isidentifier()


def _is_continue(char: str) -> bool:
    return char == "-" or ("a" + char).isidentifier()


def _validate(text: str) -> None:
    if not text:
        raise EmptyIdentifierError()
    if not _is_start(text[0]):
        raise InvalidCharError(0, text[0])
    for at, char in enumerate(text[1:], start=1):
        if not _is_continue(char):
            raise InvalidCharError(at, char)


@dataclass(frozen=True, order=True)
class Identifier:
    """A validated identifier."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"identifier must be a str, not {type(self.name).__name__}")
        _validate(self.name)

    def __str__(self) -> str:
        return self.name


class IdentifierParser:
    """Parses strings into identifiers."""

    def parse(self, s: str) -> Identifier:
        """Return the identifier spelled by ``s`` or raise an IdentifierError."""
        return Identifier(s)


_PARSER = IdentifierParser()


def parse_identifier(s: str) -> Identifier:
    """Parse ``s`` with the shared parser."""
    return _PARSER.parse(s)