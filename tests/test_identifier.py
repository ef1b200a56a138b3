import pytest

from eure.identifier import (
    EmptyIdentifierError,
    Identifier,
    IdentifierError,
    IdentifierParser,
    InvalidCharError,
    parse_identifier,
)


def test_identifier():
    assert parse_identifier("hello") == Identifier("hello")


def test_identifier_with_hyphen():
    assert parse_identifier("hello-world") == Identifier("hello-world")


def test_identifier_japanese():
    assert parse_identifier("おーい") == Identifier("おーい")


def test_identifier_error():
    with pytest.raises(InvalidCharError) as info:
        parse_identifier("invalid identifier")
    assert info.value.at == 7
    assert info.value.invalid_char == " "


def test_identifier_invalid_first_char():
    with pytest.raises(InvalidCharError) as info:
        parse_identifier("1hello")
    assert info.value.at == 0
    assert info.value.invalid_char == "1"


def test_identifier_error_empty():
    with pytest.raises(EmptyIdentifierError):
        parse_identifier("")


def test_errors_share_base_and_are_value_errors():
    with pytest.raises(IdentifierError):
        parse_identifier("")
    with pytest.raises(ValueError):
        parse_identifier("1hello")


def test_error_messages():
    assert str(EmptyIdentifierError()) == "Empty identifier"
    assert str(InvalidCharError(7, " ")) == "Invalid character for identifier:   at 7"


def test_underscore_cannot_start():
    with pytest.raises(InvalidCharError) as info:
        parse_identifier("_x")
    assert info.value.at == 0


def test_underscore_and_digits_may_continue():
    assert str(parse_identifier("a_1-b")) == "a_1-b"


def test_hyphen_cannot_start():
    with pytest.raises(InvalidCharError) as info:
        parse_identifier("-a")
    assert info.value.invalid_char == "-"


def test_display_is_the_name():
    assert str(Identifier("hello")) == "hello"


def test_direct_construction_validates():
    with pytest.raises(InvalidCharError):
        Identifier("bad name")


def test_non_string_rejected():
    with pytest.raises(TypeError):
        Identifier(5)


def test_parser_instance_matches_function():
    assert IdentifierParser().parse("abc") == parse_identifier("abc")


def test_ordering_and_hashing():
    names = [Identifier("b"), Identifier("a"), Identifier("c")]
    assert [str(i) for i in sorted(names)] == ["a", "b", "c"]
    assert len({Identifier("a"), Identifier("a")}) == 1