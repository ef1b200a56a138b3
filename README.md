# eure

The core data model of the EURE data format, as plain Python objects.

## What is in the package

- `eure.identifier`: identifier validation. `Identifier` (a frozen,
  ordered dataclass holding `name`) checks its text on construction;
  `IdentifierParser().parse(s)` and `parse_identifier(s)` build one from a
  string. An identifier starts with a Unicode identifier-start character
  (not `_`) and continues with identifier-continue characters or hyphens.
  Invalid input raises `EmptyIdentifierError` for the empty string or
  `InvalidCharError` (with `at` and `invalid_char`) for a bad character;
  both subclass `IdentifierError`, itself a `ValueError`.
- `eure.value`: the value model. Plain Python `None`, `bool`, `int`,
  `float` and `str` stand for the scalar values, alongside `Unit`,
  `TypedString`, `Code`, `Array` (a list), `Tuple` (a tuple), `Map` and
  `Variant`. `Map` is a mutable mapping whose keys must pass
  `is_key_value`: `None`, `bool`, `str`, `Unit`, integers in the signed or
  unsigned 64-bit range, and `Tuple`s of such keys. `True` and `1` are
  different keys. Paths are `Path` lists of `ExtensionSegment`,
  `ValueSegment` and `ArraySegment`.
- `eure.document`: a document tree without source positions:
  `EureDocument`, `EureSection`, `EureBinding`, `Text`, `EureKeys` (a list
  that accepts only `EureKey` items) and `EureKey`, whose `KeyKind` is one
  of `IDENT`, `STRING`, `EXTENSION`, `ARRAY_INDEX` (0 to 2**32 - 1),
  `ARRAY` or `TUPLE_INDEX` (0 to 255). Keys are built with
  `EureKey.ident`, `.string`, `.extension`, `.array_index`, `.array` and
  `.tuple_index`, and are ordered by kind, then value.
- `eure.extensions`: the abstract `ExtensionNamespace` (with `name`,
  `top_level_only`, `extension_type` and the class method `parse`), the
  `CoreExtension` enum (`EURE`, `VARIANT`), and the shapes extension values
  may take: `ScalarType` (`STRING`, `INTEGER`, `FLOAT`, `BOOLEAN`, `NULL`),
  `UnionType`, `MapType`, `ArrayType` and `TupleType`. The composite types
  reject members that are not extension types.
- `eure.span`: source positions. `LineNumbers(text)` records where the
  newlines are; `char_info(index)` returns a `CharInfo` with
  `line_number`, `column_number` and `last_newline`, and
  `line_number(index)` returns only the line. `InputSpan(start, end)`
  supports `merge`, `merge_many` and `as_str`; `InputSpan.EMPTY` is the
  neutral element of `merge`.

## Installation

    pip install eure

## Usage

    from eure.identifier import parse_identifier, InvalidCharError

    name = parse_identifier("hello-world")
    print(str(name))            # hello-world

    try:
        parse_identifier("1hello")
    except InvalidCharError as err:
        print(err.at, err.invalid_char)   # 0 1

Locating a character in a text:

    from eure.span import LineNumbers, InputSpan

    lines = LineNumbers("line1\nline2\nline3")
    info = lines.char_info(8)
    print(info.line_number, info.column_number, info.last_newline)  # 1 2 5

    span = InputSpan(0, 5).merge(InputSpan(6, 11))
    print(repr(span.as_str("line1\nline2")))   # 'line1\nline2'

Positions are counted in characters, not bytes, and only `\n` starts a new
line. Indexes past the end of the text fall on the last line;
`as_str` raises `IndexError` for a span outside the text.

## What the package does not do

It holds the data model only. It does not read EURE text into these
objects, write them back out as text, check them against a schema, or
provide a command-line tool.

## Running the tests

    pip install -e ".[test]"
    pytest