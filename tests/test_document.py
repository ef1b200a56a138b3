import pytest

from eure.document import (
    EureBinding,
    EureDocument,
    EureKey,
    EureKeys,
    EureSection,
    KeyKind,
    Text,
)


def test_constructors_set_kind_and_value():
    assert EureKey.ident("a") == EureKey(KeyKind.IDENT, "a")
    assert EureKey.string("b").kind is KeyKind.STRING
    assert EureKey.extension("variant").value == "variant"
    assert EureKey.array_index(3).value == 3
    assert EureKey.array().value is None
    assert EureKey.tuple_index(2).kind is KeyKind.TUPLE_INDEX


def test_keys_order_by_kind_first():
    keys = [
        EureKey.tuple_index(0),
        EureKey.array(),
        EureKey.array_index(0),
        EureKey.extension("z"),
        EureKey.string("z"),
        EureKey.ident("z"),
    ]
    assert sorted(keys) == list(reversed(keys))


def test_keys_of_same_kind_order_by_value():
    assert sorted([EureKey.ident("b"), EureKey.ident("a")]) == [
        EureKey.ident("a"),
        EureKey.ident("b"),
    ]
    assert EureKey.array() <= EureKey.array()


def test_index_limits():
    assert EureKey.array_index((1 << 32) - 1).value == (1 << 32) - 1
    assert EureKey.tuple_index(255).value == 255
    with pytest.raises(ValueError):
        EureKey.array_index(1 << 32)
    with pytest.raises(ValueError):
        EureKey.array_index(-1)
    with pytest.raises(ValueError):
        EureKey.tuple_index(256)


def test_wrong_value_types():
    with pytest.raises(TypeError):
        EureKey(KeyKind.IDENT, 1)
    with pytest.raises(TypeError):
        EureKey(KeyKind.ARRAY_INDEX, "1")
    with pytest.raises(TypeError):
        EureKey.tuple_index(True)
    with pytest.raises(ValueError):
        EureKey(KeyKind.ARRAY, 0)


def test_keys_are_hashable():
    assert len({EureKey.ident("a"), EureKey.ident("a"), EureKey.string("a")}) == 2


def test_eure_keys_accepts_only_keys():
    keys = EureKeys([EureKey.ident("a")])
    keys.append(EureKey.array())
    keys.insert(0, EureKey.string("s"))
    keys.extend([EureKey.tuple_index(1)])
    assert [k.kind for k in keys] == [
        KeyKind.STRING,
        KeyKind.IDENT,
        KeyKind.ARRAY,
        KeyKind.TUPLE_INDEX,
    ]
    with pytest.raises(TypeError):
        keys.append("a")
    with pytest.raises(TypeError):
        EureKeys(["a"])


def test_eure_keys_equality():
    keys = EureKeys([EureKey.ident("a")])
    assert keys == EureKeys([EureKey.ident("a")])
    assert keys != EureKeys([EureKey.string("a")])
    assert keys != EureKeys([EureKey.ident("a"), EureKey.array()])
    assert [k.value for k in keys] == ["a"]


def test_empty_document():
    doc = EureDocument()
    assert doc.sections == []
    assert doc.bindings == []
    assert EureDocument().sections is not doc.sections


def test_nested_document():
    inner = EureDocument(bindings=[EureBinding([EureKey.ident("x")], Text("hi"))])
    section = EureSection(EureKeys([EureKey.ident("s")]), inner)
    doc = EureDocument(sections=[section])
    assert doc.sections[0].body.bindings[0].rhs == Text("hi")
    assert doc == EureDocument(sections=[EureSection(EureKeys([EureKey.ident("s")]), inner)])


def test_section_with_bindings_body():
    binding = EureBinding([EureKey.ident("n")], 5)
    section = EureSection(EureKeys([EureKey.ident("s")]), [binding])
    assert section.body == [binding]
    assert Text("a") != "a"