import pytest

from layoutdoc.doc import (
    Doc,
    Empty,
    Indent,
    Nest,
    Plus,
    PlusSep,
    Text,
    Vertical,
    cast_doc,
    EMPTY,
    BLANK,
    SPACE,
    COMMA,
)


def test_constants():
    assert isinstance(EMPTY, Empty)
    assert BLANK.value == ''
    assert SPACE.value == ' '
    assert COMMA.value == ','


def test_text_rejects_non_str():
    with pytest.raises(TypeError):
        Text(1)


def test_cast_doc():
    doc = Text('x')
    assert cast_doc(doc) is doc

    casted = cast_doc('hello')
    assert isinstance(casted, Text)
    assert casted.value == 'hello'

    assert cast_doc('').value == ''

    with pytest.raises(TypeError):
        cast_doc(1)

    with pytest.raises(TypeError):
        cast_doc(None)


def test_plus_empty_is_identity():
    doc = Text('a')
    assert doc.p(EMPTY) is doc
    assert EMPTY.p(doc) is doc
    assert isinstance(EMPTY.p(EMPTY), Empty)

    combined = doc.p('b')
    assert isinstance(combined, Plus)
    assert combined.left is doc
    assert combined.right.value == 'b'


def test_plus_sep_collapses_empty_operands():
    doc = Text('a')
    assert doc.pp(EMPTY) is doc
    assert EMPTY.pp(doc) is doc
    assert isinstance(EMPTY.pp(EMPTY, COMMA), Empty)


def test_plus_sep_with_empty_separator_degrades_to_plus():
    a, b = Text('a'), Text('b')

    for sep in (EMPTY, BLANK, Text('')):
        doc = a.pp(b, sep)
        assert isinstance(doc, Plus)
        assert doc.left is a
        assert doc.right is b


def test_plus_sep_default_separator():
    doc = Text('a').pp('b')
    assert isinstance(doc, PlusSep)
    assert doc.sep is SPACE

    doc = Text('a').pp('b', '---')
    assert doc.sep.value == '---'


def test_vertical_normalize_drops_empty_items():
    doc = Vertical([Text('a'), EMPTY, BLANK, EMPTY]).normalize()
    assert isinstance(doc, Vertical)
    assert [d.value for d in doc.docs] == ['a', '']

    doc = Indent([EMPTY, Text('a')]).normalize()
    assert isinstance(doc, Indent)
    assert len(doc.docs) == 1


def test_vertical_items_are_immutable():
    items = [Text('a')]
    doc = Vertical(items)
    items.append(Text('b'))
    assert len(doc.docs) == 1
    assert isinstance(doc.docs, tuple)


def test_nest_validates_offset():
    Nest(0, Text('a'))

    with pytest.raises(ValueError):
        Nest(-1, Text('a'))

    with pytest.raises(TypeError):
        Nest('2', Text('a'))

    with pytest.raises(TypeError):
        Nest(True, Text('a'))


def test_repr():
    assert repr(EMPTY) == 'EMPTY'
    assert repr(Text('a')) == "Text('a')"
    assert repr(Nest(2, Text('a'))) == "Nest(2, Text('a'))"
    assert repr(Plus(Text('a'), Text('b'))) == "Plus(Text('a'), Text('b'))"
    assert repr(Vertical([Text('a')])) == "Vertical([Text('a')])"
    assert repr(Indent([])) == 'Indent([])'


def test_all_variants_are_docs():
    for doc in (
        EMPTY,
        BLANK,
        Vertical([]),
        Indent([]),
        Plus(BLANK, BLANK),
        PlusSep(BLANK, SPACE, BLANK),
        Nest(1, BLANK),
    ):
        assert isinstance(doc, Doc)
