from functools import reduce

from .doc import (
    Indent,
    Nest,
    Text,
    Vertical,
    cast_doc,
    EMPTY,
    BLANK,
    SPACE,
)


def text(x):
    """A document made of the literal string ``x``. Line breaks inside
    ``x`` are written as-is and do not start a new line in the layout;
    use ``vcat`` or ``indent`` for multi-line output."""
    return Text(x)


def number(n):
    """A document made of the decimal representation of ``n``."""
    return Text(str(n))


def vcat(docs):
    """Lays out ``docs`` one per line, each line starting at the
    current left margin. ``EMPTY`` items take up no line."""
    return Vertical(cast_doc(doc) for doc in docs).normalize()


def indent(docs):
    """Like ``vcat``, but every line, including the first, is aligned
    to the column at which the returned document starts."""
    return Indent(cast_doc(doc) for doc in docs).normalize()


def p(a, b):
    return cast_doc(a).p(b)


def pp(a, b, sep=SPACE):
    return cast_doc(a).pp(b, sep)


def hcat(docs):
    """Returns the horizontal concatenation of the documents in
    the iterable argument"""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return EMPTY
    elif len(docs) == 1:
        return docs[0]
    return _foldr(p, docs)


def hsep(docs, sep=SPACE):
    """Returns the horizontal concatenation of the documents in
    the iterable argument with ``sep`` between each non-empty pair."""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return EMPTY
    elif len(docs) == 1:
        return docs[0]
    return _foldr(lambda a, b: pp(a, b, sep), docs)


def nest(offset, doc):
    """Shifts the left margin of ``doc`` right by ``offset`` columns.
    Raises ``ValueError`` for a negative ``offset``."""
    return Nest(offset, cast_doc(doc))


def punctuate(separator, docs):
    """Appends ``separator`` to every document in ``docs`` except
    the last one. A sequence of zero or one items is returned as is."""
    if len(docs) <= 1:
        return docs
    docs = [cast_doc(doc) for doc in docs]
    return [doc.p(separator) for doc in docs[:-1]] + [docs[-1]]


def join(docs, separator=SPACE, last_separator=None):
    """Joins ``docs`` into a single document, placing ``separator``
    between items. If given, ``last_separator`` is used before the
    final item instead, which allows lists like ``a, b and c``."""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return BLANK
    elif len(docs) == 1:
        return docs[0]

    if last_separator is None:
        last_separator = separator

    parts = []
    for doc in docs[:-2]:
        parts.extend([doc, separator])
    parts.extend([docs[-2], last_separator, docs[-1]])
    return hcat(parts)


def _foldr(fn, docs):
    return reduce(lambda acc, doc: fn(doc, acc), reversed(docs[:-1]), docs[-1])
