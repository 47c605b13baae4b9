def cast_doc(doc):
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        return Text(doc)
    raise TypeError(
        f"Got {repr(doc)} of type {type(doc).__name__}, "
        "expected 'str' or 'Doc'"
    )


class Doc:
    __slots__ = ()

    def normalize(self):
        return self

    def p(self, doc):
        """Equivalent to ``hcat([self, doc])``."""
        return Plus(self, cast_doc(doc)).normalize()

    def pp(self, doc, sep=None):
        """Equivalent to ``hsep([self, doc], sep)``; ``sep`` defaults
        to a single space."""
        if sep is None:
            sep = SPACE
        return PlusSep(self, cast_doc(sep), cast_doc(doc)).normalize()


class Empty(Doc):
    __slots__ = ()

    def __repr__(self):
        return 'EMPTY'


EMPTY = Empty()


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        self.value = value

    def __repr__(self):
        return f'Text({repr(self.value)})'


BLANK = Text('')
SPACE = Text(' ')
COMMA = Text(',')


class Vertical(Doc):
    """Lays out each of ``docs`` on its own line, every line starting
    at the margin in effect where the node is reached."""
    __slots__ = ('docs', )

    def __init__(self, docs):
        self.docs = tuple(docs)

    def normalize(self):
        return type(self)(
            doc for doc in self.docs
            if not isinstance(doc, Empty)
        )

    def __repr__(self):
        return f"{type(self).__name__}([{', '.join(repr(doc) for doc in self.docs)}])"


class Indent(Vertical):
    """Like ``Vertical``, but lines are aligned to the output column
    at the point the node is reached."""
    __slots__ = ()


class Plus(Doc):
    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        assert isinstance(left, Doc)
        assert isinstance(right, Doc)

        self.left = left
        self.right = right

    def normalize(self):
        if isinstance(self.left, Empty):
            return self.right
        if isinstance(self.right, Empty):
            return self.left
        return self

    def __repr__(self):
        return f'Plus({repr(self.left)}, {repr(self.right)})'


class PlusSep(Doc):
    __slots__ = ('left', 'sep', 'right')

    def __init__(self, left, sep, right):
        assert isinstance(left, Doc)
        assert isinstance(sep, Doc)
        assert isinstance(right, Doc)

        self.left = left
        self.sep = sep
        self.right = right

    def normalize(self):
        if isinstance(self.left, Empty):
            return self.right
        if isinstance(self.right, Empty):
            return self.left
        if isinstance(self.sep, Empty) or (
            isinstance(self.sep, Text) and self.sep.value == ''
        ):
            return Plus(self.left, self.right)
        return self

    def __repr__(self):
        return (
            f'PlusSep({repr(self.left)}, '
            f'sep={repr(self.sep)}, '
            f'{repr(self.right)})'
        )


class Nest(Doc):
    __slots__ = ('offset', 'doc')

    def __init__(self, offset, doc):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(
                f"Got {repr(offset)} of type {type(offset).__name__}, "
                "expected 'int'"
            )
        if offset < 0:
            raise ValueError(
                f"Nest offset must be zero or more, got {offset}"
            )
        assert isinstance(doc, Doc)

        self.offset = offset
        self.doc = doc

    def __repr__(self):
        return f'Nest({repr(self.offset)}, {repr(self.doc)})'
