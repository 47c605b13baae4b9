class SDoc(object):
    pass


class SText(SDoc):
    __slots__ = ('value', )

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f'SText({repr(self.value)})'


class SPad(SDoc):
    """A run of ``width`` padding characters that brings the output
    column up to the current left margin."""
    __slots__ = ('width', )

    def __init__(self, width):
        assert isinstance(width, int) and width > 0
        self.width = width

    def __repr__(self):
        return f'SPad({repr(self.width)})'


class SLine(SDoc):
    def __repr__(self):
        return 'SLINE'


SLINE = SLine()
