# -*- coding: utf-8 -*-

"""Top-level package for layoutdoc."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

import sys

from .api import (
    text,
    number,
    vcat,
    indent,
    p,
    pp,
    hcat,
    hsep,
    nest,
    punctuate,
    join,
)
from .doc import (
    Doc,
    cast_doc,
    EMPTY,
    BLANK,
    SPACE,
    COMMA,
)
from .layout import layout
from .render import (
    render,
    default_render_to_stream,
    default_render_to_str,
)


__all__ = [
    'Doc',
    'cast_doc',
    'text',
    'number',
    'vcat',
    'indent',
    'p',
    'pp',
    'hcat',
    'hsep',
    'nest',
    'punctuate',
    'join',
    'EMPTY',
    'BLANK',
    'SPACE',
    'COMMA',
    'layout',
    'render',
    'default_render_to_stream',
    'default_render_to_str',
    'pformat',
    'pprint',
]


def pformat(doc, *, newline='\n', pad_char=' '):
    return default_render_to_str(doc, newline=newline, pad_char=pad_char)


def pprint(
    doc,
    stream=None,
    *,
    newline='\n',
    pad_char=' ',
    end='\n'
):
    if stream is None:
        stream = sys.stdout
    default_render_to_stream(stream, doc, newline=newline, pad_char=pad_char)
    if end:
        stream.write(end)
