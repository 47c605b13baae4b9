import inspect
import logging
from io import StringIO

from .layout import layout
from .sdoc import (
    SText,
    SPad,
    SLine,
)

logger = logging.getLogger(__name__)


def _sdoc_to_str(sdoc, newline, pad_char):
    if isinstance(sdoc, SText):
        return sdoc.value
    elif isinstance(sdoc, SPad):
        return pad_char * sdoc.width
    elif isinstance(sdoc, SLine):
        return newline
    raise TypeError(f'Unknown sdoc: {repr(sdoc)}')


async def render(doc, sink, *, newline='\n', pad_char=' ', encoding='utf-8'):
    """Renders ``doc`` to ``sink``.

    ``sink`` must have a ``write(data)`` method accepting ``bytes``. It may
    return an awaitable, which is awaited before the next write is issued,
    or a plain value. The returned byte count is not inspected; a sink that
    cannot take all of the data is expected to raise. Any exception raised
    by the sink propagates to the caller and whatever was written before it
    stays written.

    Every text fragment, padding run and line break is written with its own
    call, in document order. No trailing newline is written.
    """
    logger.debug('Rendering %s to %r', type(doc).__name__, sink)

    writes = 0
    written = 0
    for sdoc in layout(doc):
        data = _sdoc_to_str(sdoc, newline, pad_char).encode(encoding)
        accepted = sink.write(data)
        if inspect.isawaitable(accepted):
            await accepted
        writes += 1
        written += len(data)

    logger.debug('Rendered %d bytes in %d writes', written, writes)


def default_render_to_stream(stream, doc, newline='\n', pad_char=' '):
    for sdoc in layout(doc):
        stream.write(_sdoc_to_str(sdoc, newline, pad_char))


def default_render_to_str(doc, newline='\n', pad_char=' '):
    stream = StringIO()
    default_render_to_stream(stream, doc, newline, pad_char)
    return stream.getvalue()
