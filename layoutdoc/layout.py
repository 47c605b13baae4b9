"""The layout pass: walks a document tree once, depth-first and
left to right, and flattens it into a stream of ``SDoc`` items.

Two integers drive the traversal: the left margin new lines must start
at, and the column the previous write ended at. Output is produced in
order, so the column is a single running value; the margin travels with
each pending node on an explicit work stack, which keeps long horizontal
chains from growing the Python call stack.
"""

from .doc import (
    Doc,
    Empty,
    Indent,
    Nest,
    Plus,
    PlusSep,
    Text,
    Vertical,
    cast_doc,
)
from .sdoc import SText, SPad, SLINE

# Work stack markers, paired with a margin like any document.
_PAD = object()
_LINE_BREAK = object()


def _line_tasks(docs, left_margin):
    lines = [doc for doc in docs if not isinstance(doc, Empty)]

    tasks = []
    for idx, line in enumerate(lines):
        if idx:
            tasks.append((_LINE_BREAK, left_margin))
        tasks.append((_PAD, left_margin))
        tasks.append((line, left_margin))

    tasks.reverse()
    return tasks


def layout(doc):
    """Yields ``SText``, ``SPad`` and ``SLINE`` items for ``doc`` in
    output order. No line break is emitted after the last line."""
    column = 0
    stack = [(cast_doc(doc), 0)]

    while stack:
        doc, left_margin = stack.pop()

        if doc is _PAD:
            if column < left_margin:
                yield SPad(left_margin - column)
                column = left_margin
        elif doc is _LINE_BREAK:
            yield SLINE
            column = 0
        elif isinstance(doc, Empty):
            continue
        elif isinstance(doc, Text):
            yield SText(doc.value)
            column += len(doc.value)
        elif isinstance(doc, Indent):
            # Aligns to where we are now, not to the enclosing margin.
            stack.extend(_line_tasks(doc.docs, column))
        elif isinstance(doc, Vertical):
            stack.extend(_line_tasks(doc.docs, left_margin))
        elif isinstance(doc, Plus):
            stack.append((doc.right, left_margin))
            stack.append((doc.left, left_margin))
        elif isinstance(doc, PlusSep):
            left_empty = isinstance(doc.left, Empty)
            right_empty = isinstance(doc.right, Empty)

            if not right_empty:
                stack.append((doc.right, left_margin))
            if not (left_empty or right_empty):
                stack.append((doc.sep, left_margin))
            if not left_empty:
                stack.append((doc.left, left_margin))
        elif isinstance(doc, Nest):
            new_margin = left_margin + doc.offset
            if column < new_margin:
                yield SPad(new_margin - column)
            # Column tracking restarts at the new margin even when the
            # output was already past it.
            column = new_margin
            stack.append((doc.doc, new_margin))
        else:
            kind = type(doc).__name__ if isinstance(doc, Doc) else repr(doc)
            raise TypeError(f'Unknown document variant: {kind}')
