"""Layout algorithm from Lindig's "Strictly Pretty" (2000), extended with
column-relative nesting, breaks with distinct flat and broken text, and
forced breaks.

Both the fits check and the renderer walk the document with an explicit
stack of ``(indent, mode, doc)`` commands, so arbitrarily deep documents
don't exhaust the Python call stack.
"""
import logging
from enum import Enum, auto, unique
from itertools import chain

from .api import cast_doc
from .doc import (
    CURRENT,
    Break,
    BreakParent,
    Concat,
    Group,
    Line,
    Nest,
    Nil,
    Text,
)

logger = logging.getLogger(__name__)

INFINITY = float('inf')


@unique
class Mode(Enum):
    FLAT = auto()
    BREAK = auto()


def _line_indent(indent):
    return '\n' + ' ' * indent


def fits(budget, cmds):
    """Returns True if the first line of ``cmds``, an ordered iterable of
    ``(indent, mode, doc)`` commands, stays within ``budget`` columns.

    Groups met along the way are assumed to be laid out flat. ``cmds``
    is consumed lazily and only as far as the end of the current line.
    """
    pending = iter(cmds)
    stack = []

    while budget >= 0:
        if stack:
            indent, mode, doc = stack.pop()
        else:
            try:
                indent, mode, doc = next(pending)
            except StopIteration:
                return True

        if isinstance(doc, Text):
            budget -= doc.width
        elif isinstance(doc, Concat):
            stack.append((indent, mode, doc.right))
            stack.append((indent, mode, doc.left))
        elif isinstance(doc, Break):
            if mode is Mode.BREAK:
                return True
            budget -= doc.width
        elif isinstance(doc, Group):
            stack.append((indent, Mode.FLAT, doc.doc))
        elif isinstance(doc, Nest):
            # The indent doesn't affect the budget, but commands keep it
            # consistent with the renderer's.
            if doc.indent is not CURRENT:
                indent += doc.indent
            stack.append((indent, mode, doc.doc))
        elif isinstance(doc, Line):
            return True
        elif isinstance(doc, BreakParent):
            return False
        elif isinstance(doc, Nil):
            continue
        else:
            raise ValueError((indent, mode, doc))

    return False


def _check_width(width):
    if width is None or width == INFINITY:
        return INFINITY
    if isinstance(width, bool) or not isinstance(width, int):
        raise ValueError(
            f"Width must be a non-negative int or INFINITY, got {repr(width)}"
        )
    if width < 0:
        raise ValueError(f"Width must not be negative, got {width}")
    return width


def render(doc, width=79):
    """Lays out ``doc`` within ``width`` columns and returns the output as
    a list of str fragments.

    ``width`` may be ``None`` or ``INFINITY`` for unconstrained output, in
    which case groups break only when forced to by ``break_parent``. Lines
    that cannot be made to fit are emitted as they are.
    """
    doc = cast_doc(doc)
    width = _check_width(width)

    initial_mode = Mode.FLAT if width == INFINITY else Mode.BREAK
    stack = [(0, initial_mode, Group(doc))]
    column = 0
    fragments = []

    while stack:
        indent, mode, doc = stack.pop()

        if isinstance(doc, Text):
            if doc.value:
                fragments.append(doc.value)
            column += doc.width
        elif isinstance(doc, Concat):
            stack.append((indent, mode, doc.right))
            stack.append((indent, mode, doc.left))
        elif isinstance(doc, Break):
            if mode is Mode.FLAT:
                if doc.unbroken:
                    fragments.append(doc.unbroken)
                column += doc.width
            else:
                if doc.broken:
                    fragments.append(doc.broken)
                fragments.append(_line_indent(indent))
                column = indent
        elif isinstance(doc, Group):
            if width == INFINITY:
                # Nothing can overflow, so only a forced break matters.
                group_mode = Mode.BREAK if doc.forces_break else Mode.FLAT
                stack.append((indent, group_mode, doc.doc))
                continue

            flat_cmd = (indent, Mode.FLAT, doc.doc)
            # The rest of the stack is what follows the group on the
            # same line; fits reads it top down without copying.
            if fits(width - column, chain((flat_cmd, ), reversed(stack))):
                stack.append(flat_cmd)
            else:
                stack.append((indent, Mode.BREAK, doc.doc))
        elif isinstance(doc, Nest):
            if doc.indent is CURRENT:
                stack.append((column, mode, doc.doc))
            else:
                stack.append((indent + doc.indent, mode, doc.doc))
        elif isinstance(doc, Line):
            fragments.append(_line_indent(indent))
            column = indent
        elif isinstance(doc, (Nil, BreakParent)):
            continue
        else:
            raise ValueError((indent, mode, doc))

    logger.debug(
        'Rendered document into %d fragments at width %s',
        len(fragments),
        width,
    )
    return fragments
