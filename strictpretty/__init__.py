# -*- coding: utf-8 -*-

"""Top-level package for strictpretty."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

from .doc import (
    BREAK_PARENT,
    CURRENT,
    LINE,
    NIL,
    InvalidDocError,
    is_doc,
)
from .api import (
    break_,
    break_parent,
    cast_doc,
    concat,
    glue,
    group,
    line,
    nest,
    surround,
    surround_many,
    text,
)
from .layout import INFINITY, fits, render
from .output import render_to_str, render_to_stream
from .combinators import (
    empty,
    fold_doc,
    hsep,
    join,
    line_join,
    space,
    vsep,
)
from .utils import intersperse


__all__ = [
    'pformat',
    'render',
    'render_to_str',
    'render_to_stream',
    'fits',
    'INFINITY',
    'InvalidDocError',
    'is_doc',
    'cast_doc',
    'text',
    'concat',
    'line',
    'break_',
    'break_parent',
    'nest',
    'group',
    'glue',
    'surround',
    'surround_many',
    'empty',
    'fold_doc',
    'space',
    'line_join',
    'join',
    'hsep',
    'vsep',
    'intersperse',
    'NIL',
    'LINE',
    'BREAK_PARENT',
    'CURRENT',
]


def pformat(doc, width=79):
    """Lays out ``doc`` within ``width`` columns and returns the result as
    a str. Pass ``INFINITY`` (or ``None``) to lay it out without a width
    limit."""
    return render_to_str(render(doc, width))
