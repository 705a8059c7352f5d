"""Shorthands for building documents out of several parts.

These sit on top of the builders in ``api`` and are not used by the layout
algorithm itself.
"""
from .api import cast_doc, concat, line
from .doc import NIL
from .utils import intersperse


def empty():
    return NIL


def fold_doc(docs, folder):
    """Folds ``docs`` from the right with ``folder``, so that
    ``fold_doc([a, b, c], f)`` is ``f(a, f(b, c))``."""
    docs = list(docs)
    if not docs:
        return NIL

    acc = cast_doc(docs[-1])
    for doc in reversed(docs[:-1]):
        acc = folder(doc, acc)
    return acc


def space(left, right):
    return concat(left, concat(' ', right))


def line_join(left, right):
    return concat(left, concat(line(), right))


def join(sep, docs):
    return concat(intersperse(sep, docs))


def hsep(docs):
    return join(' ', docs)


def vsep(docs):
    return join(line(), docs)
