from functools import reduce

from .doc import (
    BREAK_PARENT,
    CURRENT,
    LINE,
    NIL,
    Break,
    Concat,
    Doc,
    Group,
    InvalidDocError,
    Nest,
    Text,
)

_UNSET = object()

# Indentation applied by ``surround`` to the enclosed document.
SURROUND_NESTING = 1


def text(x):
    if not isinstance(x, str):
        raise InvalidDocError(
            f"Argument to text function must be a str, got {repr(x)} "
            f"of type {type(x).__name__}"
        )
    return Text(x)


def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return NIL
        return Text(doc)

    raise InvalidDocError(
        f"Got {repr(doc)} of type {type(doc).__name__}, expected a document"
    )


def concat(left, right=_UNSET):
    """Returns the concatenation of ``left`` and ``right``.

    Called with a single iterable of documents, folds them pairwise from
    left to right. An empty iterable yields ``NIL``.
    """
    if right is not _UNSET:
        return Concat(cast_doc(left), cast_doc(right))

    if isinstance(left, (str, Doc)):
        raise InvalidDocError(
            "concat takes two documents or one iterable of documents, "
            f"got a single {type(left).__name__}"
        )
    try:
        it = iter(left)
    except TypeError:
        raise InvalidDocError(
            f"Got {repr(left)} of type {type(left).__name__}, "
            "expected an iterable of documents"
        ) from None

    docs = [cast_doc(doc) for doc in it]
    if not docs:
        return NIL
    return reduce(Concat, docs)


def line():
    return LINE


def break_(unbroken=' ', broken=''):
    """Returns a breakable separator. It renders as ``unbroken`` when its
    group is laid out flat, and as ``broken`` followed by a newline when
    the group is broken."""
    return Break(unbroken, broken)


def break_parent():
    """Forces every group enclosing this document to break, regardless of
    the available width."""
    return BREAK_PARENT


def nest(doc, level):
    """Nests ``doc`` so that line breaks inside it are indented ``level``
    columns further. ``CURRENT`` aligns them with the column at which
    the nested document starts."""
    doc = cast_doc(doc)

    if level is CURRENT:
        return Nest(doc, CURRENT)

    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidDocError(
            f"Got nesting level {repr(level)} of type "
            f"{type(level).__name__}, expected 'int' or CURRENT"
        )

    if level < 0:
        raise InvalidDocError(
            f"Nesting level must not be negative, got {level}"
        )

    if level == 0:
        return doc
    return Nest(doc, level)


def group(doc):
    """Annotates doc with special meaning to the layout algorithm, so that the
    document is attempted to output on a single line if it is possible within
    the layout constraints. The decision also accounts for everything that
    follows the group on the same line."""
    return Group(cast_doc(doc))


def glue(left, sep_or_right, right=_UNSET):
    """Joins two documents with a break. ``glue(a, b)`` separates them by a
    space when flat; ``glue(a, sep, b)`` uses the string ``sep`` instead."""
    if right is _UNSET:
        return concat(left, concat(break_(), sep_or_right))

    if not isinstance(sep_or_right, str):
        raise InvalidDocError(
            f"Got separator {repr(sep_or_right)} of type "
            f"{type(sep_or_right).__name__}, expected 'str'"
        )
    return concat(left, concat(break_(sep_or_right, ''), right))


def surround(left, doc, right):
    return group(
        concat(
            left,
            concat(nest(doc, SURROUND_NESTING), right)
        )
    )


def surround_many(open, items, close, render_item):
    """Renders each of ``items`` with ``render_item`` and lays them out
    comma-separated between ``open`` and ``close``:

    > flat
    [1, 2, 3]
    > broken
    [1,
     2,
     3]

    An empty collection renders as ``open`` directly followed by ``close``,
    with no break opportunity.
    """
    items = list(items)
    if not items:
        return concat(open, close)

    docs = (cast_doc(render_item(item)) for item in items)
    joined = reduce(
        lambda acc, doc: glue(concat(acc, ','), doc),
        docs
    )
    return surround(open, joined, close)
