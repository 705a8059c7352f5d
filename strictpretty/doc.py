class InvalidDocError(TypeError, ValueError):
    """Raised when a document is built from a value that is not a
    document, or with an invalid nesting level."""


def is_doc(doc):
    if isinstance(doc, str):
        return True
    return isinstance(doc, Doc)


def byte_width(s):
    # Layout width is the encoded length, not the codepoint count.
    return len(s.encode('utf-8', 'surrogatepass'))


class _Current:
    __slots__ = ()

    def __repr__(self):
        return 'CURRENT'


# Nest level meaning "the column where the Nest is reached".
CURRENT = _Current()


class Doc:
    __slots__ = ()

    # True when a BreakParent occurs anywhere in the document.
    forces_break = False


class Nil(Doc):
    __slots__ = ()

    def __repr__(self):
        return 'NIL'


NIL = Nil()


class Line(Doc):
    __slots__ = ()

    def __repr__(self):
        return 'LINE'


LINE = Line()


class BreakParent(Doc):
    __slots__ = ()

    forces_break = True

    def __repr__(self):
        return 'BREAK_PARENT'


BREAK_PARENT = BreakParent()


class Text(Doc):
    __slots__ = ('value', 'width')

    def __init__(self, value):
        if not isinstance(value, str):
            raise InvalidDocError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        self.value = value
        self.width = byte_width(value)

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Concat(Doc):
    __slots__ = ('left', 'right', 'forces_break')

    def __init__(self, left, right):
        assert isinstance(left, Doc)
        assert isinstance(right, Doc)

        self.left = left
        self.right = right
        self.forces_break = left.forces_break or right.forces_break

    def __repr__(self):
        return f'Concat({repr(self.left)}, {repr(self.right)})'


class Nest(Doc):
    __slots__ = ('doc', 'indent', 'forces_break')

    def __init__(self, doc, indent):
        assert isinstance(doc, Doc)
        assert indent is CURRENT or (isinstance(indent, int) and indent > 0)

        self.doc = doc
        self.indent = indent
        self.forces_break = doc.forces_break

    def __repr__(self):
        return f'Nest({repr(self.doc)}, {repr(self.indent)})'


class Break(Doc):
    """Separator rendered as ``unbroken`` in flat mode, and as ``broken``
    followed by a newline in broken mode."""
    __slots__ = ('unbroken', 'broken', 'width')

    def __init__(self, unbroken, broken):
        for value in (unbroken, broken):
            if not isinstance(value, str):
                raise InvalidDocError(
                    f"Got {repr(value)} of type {type(value).__name__}, "
                    "expected 'str'"
                )
        self.unbroken = unbroken
        self.broken = broken
        self.width = byte_width(unbroken)

    def __repr__(self):
        return f'Break({repr(self.unbroken)}, {repr(self.broken)})'


class Group(Doc):
    __slots__ = ('doc', 'forces_break')

    def __init__(self, doc):
        assert isinstance(doc, Doc)
        self.doc = doc
        self.forces_break = doc.forces_break

    def __repr__(self):
        return f'Group({repr(self.doc)})'
