from typing import Callable, Optional

from .exceptions import InvalidInput


__all__ = [
    'Span', 'Cursor'
]


class Span(object):
    """A view into the parsed text, [start, end)"""

    __slots__ = ('text', 'index0', 'index1')

    def __init__(self, text: str, start: int, end: int):
        assert len(text) >= end >= start >= 0
        self.text: str = text
        self.index0: int = start
        self.index1: int = end

    @property
    def content(self) -> str:
        return self.text[self.index0: self.index1]

    # start(), end() as methods, simulating re MatchObject behaviour
    def start(self) -> int:
        return self.index0

    def end(self) -> int:
        return self.index1

    def __len__(self):
        return self.index1 - self.index0

    def __str__(self):
        return self.content

    def __repr__(self):
        return '{}({}, {}, content={})'.format(
            self.__class__.__name__, self.index0, self.index1, repr(self.content))

    def __eq__(self, o):
        if isinstance(o, Span):
            return self.text == o.text \
                and self.index0 == o.index0 \
                and self.index1 == o.index1
        if isinstance(o, str):
            return self.content == o
        return NotImplemented

    def __hash__(self):
        return hash(self.content)


class Cursor(object):
    """The unconsumed suffix of a text, text[pos:]

    A cursor is never moved in place, every step makes a new one.
    """

    __slots__ = ('text', 'pos')

    def __init__(self, text: str, pos: int = 0):
        assert 0 <= pos <= len(text)
        self.text: str = text
        self.pos: int = pos

    @classmethod
    def make(cls, o) -> 'Cursor':
        if isinstance(o, Cursor):
            return o
        elif isinstance(o, str):
            return cls(o)
        else:
            raise InvalidInput('Expect a str or a Cursor, got {}'.format(type(o).__name__))

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def __len__(self):
        return len(self.text) - self.pos

    def __bool__(self):
        return self.pos < len(self.text)

    def peek(self) -> str:
        """The next character, or empty string at the end"""
        return self.text[self.pos: self.pos + 1]

    def startswith(self, literal: str, ignore_case: bool = False) -> bool:
        head = self.text[self.pos: self.pos + len(literal)]
        if ignore_case:
            return head.lower() == literal.lower()
        return head == literal

    def advance(self, n: int) -> 'Cursor':
        return self.__class__(self.text, self.pos + n)

    def take_while(self, predicate: Callable[[str], bool], limit: Optional[int] = None):
        """Split the cursor after the longest run of characters satisfying <predicate>

        Return (rest, span). The span may be empty.
        """
        end = self.pos
        stop = len(self.text) if limit is None else min(len(self.text), self.pos + limit)
        while end < stop and predicate(self.text[end]):
            end += 1
        return self.__class__(self.text, end), Span(self.text, self.pos, end)

    def span_to(self, other: 'Cursor') -> Span:
        """The span consumed between this cursor and a later one"""
        assert other.text == self.text and other.pos >= self.pos
        return Span(self.text, self.pos, other.pos)

    def __repr__(self):
        return '{}({}, rest={})'.format(self.__class__.__name__, self.pos, repr(self.rest))

    def __eq__(self, o):
        if isinstance(o, Cursor):
            return self.text == o.text and self.pos == o.pos
        if isinstance(o, str):
            return self.rest == o
        return NotImplemented

    def __hash__(self):
        return hash(self.rest)
