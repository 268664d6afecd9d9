from typing import List, Tuple

from .span import Cursor, Span
from .context import context
from .exceptions import ParseFailure
from .primitives import tag, url_code_points0, url_code_points1


__all__ = [
    'QueryParam', 'parse_query', 'parse_fragment',
]


class QueryParam(object):
    __slots__ = ('key', 'value')

    def __init__(self, key: Span, value: Span):
        self.key: Span = key
        self.value: Span = value

    def __iter__(self):
        yield self.key
        yield self.value

    def __repr__(self):
        return 'QueryParam({}, {})'.format(repr(str(self.key)), repr(str(self.value)))

    def __eq__(self, o):
        if isinstance(o, QueryParam):
            return self.key == o.key and self.value == o.value
        if isinstance(o, tuple):
            return tuple(self) == o
        return NotImplemented

    def __hash__(self):
        return hash((self.key, self.value))


def _key_value(cursor: Cursor) -> Tuple[Cursor, QueryParam]:
    rest, key = url_code_points1(cursor)
    rest, _ = tag('=')(rest)
    rest, value = url_code_points1(rest)
    return rest, QueryParam(key, value)


@context('query params')
def parse_query(cursor: Cursor) -> Tuple[Cursor, List[QueryParam]]:
    """?bla=5&blub=val -> [QueryParam("bla", "5"), QueryParam("blub", "val")]

    Order of appearance is kept, and so are duplicated keys.
    """
    rest, _ = tag('?')(cursor)
    rest, param = _key_value(rest)
    params = [param]

    while True:
        try:
            after, _ = tag('&')(rest)
            after, param = _key_value(after)
        except ParseFailure:
            break
        params.append(param)
        rest = after
    return rest, params


@context('fragment')
def parse_fragment(cursor: Cursor) -> Tuple[Cursor, Span]:
    """#inner-link -> "inner-link", which may be empty"""
    rest, _ = tag('#')(cursor)
    return url_code_points0(rest)
