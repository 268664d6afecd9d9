from typing import Tuple

from .span import Cursor
from .context import context, fail
from .exceptions import ErrorKind
from .primitives import digit1, tag


__all__ = [
    'MAX_PORT', 'parse_port',
]


MAX_PORT = 0xffff


@context('port')
def parse_port(cursor: Cursor) -> Tuple[Cursor, int]:
    """:8080 -> 8080"""
    rest, _ = tag(':')(cursor)
    start = rest
    rest, span = digit1(rest)
    # more than five significant digits never fit, no need to convert them
    significant = span.content.lstrip('0')
    if len(significant) > len(str(MAX_PORT)):
        raise fail(start, ErrorKind.NUMERIC_OVERFLOW)
    port = int(significant or '0')
    if port > MAX_PORT:
        raise fail(start, ErrorKind.NUMERIC_OVERFLOW)
    return rest, port
