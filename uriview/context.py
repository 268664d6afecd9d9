"""Plumbing shared by every parser

A parser is a plain function taking a Cursor (or a str) and returning
``(rest, value)``; it raises ParseFailure when it does not match.
"""

from functools import wraps
from typing import Any, Callable, List, Optional, Tuple

from .span import Cursor
from .exceptions import ErrorKind, ParseFailure


__all__ = [
    'Parser', 'context', 'alt', 'opt', 'fail',
]


Parser = Callable[[Cursor], Tuple[Cursor, Any]]


def context(label: str):
    """Annotate failures of the decorated parser with <label>

    The label is pushed with the position the parser started at.
    """
    def decorator(parser):
        @wraps(parser)
        def annotated(input, *args, **kwargs):
            cursor = Cursor.make(input)
            try:
                return parser(cursor, *args, **kwargs)
            except ParseFailure as e:
                e.push(cursor.pos, ErrorKind.CONTEXT, label)
                raise
        return annotated
    return decorator


def fail(cursor: Cursor, kind: ErrorKind) -> ParseFailure:
    return ParseFailure.at(cursor.text, cursor.pos, kind)


def alt(cursor: Cursor, *parsers: Parser):
    """Try parsers in order, the first one matching wins

    When none matches, the failure of the last one is raised with an
    ALT_EXHAUSTED entry; the others are kept as its alternatives.
    """
    assert parsers
    failures: List[ParseFailure] = []
    for parser in parsers:
        try:
            return parser(cursor)
        except ParseFailure as e:
            failures.append(e)
    last = failures.pop()
    last.alternatives = failures + last.alternatives
    last.push(cursor.pos, ErrorKind.ALT_EXHAUSTED)
    raise last


def opt(cursor: Cursor, parser: Parser) -> Tuple[Cursor, Optional[Any]]:
    """Run <parser>, on failure stay where we are and give None"""
    try:
        return parser(cursor)
    except ParseFailure:
        return cursor, None
