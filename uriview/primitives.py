"""Character classes and literal tags, the alphabet every stage is built on"""

from string import ascii_letters, digits as ascii_digits
from typing import Callable, Tuple

from .span import Cursor, Span
from .context import fail
from .exceptions import ErrorKind


__all__ = [
    'is_alpha', 'is_digit', 'is_alphanumeric', 'is_alphanumeric_hyphen', 'is_url_code_point',
    'take_while1', 'alpha1', 'digit1', 'alphanumeric1', 'alphanumerichyphen1',
    'url_code_points0', 'url_code_points1', 'digits',
    'tag', 'tag_no_case',
]


ALPHA = frozenset(ascii_letters)
DIGIT = frozenset(ascii_digits)
ALNUM = ALPHA | DIGIT
ALNUM_HYPHEN = ALNUM | {'-'}
# only a restricted subset of the whatwg url code points
URL_CODE_POINT = ALNUM | {'-', '.'}


def is_alpha(c: str) -> bool:
    return c in ALPHA


def is_digit(c: str) -> bool:
    return c in DIGIT


def is_alphanumeric(c: str) -> bool:
    return c in ALNUM


def is_alphanumeric_hyphen(c: str) -> bool:
    return c in ALNUM_HYPHEN


def is_url_code_point(c: str) -> bool:
    return c in URL_CODE_POINT


def take_while1(input, predicate: Callable[[str], bool]) -> Tuple[Cursor, Span]:
    """Consume the longest non-empty run of characters satisfying <predicate>"""
    cursor = Cursor.make(input)
    rest, span = cursor.take_while(predicate)
    if not span:
        raise fail(cursor, ErrorKind.EMPTY_MATCH)
    return rest, span


def alpha1(input) -> Tuple[Cursor, Span]:
    return take_while1(input, is_alpha)


def digit1(input) -> Tuple[Cursor, Span]:
    return take_while1(input, is_digit)


def alphanumeric1(input) -> Tuple[Cursor, Span]:
    return take_while1(input, is_alphanumeric)


def alphanumerichyphen1(input) -> Tuple[Cursor, Span]:
    return take_while1(input, is_alphanumeric_hyphen)


def url_code_points1(input) -> Tuple[Cursor, Span]:
    return take_while1(input, is_url_code_point)


def url_code_points0(input) -> Tuple[Cursor, Span]:
    return Cursor.make(input).take_while(is_url_code_point)


def digits(input, _from: int, _to: int) -> Tuple[Cursor, Span]:
    """Consume <_from> to <_to> digits, as many as possible

    Digits beyond <_to> are left for whatever comes next.
    """
    assert 0 < _from <= _to
    cursor = Cursor.make(input)
    rest, span = cursor.take_while(is_digit, limit=_to)
    if len(span) < _from:
        raise fail(cursor, ErrorKind.EMPTY_MATCH)
    return rest, span


def tag(literal: str):
    """A parser matching exactly <literal>"""
    def parse_tag(input) -> Tuple[Cursor, Span]:
        cursor = Cursor.make(input)
        if not cursor.startswith(literal):
            raise fail(cursor, ErrorKind.TAG_MISMATCH)
        rest = cursor.advance(len(literal))
        return rest, cursor.span_to(rest)
    return parse_tag


def tag_no_case(literal: str):
    """A parser matching <literal>, ignoring letter case"""
    def parse_tag_no_case(input) -> Tuple[Cursor, Span]:
        cursor = Cursor.make(input)
        if not cursor.startswith(literal, ignore_case=True):
            raise fail(cursor, ErrorKind.TAG_MISMATCH)
        rest = cursor.advance(len(literal))
        return rest, cursor.span_to(rest)
    return parse_tag_no_case
