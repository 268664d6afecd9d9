import pytest

from uriview import Span, Cursor, InvalidInput
from uriview.primitives import is_digit


def test_span_content():
    text = 'http://localhost'
    span = Span(text, 7, 16)
    assert span.content == 'localhost'
    assert span.start() == 7
    assert span.end() == 16
    assert len(span) == 9
    assert str(span) == 'localhost'


def test_span_is_a_view():
    text = 'http://localhost'
    span = Span(text, 7, 16)
    assert span.text is text


def test_span_equality():
    text = 'abcabc'
    assert Span(text, 0, 3) == Span(text, 0, 3)
    assert Span(text, 0, 3) != Span(text, 3, 6)
    assert Span(text, 0, 3) == 'abc'
    assert Span(text, 3, 6) == 'abc'
    assert 'abc' == Span(text, 0, 3)
    assert Span(text, 2, 2) == ''


def test_span_bounds():
    with pytest.raises(AssertionError):
        Span('abc', 2, 1)
    with pytest.raises(AssertionError):
        Span('abc', 0, 4)


def test_cursor_advance():
    cursor = Cursor('abcdef')
    moved = cursor.advance(2)
    assert cursor.pos == 0
    assert moved.pos == 2
    assert moved.rest == 'cdef'
    assert moved == 'cdef'
    assert moved.text is cursor.text


def test_cursor_startswith():
    cursor = Cursor('HTTP://x')
    assert cursor.startswith('HTTP')
    assert not cursor.startswith('http')
    assert cursor.startswith('http', ignore_case=True)
    assert not cursor.advance(8).startswith('x')
    assert cursor.advance(7).peek() == 'x'
    assert cursor.advance(8).peek() == ''


def test_cursor_take_while():
    cursor = Cursor('12345abc')
    rest, span = cursor.take_while(is_digit)
    assert rest == 'abc'
    assert span == '12345'

    rest, span = cursor.take_while(is_digit, limit=3)
    assert rest == '45abc'
    assert span == '123'

    rest, span = rest.advance(2).take_while(is_digit)
    assert rest == 'abc'
    assert span == ''


def test_cursor_truthiness():
    assert Cursor('a')
    assert not Cursor('a', 1)
    assert len(Cursor('abc', 1)) == 2


def test_cursor_make():
    cursor = Cursor('abc', 1)
    assert Cursor.make(cursor) is cursor
    assert Cursor.make('abc') == Cursor('abc', 0)
    with pytest.raises(InvalidInput):
        Cursor.make(b'abc')


def test_cursor_hash_matches_equality():
    assert Cursor('ab', 1) == 'b'
    assert hash(Cursor('ab', 1)) == hash('b')
    assert hash(Cursor('ab', 1)) == hash(Cursor('ab', 1))
    assert {'b': 1}[Cursor('ab', 1)] == 1
