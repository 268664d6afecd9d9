import pytest

from uriview import parse_scheme, Scheme, ParseFailure, ErrorKind, TraceEntry


def test_scheme_parser():
    assert parse_scheme('https://yay') == ('yay', Scheme.HTTPS)
    assert parse_scheme('http://yay') == ('yay', Scheme.HTTP)


@pytest.mark.parametrize('prefix, scheme', [
    ('http://', Scheme.HTTP),
    ('HTTP://', Scheme.HTTP),
    ('hTtP://', Scheme.HTTP),
    ('https://', Scheme.HTTPS),
    ('HTTPS://', Scheme.HTTPS),
    ('HttpS://', Scheme.HTTPS),
])
def test_scheme_any_casing(prefix, scheme):
    rest, value = parse_scheme(prefix + 'example.org')
    assert value is scheme
    assert rest.pos == len(prefix)
    assert rest == 'example.org'


def test_scheme_unrecognized():
    with pytest.raises(ParseFailure) as ei:
        parse_scheme('bla://yay')

    e = ei.value
    assert e.kind is ErrorKind.UNRECOGNIZED_SCHEME
    assert e.errors == [
        TraceEntry(0, ErrorKind.TAG_MISMATCH),
        TraceEntry(0, ErrorKind.ALT_EXHAUSTED),
        TraceEntry(0, ErrorKind.UNRECOGNIZED_SCHEME),
        TraceEntry(0, ErrorKind.CONTEXT, 'scheme parsing error'),
    ]
    # the "http://" attempt
    assert len(e.alternatives) == 1


@pytest.mark.parametrize('text', [
    'ftp://host',
    'http:/host',
    'https:host',
    '//host',
    '',
])
def test_scheme_other_prefixes(text):
    with pytest.raises(ParseFailure) as ei:
        parse_scheme(text)
    assert ei.value.kind is ErrorKind.UNRECOGNIZED_SCHEME


def test_scheme_from_literal():
    assert Scheme.from_literal('HTTPS://') is Scheme.HTTPS
    assert Scheme.HTTP.prefix == 'http://'
