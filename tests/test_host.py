import pytest

from uriview import (
    parse_host, parse_ip, parse_hostname,
    HostName, IPv4,
    ParseFailure, ErrorKind, TraceEntry,
)


E = ErrorKind


def ctx(position, label):
    return TraceEntry(position, E.CONTEXT, label)


def test_hostname_parser():
    assert parse_hostname('localhost:8080') == (':8080', HostName('localhost'))
    assert parse_hostname('example.org:8080') == (':8080', HostName('example.org'))
    assert parse_hostname('some-subsite.example.org:8080') == (
        ':8080', HostName('some-subsite.example.org'))
    assert parse_hostname('example.123') == ('.123', HostName('example'))


def test_hostname_rejoin():
    text = 'en.wikipedia.org'
    rest, host = parse_hostname(text)
    assert rest == ''
    assert host.name == 'en.wikipedia.org'
    assert str(host) == text
    assert [label.content for label in host.labels] == ['en', 'wikipedia', 'org']
    assert all(label.text is text for label in host.labels)


def test_hostname_last_label_is_alphabetic():
    # "b1" can't end a dotted name, only its letters are taken
    assert parse_hostname('a.b1') == ('1', HostName('a.b'))
    assert parse_hostname('a.b-c') == ('-c', HostName('a.b'))


@pytest.mark.parametrize('text', ['$$$.com', '.com'])
def test_hostname_unrecognized(text):
    with pytest.raises(ParseFailure) as ei:
        parse_hostname(text)
    assert ei.value.errors == [
        TraceEntry(0, E.EMPTY_MATCH),
        TraceEntry(0, E.ALT_EXHAUSTED),
        ctx(0, 'host'),
    ]


def test_ipv4_parser():
    assert parse_ip('192.168.0.1:8080') == (':8080', IPv4([192, 168, 0, 1]))
    assert parse_ip('0.0.0.0:8080') == (':8080', IPv4([0, 0, 0, 0]))
    assert parse_ip('255.255.255.255') == ('', IPv4([255, 255, 255, 255]))


def test_ipv4_greedy_truncation():
    # three digits at most, the fourth is left over
    assert parse_ip('192.168.0.1444:8080') == ('4:8080', IPv4([192, 168, 0, 144]))


def test_ipv4_too_many_digits_in_group():
    with pytest.raises(ParseFailure) as ei:
        parse_ip('1924.168.0.1:8080')
    assert ei.value.errors == [
        TraceEntry(3, E.TAG_MISMATCH),
        TraceEntry(0, E.COUNT),
        ctx(0, 'ip'),
    ]

    with pytest.raises(ParseFailure) as ei:
        parse_ip('192.168.0000.144:8080')
    assert ei.value.errors == [
        TraceEntry(11, E.TAG_MISMATCH),
        TraceEntry(0, E.COUNT),
        ctx(0, 'ip'),
    ]


def test_ipv4_too_few_groups():
    with pytest.raises(ParseFailure) as ei:
        parse_ip('192.168.0:8080')
    assert ei.value.errors == [
        TraceEntry(9, E.TAG_MISMATCH),
        TraceEntry(0, E.COUNT),
        ctx(0, 'ip'),
    ]


def test_ipv4_octet_overflow():
    with pytest.raises(ParseFailure) as ei:
        parse_ip('999.168.0.0:8080')
    assert ei.value.kind is E.NUMERIC_OVERFLOW
    assert ei.value.errors == [
        TraceEntry(0, E.NUMERIC_OVERFLOW),
        ctx(0, 'ip number'),
        TraceEntry(0, E.COUNT),
        ctx(0, 'ip'),
    ]

    with pytest.raises(ParseFailure) as ei:
        parse_ip('192.168.0.256')
    assert ei.value.errors == [
        TraceEntry(10, E.NUMERIC_OVERFLOW),
        ctx(10, 'ip number'),
        ctx(0, 'ip'),
    ]


def test_ipv4_value():
    ip = IPv4([127, 0, 0, 1])
    assert ip.octets == (127, 0, 0, 1)
    assert ip.packed == b'\x7f\x00\x00\x01'
    assert str(ip) == '127.0.0.1'
    assert ip != HostName('127.0.0.1')


def test_host_prefers_ip():
    assert parse_host('127.0.0.1:8080') == (':8080', IPv4([127, 0, 0, 1]))
    assert parse_host('localhost:8080') == (':8080', HostName('localhost'))
    assert parse_host('en.wikipedia.org') == ('', HostName('en.wikipedia.org'))


def test_host_falls_back_to_hostname():
    # not an address, though its first label is a fine host name
    assert parse_host('999.168.0.0') == ('.168.0.0', HostName('999'))


def test_host_unrecognized():
    with pytest.raises(ParseFailure) as ei:
        parse_host('$$$')

    e = ei.value
    assert e.kind is E.HOST_UNRECOGNIZED
    assert e.innermost is E.EMPTY_MATCH
    assert e.errors[-3:] == [
        TraceEntry(0, E.ALT_EXHAUSTED),
        TraceEntry(0, E.HOST_UNRECOGNIZED),
        ctx(0, 'ip or host'),
    ]
    assert e.labels == ['host', 'ip or host']
    assert any('ip' in a.labels for a in e.alternatives)
