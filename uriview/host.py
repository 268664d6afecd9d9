"""Host parsing

The difficulty when parsing the host is that it may be two entirely different
things, either "example.com" or "185.42.23.3". The IPv4 form is tried first,
a dotted quad being also a valid start of a host name.
"""

from typing import List, Sequence, Tuple, Union

from .span import Cursor, Span
from .context import context, alt, fail
from .exceptions import ErrorKind, ParseFailure
from .primitives import alpha1, alphanumerichyphen1, digits, tag


__all__ = [
    'Host', 'HostName', 'IPv4',
    'parse_host', 'parse_ip', 'parse_hostname',
]


class HostName(object):
    """A named host, like "localhost" or "en.wikipedia.org"

    The name is joined back from its labels, it is the only field of a parsed
    URI which is not a view into the input.
    """

    __slots__ = ('name', 'labels')

    def __init__(self, name: str, labels: Sequence[Span] = ()):
        self.name: str = name
        self.labels: Tuple[Span, ...] = tuple(labels)

    @classmethod
    def join(cls, labels: Sequence[Span]) -> 'HostName':
        # ["en", "wikipedia", "org"] => "en.wikipedia.org"
        return cls('.'.join(label.content for label in labels), labels)

    def __str__(self):
        return self.name

    def __repr__(self):
        return 'HostName({})'.format(repr(self.name))

    def __eq__(self, o):
        if isinstance(o, HostName):
            return self.name == o.name
        return NotImplemented

    def __hash__(self):
        return hash(self.name)


class IPv4(object):
    """Four bytes of an IPv4 address, in the order they are written"""

    __slots__ = ('octets',)

    def __init__(self, octets: Sequence[int]):
        octets = tuple(octets)
        assert len(octets) == 4 and all(0 <= o <= 255 for o in octets)
        self.octets: Tuple[int, int, int, int] = octets  # type: ignore

    @property
    def packed(self) -> bytes:
        return bytes(self.octets)

    def __str__(self):
        return '.'.join(str(o) for o in self.octets)

    def __repr__(self):
        return 'IPv4({})'.format(list(self.octets))

    def __eq__(self, o):
        if isinstance(o, IPv4):
            return self.octets == o.octets
        return NotImplemented

    def __hash__(self):
        return hash(self.octets)


Host = Union[HostName, IPv4]


@context('ip number')
def parse_ip_number(cursor: Cursor) -> Tuple[Cursor, int]:
    # at most three digits are taken, "1444" gives 144 and leaves "4"
    rest, span = digits(cursor, 1, 3)
    number = int(span.content)
    if number > 255:
        raise fail(cursor, ErrorKind.NUMERIC_OVERFLOW)
    return rest, number


@context('ip')
def parse_ip(cursor: Cursor) -> Tuple[Cursor, IPv4]:
    rest = cursor
    octets: List[int] = []
    for _ in range(3):
        try:
            rest, number = parse_ip_number(rest)
            rest, _ = tag('.')(rest)
        except ParseFailure as e:
            e.push(cursor.pos, ErrorKind.COUNT)
            raise
        octets.append(number)
    rest, number = parse_ip_number(rest)
    octets.append(number)
    return rest, IPv4(octets)


def _dotted_labels(cursor: Cursor) -> Tuple[Cursor, List[Span]]:
    """Labels ending with a period ("en." "wikipedia."), then the last one ("org")"""
    rest = cursor
    labels: List[Span] = []
    while True:
        try:
            after, label = alphanumerichyphen1(rest)
            after, _ = tag('.')(after)
        except ParseFailure:
            if not labels:
                raise
            break
        labels.append(label)
        rest = after
    rest, last = alpha1(rest)
    labels.append(last)
    return rest, labels


def _single_label(cursor: Cursor) -> Tuple[Cursor, List[Span]]:
    """No period in the name, like "localhost" """
    rest, label = alphanumerichyphen1(cursor)
    return rest, [label]


@context('host')
def parse_hostname(cursor: Cursor) -> Tuple[Cursor, HostName]:
    rest, labels = alt(cursor, _dotted_labels, _single_label)
    return rest, HostName.join(labels)


@context('ip or host')
def parse_host(cursor: Cursor) -> Tuple[Cursor, Host]:
    try:
        return alt(cursor, parse_ip, parse_hostname)
    except ParseFailure as e:
        e.push(cursor.pos, ErrorKind.HOST_UNRECOGNIZED)
        raise
