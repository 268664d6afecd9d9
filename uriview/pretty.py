"""Render parsed uris and failure traces for terminal users"""

from typing import List, Optional

from termcolor import colored

from .exceptions import ParseFailure
from .host import HostName, IPv4
from .uri import URI


__all__ = [
    'pformat_uri', 'pformat_failure',
]


COMPONENT_COLORS = {
    'scheme': 'red',
    'authority': 'green',
    'host': 'yellow',
    'port': 'blue',
    'path': 'magenta',
    'query': 'cyan',
    'fragment': 'white',
}


def _paint(text: str, color: Optional[str], enabled: bool, attrs: Optional[List[str]] = None) -> str:
    if not enabled:
        return text
    return colored(text, color, attrs=attrs)


def _host_repr(host) -> str:
    if isinstance(host, HostName):
        return 'HOST({})'.format(host.name)
    elif isinstance(host, IPv4):
        return 'IP({})'.format(host)
    raise TypeError('Unknown host type {}'.format(type(host).__name__))


def _component_lines(uri: URI):
    yield 'scheme', uri.scheme.name
    if uri.authority is None:
        yield 'authority', None
    else:
        password = uri.authority.password
        yield 'authority', 'user={} password={}'.format(
            uri.authority.user.content,
            repr(password.content) if password is not None else None)
    yield 'host', _host_repr(uri.host)
    yield 'port', None if uri.port is None else str(uri.port)
    yield 'path', None if uri.path is None else '/'.join(s.content for s in uri.path)
    yield 'query', None if uri.query is None else ' '.join(
        '{}={}'.format(q.key.content, q.value.content) for q in uri.query)
    yield 'fragment', None if uri.fragment is None else uri.fragment.content


def pformat_uri(uri: URI, rest: str = '', color: bool = True) -> str:
    """One component per line, absent ones dimmed"""
    lines = []
    for name, value in _component_lines(uri):
        label = _paint('{:<10}'.format(name), COMPONENT_COLORS[name], color)
        if value is None:
            value = _paint('-', None, color, attrs=['dark'])
        lines.append('{} {}'.format(label, value))
    lines.append('{:<10} {}'.format('rest', repr(rest)))
    return '\n'.join(lines)


def pformat_failure(failure: ParseFailure, color: bool = True) -> str:
    """The input with the failing position marked, then the trace"""
    text = failure.text
    pos = failure.position
    head = _paint(text[:pos], None, color, attrs=['dark'])
    if pos < len(text):
        mark = _paint(text[pos], 'red', color, attrs=['bold', 'underline'])
        tail = text[pos + 1:]
    else:
        mark = _paint('<end>', 'red', color, attrs=['bold'])
        tail = ''

    lines = [head + mark + tail]
    for i, e in enumerate(failure.errors):
        if e.is_context:
            what = _paint(e.describe(), 'cyan', color)
        else:
            what = _paint(e.describe(), 'red', color)
        lines.append('  {}: at offset {}, {}: {}'.format(i, e.position, what, repr(text[e.position:])))
    return '\n'.join(lines)
