"""The uri assembler

Stages run one after another, each on what the previous one left:

    scheme -> [authority] -> host -> [port] -> [path] -> [query] -> [fragment]

Scheme and host are mandatory, their failures end the parse. Optional stages
that fail leave the cursor where it was and their field is None.
"""

import sys
from typing import List, NamedTuple, Optional, Tuple

from . import env
from .span import Cursor, Span
from .context import Parser, context
from .exceptions import InvalidInput, ParseFailure
from .scheme import Scheme, parse_scheme
from .authority import Authority, parse_authority
from .host import Host, parse_host
from .port import parse_port
from .path import parse_path
from .query import QueryParam, parse_query, parse_fragment


__all__ = [
    'URI', 'parse_uri', 'parse',
]


class URI(NamedTuple):
    scheme: Scheme                          # http / https
    authority: Optional[Authority]          # the optional "user:password@" thing
    host: Host                              # example.org, or an IPv4
    port: Optional[int]                     # optional ":8080"
    path: Optional[List[Span]]              # optional "/user/login"
    query: Optional[List[QueryParam]]       # optional "?user=SomeUser&sortBy=newest"
    fragment: Optional[Span]                # optional "#inner-link"

    # equal to other uris only, not to plain tuples
    def __eq__(self, o):
        if isinstance(o, URI):
            return tuple.__eq__(self, o)
        return False

    def __ne__(self, o):
        if isinstance(o, URI):
            return tuple.__ne__(self, o)
        return True

    __hash__ = tuple.__hash__


def _trace(stage: str, cursor: Cursor, outcome) -> None:
    if env.DEBUG:
        print('[uriview] {:<10} at {:>4}: {}'.format(stage, cursor.pos, outcome), file=sys.stderr)


def _required(stage: str, parser: Parser, cursor: Cursor):
    try:
        rest, value = parser(cursor)
    except ParseFailure as e:
        _trace(stage, cursor, 'failed, {}'.format(e.kind.value if e.kind else 'no match'))
        raise
    _trace(stage, cursor, repr(value))
    return rest, value


def _optional(stage: str, parser: Parser, cursor: Cursor):
    try:
        rest, value = parser(cursor)
    except ParseFailure:
        _trace(stage, cursor, 'absent')
        return cursor, None
    _trace(stage, cursor, repr(value))
    return rest, value


@context('uri')
def parse_uri(cursor: Cursor) -> Tuple[Cursor, URI]:
    rest, scheme = _required('scheme', parse_scheme, cursor)
    rest, authority = _optional('authority', parse_authority, rest)
    rest, host = _required('host', parse_host, rest)
    rest, port = _optional('port', parse_port, rest)
    rest, path = _optional('path', parse_path, rest)
    rest, query = _optional('query', parse_query, rest)
    rest, fragment = _optional('fragment', parse_fragment, rest)
    _trace('done', rest, 'rest={}'.format(repr(rest.rest)))
    return rest, URI(
        scheme=scheme,
        authority=authority,
        host=host,
        port=port,
        path=path,
        query=query,
        fragment=fragment,
    )


def parse(uri_text: str) -> Tuple[str, URI]:
    """Parse <uri_text>, return the unconsumed remainder and the URI

    Raise ParseFailure when scheme or host can't be recognized.
    """
    if not isinstance(uri_text, str):
        raise InvalidInput('Expect a str, got {}'.format(type(uri_text).__name__))
    rest, uri = parse_uri(Cursor(uri_text))
    return rest.rest, uri
