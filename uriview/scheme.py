from enum import Enum
from typing import Tuple

from .span import Cursor
from .context import context, alt
from .exceptions import ErrorKind, ParseFailure
from .primitives import tag_no_case


__all__ = [
    'Scheme', 'parse_scheme',
]


class Scheme(Enum):
    """The beginning of a URI, either http or https"""

    HTTP = 'http://'
    HTTPS = 'https://'

    @classmethod
    def from_literal(cls, literal: str) -> 'Scheme':
        return cls(literal.lower())

    @property
    def prefix(self) -> str:
        return self.value


@context('scheme parsing error')
def parse_scheme(cursor: Cursor) -> Tuple[Cursor, Scheme]:
    try:
        rest, literal = alt(cursor, *[tag_no_case(s.prefix) for s in Scheme])
    except ParseFailure as e:
        e.push(cursor.pos, ErrorKind.UNRECOGNIZED_SCHEME)
        raise
    return rest, Scheme.from_literal(literal.content)
