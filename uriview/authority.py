from typing import Optional, Tuple

from .span import Cursor, Span
from .context import context
from .primitives import alphanumeric1, is_alphanumeric, tag


__all__ = [
    'Authority', 'parse_authority',
]


class Authority(object):
    """The optional "user:password@" part"""

    __slots__ = ('user', 'password')

    def __init__(self, user: Span, password: Optional[Span] = None):
        self.user: Span = user
        self.password: Optional[Span] = password

    def __repr__(self):
        return 'Authority(user={}, password={})'.format(
            repr(str(self.user)),
            repr(str(self.password)) if self.password is not None else None)

    def __eq__(self, o):
        if isinstance(o, Authority):
            return self.user == o.user and self.password == o.password
        return NotImplemented

    def __hash__(self):
        return hash((self.user, self.password))


@context('authority')
def parse_authority(cursor: Cursor) -> Tuple[Cursor, Authority]:
    """user[:password]@

    password is None without a colon, and a (possibly empty) span with one.
    """
    rest, user = alphanumeric1(cursor)

    password = None
    if rest.startswith(':'):
        rest, password = rest.advance(1).take_while(is_alphanumeric)

    rest, _ = tag('@')(rest)
    return rest, Authority(user, password)
