from typing import List, Tuple

from .span import Cursor, Span
from .context import context, opt
from .exceptions import ParseFailure
from .primitives import tag, url_code_points1


__all__ = [
    'parse_path',
]


@context('path')
def parse_path(cursor: Cursor) -> Tuple[Cursor, List[Span]]:
    """Converts "/path/to/my/blog/index.php" to ["path", "to", "my", "blog", "index.php"]"""
    rest, _ = tag('/')(cursor)

    segments: List[Span] = []
    while True:
        try:
            after, segment = url_code_points1(rest)
            after, _ = tag('/')(after)
        except ParseFailure:
            break
        segments.append(segment)
        rest = after

    # whatever follows the last slash, "index.php" for example
    rest, last = opt(rest, url_code_points1)
    if last is not None:
        segments.append(last)
    return rest, segments
