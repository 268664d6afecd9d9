from enum import Enum
from typing import List, Optional


__all__ = [
    'UriViewException', 'InvalidInput', 'ParseFailure',
    'ErrorKind', 'TraceEntry',
]


class UriViewException(Exception):
    pass


class InvalidInput(UriViewException, TypeError):
    pass


class ErrorKind(Enum):
    EMPTY_MATCH = 'empty match'
    TAG_MISMATCH = 'tag mismatch'
    UNRECOGNIZED_SCHEME = 'unrecognized scheme'
    HOST_UNRECOGNIZED = 'host unrecognized'
    NUMERIC_OVERFLOW = 'numeric overflow'
    ALT_EXHAUSTED = 'alternatives exhausted'
    COUNT = 'count'
    CONTEXT = 'context'


class TraceEntry(object):
    """One step of a failure trace: what went wrong at which position

    Entries of kind CONTEXT carry the label of the stage they annotate.
    """

    __slots__ = ('position', 'kind', 'label')

    def __init__(self, position: int, kind: ErrorKind, label: Optional[str] = None):
        assert (kind is ErrorKind.CONTEXT) == (label is not None)
        self.position: int = position
        self.kind: ErrorKind = kind
        self.label: Optional[str] = label

    @property
    def is_context(self) -> bool:
        return self.kind is ErrorKind.CONTEXT

    def describe(self) -> str:
        if self.is_context:
            return 'in {}'.format(repr(self.label))
        return self.kind.value

    def __repr__(self):
        if self.is_context:
            return 'TraceEntry({}, context={})'.format(self.position, repr(self.label))
        return 'TraceEntry({}, {})'.format(self.position, self.kind.name)

    def __eq__(self, o):
        if isinstance(o, TraceEntry):
            return self.position == o.position \
                and self.kind is o.kind \
                and self.label == o.label
        return NotImplemented

    def __hash__(self):
        return hash((self.position, self.kind, self.label))


class ParseFailure(UriViewException):
    """A parser could not match its input

    <errors> is ordered from the innermost failure to the outermost context.
    """

    def __init__(self, text: str, errors: List[TraceEntry],
                 alternatives: Optional[List['ParseFailure']] = None):
        super().__init__(text, errors)
        self.text: str = text
        self.errors: List[TraceEntry] = errors
        self.alternatives: List['ParseFailure'] = alternatives or []

    @classmethod
    def at(cls, text: str, position: int, kind: ErrorKind) -> 'ParseFailure':
        return cls(text, [TraceEntry(position, kind)])

    def push(self, position: int, kind: ErrorKind, label: Optional[str] = None) -> 'ParseFailure':
        self.errors.append(TraceEntry(position, kind, label))
        return self

    @property
    def kind(self) -> Optional[ErrorKind]:
        """The outermost failure kind, context labels aside"""
        for e in reversed(self.errors):
            if not e.is_context:
                return e.kind
        return None

    @property
    def innermost(self) -> Optional[ErrorKind]:
        for e in self.errors:
            if not e.is_context:
                return e.kind
        return None

    @property
    def kinds(self) -> List[ErrorKind]:
        return [e.kind for e in self.errors if not e.is_context]

    @property
    def labels(self) -> List[str]:
        return [e.label for e in self.errors if e.is_context]

    @property
    def position(self) -> int:
        """Where the innermost failure happened"""
        return self.errors[0].position if self.errors else 0

    def pformat(self) -> str:
        lines = []
        for i, e in enumerate(self.errors):
            lines.append('{}: at offset {}, {}: {}'.format(
                i, e.position, e.describe(), repr(self.text[e.position:])))
        return '\n'.join(lines)

    def __str__(self):
        return self.pformat()

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, self.errors)
