"""Classification of run-time values.

Every value is put into exactly one Kind by looking at its structure: the
abstract base classes it satisfies and the type identifier its class
declares. Nothing here compares constructors by identity, so a Maybe built
by a second copy of this package (say, a vendored one) classifies the same
as one built by this copy.

Type identifiers have the form `namespace/Name@version`, where the
namespace and the version are optional. The namespace may itself contain
slashes; the name is whatever follows the last one.
"""

from __future__ import annotations

import collections.abc
import datetime
import enum
import numbers
import re
from typing import NamedTuple, Optional

import parsy


TYPE_IDENTIFIER_ATTRIBUTE = '__type_identifier__'


class Kind(enum.Enum):
    NULL = 'Null'
    UNDEFINED = 'Undefined'
    BOOLEAN = 'Boolean'
    NUMBER = 'Number'
    STRING = 'String'
    ARRAY = 'Array'
    FUNCTION = 'Function'
    OBJECT = 'Object'
    DATE = 'Date'
    REGEXP = 'RegExp'
    ERROR = 'Error'
    TAGGED = 'Tagged'


class _Undefined:
    """The second nullish value, distinct from None.

    It marks a value that was never supplied, such as a missing key."""

    _instance: Optional['_Undefined'] = None

    def __new__(cls) -> '_Undefined':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'undefined'

    def __reduce__(self) -> str:
        return 'undefined'


undefined = _Undefined()


def is_nullish(value: object) -> bool:
    return value is None or value is undefined


def type_identifier(value: object) -> Optional[str]:
    """Return the identifier declared by the class of value, if any.

    The identifier is looked up on the class so that the class itself (a
    type representative) is not mistaken for one of its instances."""
    identifier = getattr(type(value), TYPE_IDENTIFIER_ATTRIBUTE, None)
    if isinstance(identifier, str):
        return identifier
    return None


def classify(value: object) -> Kind:
    if value is None:
        return Kind.NULL
    if value is undefined:
        return Kind.UNDEFINED
    if type_identifier(value) is not None:
        return Kind.TAGGED
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Real):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, BaseException):
        return Kind.ERROR
    if isinstance(value, (datetime.date, datetime.time)):
        return Kind.DATE
    if isinstance(value, re.Pattern):
        return Kind.REGEXP
    if isinstance(value, collections.abc.Sequence) and not isinstance(
        value, (bytes, bytearray)
    ):
        return Kind.ARRAY
    if isinstance(value, collections.abc.Mapping):
        return Kind.OBJECT
    if callable(value):
        return Kind.FUNCTION
    return Kind.OBJECT


def observed_type(value: object) -> str:
    """The type two values must share to unify with one type variable."""
    identifier = type_identifier(value)
    if identifier is not None:
        return identifier
    return classify(value).value


class TypeIdentifier(NamedTuple):
    namespace: Optional[str]
    name: str
    version: int


_segment = parsy.regex(r'[^/@]+').desc('identifier segment')
_version = parsy.string('@') >> parsy.regex(r'[0-9]+').map(int)


@parsy.generate
def _type_identifier_parser():
    segments = yield _segment.sep_by(parsy.string('/'), min=1)
    version = yield _version.optional()
    namespace = '/'.join(segments[:-1]) or None
    return TypeIdentifier(namespace, segments[-1], version or 0)


def parse_type_identifier(identifier: str) -> TypeIdentifier:
    """Split a type identifier into its parts.

    A string that is not a well-formed identifier is taken to be a bare name,
    so that every value still has something to report."""
    try:
        return _type_identifier_parser.parse(identifier)
    except parsy.ParseError:
        return TypeIdentifier(None, identifier, 0)


def describe(value: object) -> TypeIdentifier:
    identifier = type_identifier(value)
    if identifier is None:
        return TypeIdentifier(None, classify(value).value, 0)
    return parse_type_identifier(identifier)
