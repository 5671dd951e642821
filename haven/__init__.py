"""Curried functions with run-time type checking.

    >>> import haven
    >>> haven.add(1)(2)
    3
    >>> haven.add(1, True)
    Traceback (most recent call last):
      ...
    haven.errors.InvalidValueError: Invalid value
    ...

The functions available as attributes of this package belong to a default
module, which checks types unless HAVEN_ENV is 'production'. Setting
HAVEN_LOG_FILE sends haven's log records there as JSON (see
haven.config). Use create() to make a module with other options.
"""

from haven.adt import Either, Just, Left, Maybe, Nothing, Right
from haven.classify import TypeIdentifier, undefined
from haven.config import (
    check_types_from_environment,
    log_handler_from_environment,
)
from haven.curry import CurriedFunction
from haven.errors import (
    AccessibilityError,
    ArityError,
    CapabilityError,
    ConfigurationError,
    HavenError,
    InvalidValueError,
    RangeError,
    TypeClassError,
    TypeVariableError,
)
from haven.module import Module, create
from haven.placeholder import __
from haven.types import (
    Accessible,
    Any,
    Array,
    BinaryType,
    Boolean,
    Date,
    EitherType,
    Error,
    FiniteNumber,
    Function,
    Integer,
    MaybeType,
    NonNegativeInteger,
    NonZeroFiniteNumber,
    Null,
    NullaryType,
    Number,
    Object,
    RegExp,
    StrMap,
    String,
    TypeRep,
    TypeVariable,
    UnaryType,
    Undefined,
    Unknown,
    ValidNumber,
    env,
)

version = '0.1.0'

log_handler_from_environment()
_default = create(check_types=check_types_from_environment(), env=env)

check_types = _default.check_types
define = _default.define
unchecked = _default.unchecked


def __getattr__(name: str) -> CurriedFunction:
    try:
        return _default.functions[name]
    except KeyError:
        raise AttributeError(
            f'module {__name__!r} has no attribute {name!r}'
        ) from None


def __dir__() -> list:
    return [*globals(), *_default.functions]
