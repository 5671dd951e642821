"""The functions every module defines.

Each entry of DEFINITIONS is turned into a CurriedFunction by
Module.define, so these implementations only ever see arguments that have
already been checked (unless checking is off).
"""

from __future__ import annotations

import collections.abc
import re
from typing import Any as _Any
from typing import Callable, List, NamedTuple, Optional, Sequence

from haven import typeclasses, types
from haven.classify import describe, is_nullish, undefined
from haven.adt.either import Left, Right
from haven.errors import RangeError, format_range_error
from haven.logging import get_logger
from haven.adt.maybe import Just, Nothing
from haven.printing import show as _show
from haven.signature import Requirements
from haven.types import (
    Any,
    Accessible,
    Array,
    Boolean,
    EitherType,
    FiniteNumber,
    Function,
    Integer,
    MaybeType,
    StrMap,
    String,
    Type,
    TypeRep,
    TypeVariable,
    ValidNumber,
)

_logger = get_logger(__name__)

a = TypeVariable('a')
b = TypeVariable('b')
c = TypeVariable('c')
l = TypeVariable('l')  # noqa: E741
r = TypeVariable('r')


class Definition(NamedTuple):
    name: str
    parameters: Sequence[Type]
    returns: Type
    implementation: Callable[..., _Any]
    requires: Optional[Requirements] = None


DEFINITIONS: List[Definition] = []


def _defines(
    name: str,
    parameters: Sequence[Type],
    returns: Type,
    requires: Optional[Requirements] = None,
) -> Callable[[Callable[..., _Any]], Callable[..., _Any]]:
    def decorator(f: Callable[..., _Any]) -> Callable[..., _Any]:
        DEFINITIONS.append(Definition(name, parameters, returns, f, requires))
        return f

    return decorator


# Combinators


@_defines('I', [a], a)
def _identity(x):
    return x


@_defines('K', [a, b], a)
def _constant(x, y):
    return x


@_defines('A', [Function, a], b)
def _apply(f, x):
    return f(x)


@_defines('T', [a, Function], b)
def _thrush(x, f):
    return f(x)


@_defines('compose', [Function, Function, a], c)
def _compose(f, g, x):
    return f(g(x))


@_defines('flip', [Function, a, b], c)
def _flip(f, x, y):
    return f(y, x)


# Numbers


@_defines('add', [FiniteNumber, FiniteNumber], FiniteNumber)
def _add(x, y):
    return x + y


@_defines('sub', [FiniteNumber, FiniteNumber], FiniteNumber)
def _sub(x, y):
    return x - y


@_defines('mult', [FiniteNumber, FiniteNumber], FiniteNumber)
def _mult(x, y):
    return x * y


@_defines('inc', [FiniteNumber], FiniteNumber)
def _inc(x):
    return x + 1


@_defines('dec', [FiniteNumber], FiniteNumber)
def _dec(x):
    return x - 1


@_defines('negate', [ValidNumber], ValidNumber)
def _negate(x):
    return -x


@_defines('odd', [Integer], Boolean)
def _odd(n):
    return n % 2 != 0


@_defines('even', [Integer], Boolean)
def _even(n):
    return n % 2 == 0


@_defines('range', [Integer, Integer], Array(Integer))
def _range(start, stop):
    return list(range(int(start), int(stop)))


# Strings


@_defines('to_lower', [String], String)
def _to_lower(s):
    return s.lower()


@_defines('to_upper', [String], String)
def _to_upper(s):
    return s.upper()


@_defines('trim', [String], String)
def _trim(s):
    return s.strip()


@_defines('words', [String], Array(String))
def _words(s):
    return s.split()


# Objects and arrays


@_defines('keys', [StrMap(a)], Array(String))
def _keys(m):
    return list(m.keys())


@_defines('values', [StrMap(a)], Array(a))
def _values(m):
    return list(m.values())


@_defines('head', [Array(a)], MaybeType(a))
def _head(xs):
    return Just(xs[0]) if len(xs) > 0 else Nothing


@_defines('last', [Array(a)], MaybeType(a))
def _last(xs):
    return Just(xs[-1]) if len(xs) > 0 else Nothing


def _property(name: str, x: object) -> object:
    if isinstance(x, collections.abc.Mapping):
        return x.get(name, undefined)
    return getattr(x, name, undefined)


@_defines('get', [TypeRep, String, Accessible], MaybeType(a))
def _get(type_rep, name, x):
    value = _property(name, x)
    return Just(value) if types.is_(type_rep, value) else Nothing


@_defines('gets', [TypeRep, Array(String), Accessible], MaybeType(a))
def _gets(type_rep, names, x):
    for name in names:
        if is_nullish(x):
            return Nothing
        x = _property(name, x)
    return Just(x) if types.is_(type_rep, x) else Nothing


# Logic


@_defines('and_', [a, a], a, {a: [typeclasses.to_boolean]})
def _and(x, y):
    return y if typeclasses.to_boolean(x) else x


@_defines('or_', [a, a], a, {a: [typeclasses.to_boolean]})
def _or(x, y):
    return x if typeclasses.to_boolean(x) else y


@_defines(
    'xor', [a, a], a, {a: [typeclasses.to_boolean, typeclasses.empty]}
)
def _xor(x, y):
    x_is_true = typeclasses.to_boolean(x)
    if x_is_true == typeclasses.to_boolean(y):
        return typeclasses.empty(x)
    return x if x_is_true else y


@_defines('not_', [Boolean], Boolean)
def _not(x):
    return not x


@_defines('concat', [a, a], a, {a: [typeclasses.concat]})
def _concat(x, y):
    return typeclasses.concat(x, y)


@_defines('equals', [a, a], Boolean, {a: [typeclasses.equals]})
def _equals(x, y):
    return bool(typeclasses.equals(x, y))


# Maybe


@_defines('is_nothing', [MaybeType(a)], Boolean)
def _is_nothing(m):
    return m.is_nothing


@_defines('is_just', [MaybeType(a)], Boolean)
def _is_just(m):
    return m.is_just


@_defines('from_maybe', [a, MaybeType(a)], a)
def _from_maybe(default, m):
    return m.get_or_else(default)


@_defines('maybe', [b, Function, MaybeType(a)], b)
def _maybe(default, f, m):
    return f(m.value) if m.is_just else default


@_defines('to_maybe', [a], MaybeType(a))
def _to_maybe(x):
    return Nothing if is_nullish(x) else Just(x)


@_defines('map_maybe', [Function, Array(a)], Array(b))
def _map_maybe(f, xs):
    return [m.value for m in map(f, xs) if m.is_just]


@_defines('cat_maybes', [Array(MaybeType(a))], Array(a))
def _cat_maybes(ms):
    return [m.value for m in ms if m.is_just]


@_defines('encase', [Function, a], MaybeType(b))
def _encase(f, x):
    try:
        return Just(f(x))
    except Exception:
        _logger.debug('encase: {!r} raised for {!r}', f, x, exc_info=True)
        return Nothing


# Either


@_defines('is_left', [EitherType(a, b)], Boolean)
def _is_left(e):
    return e.is_left


@_defines('is_right', [EitherType(a, b)], Boolean)
def _is_right(e):
    return e.is_right


@_defines('either', [Function, Function, EitherType(a, b)], c)
def _either(f, g, e):
    return g(e.value) if e.is_right else f(e.value)


@_defines('encase_either', [Function, Function, a], EitherType(l, r))
def _encase_either(f, g, x):
    try:
        return Right(g(x))
    except Exception as e:
        return Left(f(e))


# Parsing

_DIGITS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'


@_defines('parse_int', [Integer, String], MaybeType(Integer))
def _parse_int(radix, s):
    if not 2 <= radix <= 36:
        raise RangeError(
            format_range_error('parse_int', 'Radix not in [2 .. 36]')
        )
    radix = int(radix)
    pattern = re.compile(f'[{_DIGITS[:radix]}]+', re.IGNORECASE | re.ASCII)
    digits = re.sub(r'\A[+-]', '', s)
    if radix == 16:
        digits = re.sub(r'\A0x', '', digits, flags=re.IGNORECASE | re.ASCII)
    if pattern.fullmatch(digits) is None:
        return Nothing
    return Just(int(s, radix))


# Types


@_defines('is_', [TypeRep, Any], Boolean)
def _is(type_rep, x):
    return types.is_(type_rep, x)


@_defines('type_', [Any], Any)
def _type(x):
    return describe(x)


@_defines('show', [Any], String)
def _show_value(x):
    return _show(x)
