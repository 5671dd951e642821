"""Capabilities: operations dispatched on the observed type of a value.

A Capability maps observed types (kind names such as 'Array', or type
identifiers such as 'haven/Maybe') to implementations. Dispatch looks the
value up once, through the classifier, instead of probing for methods.

    >>> to_boolean([])
    False
    >>> to_boolean(Just(0))
    True
"""

from __future__ import annotations

import math
import numbers
from typing import Callable, Dict, Iterable, Mapping

from haven.classify import Kind, observed_type
from haven.adt.either import EITHER_TYPE_IDENTIFIER
from haven.errors import CapabilityError
from haven.adt.maybe import MAYBE_TYPE_IDENTIFIER, Just, Nothing
from haven.printing import show


class Capability:
    def __init__(self, name: str) -> None:
        self.name = name
        self._instances: Dict[str, Callable[..., object]] = {}

    def register(
        self, *observed_types: str
    ) -> Callable[[Callable[..., object]], Callable[..., object]]:
        """Register the decorated function for each of observed_types."""

        def decorator(f: Callable[..., object]) -> Callable[..., object]:
            for observed in observed_types:
                self._instances[observed] = f
            return f

        return decorator

    def supports(self, value: object) -> bool:
        return observed_type(value) in self._instances

    def resolve(self, value: object) -> Callable[..., object]:
        try:
            return self._instances[observed_type(value)]
        except KeyError:
            raise CapabilityError(show(value), self.name) from None

    @property
    def observed_types(self) -> Iterable[str]:
        return self._instances.keys()

    def __call__(self, value: object, *args: object) -> object:
        return self.resolve(value)(value, *args)

    def __repr__(self) -> str:
        return f'<Capability {self.name}>'


to_boolean = Capability('to_boolean')
empty = Capability('empty')
concat = Capability('concat')
equals = Capability('equals')

_ARRAY = Kind.ARRAY.value
_BOOLEAN = Kind.BOOLEAN.value
_OBJECT = Kind.OBJECT.value
_STRING = Kind.STRING.value


@to_boolean.register(_BOOLEAN)
def _boolean_to_boolean(b: bool) -> bool:
    return b


@to_boolean.register(_ARRAY)
def _array_to_boolean(xs) -> bool:
    return len(xs) > 0


@to_boolean.register(MAYBE_TYPE_IDENTIFIER)
def _maybe_to_boolean(m) -> bool:
    return m.is_just


@to_boolean.register(EITHER_TYPE_IDENTIFIER)
def _either_to_boolean(e) -> bool:
    return e.is_right


@empty.register(_BOOLEAN)
def _boolean_empty(b: bool) -> bool:
    return False


@empty.register(_ARRAY)
def _array_empty(xs):
    # keeps lists lists and tuples tuples
    return xs[:0]


@empty.register(_STRING)
def _string_empty(s: str) -> str:
    return ''


@empty.register(MAYBE_TYPE_IDENTIFIER)
def _maybe_empty(m):
    return Nothing


@empty.register(_OBJECT)
def _object_empty(o) -> dict:
    return {}


@concat.register(_STRING)
def _string_concat(a: str, b: str) -> str:
    return a + b


@concat.register(_ARRAY)
def _array_concat(a, b):
    if type(a) is type(b):
        return a + b
    return [*a, *b]


@concat.register(MAYBE_TYPE_IDENTIFIER)
def _maybe_concat(a, b):
    if a.is_nothing:
        return b
    if b.is_nothing:
        return a
    return Just(concat(a.value, b.value))


@concat.register(_OBJECT)
def _object_concat(a: Mapping, b: Mapping) -> dict:
    return {**a, **b}


@equals.register(*(kind.value for kind in Kind if kind is not Kind.TAGGED))
def _equals(a: object, b: object) -> bool:
    if isinstance(a, numbers.Real) and isinstance(b, numbers.Real):
        if _is_nan(a) and _is_nan(b):
            return True
    return bool(a == b)


@equals.register(MAYBE_TYPE_IDENTIFIER)
def _maybe_equals(a, b) -> bool:
    if observed_type(b) != MAYBE_TYPE_IDENTIFIER:
        return False
    if a.is_nothing or b.is_nothing:
        return a.is_nothing and b.is_nothing
    return bool(equals(a.value, b.value))


@equals.register(EITHER_TYPE_IDENTIFIER)
def _either_equals(a, b) -> bool:
    if observed_type(b) != EITHER_TYPE_IDENTIFIER:
        return False
    return a.is_right == b.is_right and bool(equals(a.value, b.value))


def _is_nan(n: numbers.Real) -> bool:
    return not isinstance(n, numbers.Integral) and math.isnan(n)
