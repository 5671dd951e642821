"""The Either type: a success value (Right) or a failure value (Left)."""

from __future__ import annotations

from typing import Any, Callable

from haven.classify import type_identifier
from haven.printing import show

EITHER_TYPE_IDENTIFIER = 'haven/Either'


class Either:
    __type_identifier__ = EITHER_TYPE_IDENTIFIER
    __slots__ = ('is_right', 'value')

    is_right: bool
    value: Any

    def __new__(cls, *args: object, **kwargs: object) -> Either:
        raise TypeError('Cannot instantiate Either')

    @classmethod
    def _make(cls, is_right: bool, value: object) -> Either:
        either = object.__new__(cls)
        object.__setattr__(either, 'is_right', is_right)
        object.__setattr__(either, 'value', value)
        return either

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError('Either values are immutable')

    @property
    def is_left(self) -> bool:
        return not self.is_right

    def map(self, f: Callable[[Any], Any]) -> Either:
        return Right(f(self.value)) if self.is_right else self

    def map_left(self, f: Callable[[Any], Any]) -> Either:
        return self if self.is_right else Left(f(self.value))

    def chain(self, f: Callable[[Any], Either]) -> Either:
        return f(self.value) if self.is_right else self

    def __eq__(self, other: object) -> bool:
        if type_identifier(other) != EITHER_TYPE_IDENTIFIER:
            return NotImplemented
        return (
            self.is_right == other.is_right  # type: ignore
            and self.value == other.value  # type: ignore
        )

    def __hash__(self) -> int:
        return hash((EITHER_TYPE_IDENTIFIER, self.is_right, self.value))

    def __repr__(self) -> str:
        tag = 'Right' if self.is_right else 'Left'
        return f'{tag}({show(self.value)})'


def Left(value: object) -> Either:
    return Either._make(False, value)


def Right(value: object) -> Either:
    return Either._make(True, value)
