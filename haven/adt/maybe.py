"""The Maybe type: a value that might be absent."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from haven.classify import type_identifier
from haven.printing import show

MAYBE_TYPE_IDENTIFIER = 'haven/Maybe'


class Maybe:
    """Either Nothing or Just(value).

    Instances are immutable. Use Nothing and Just to make them; the class
    itself is only a type representative."""

    __type_identifier__ = MAYBE_TYPE_IDENTIFIER
    __slots__ = ('is_just', 'value')

    is_just: bool
    value: Any

    def __new__(cls, *args: object, **kwargs: object) -> Maybe:
        raise TypeError('Cannot instantiate Maybe')

    @classmethod
    def _make(cls, is_just: bool, value: object) -> Maybe:
        maybe = object.__new__(cls)
        object.__setattr__(maybe, 'is_just', is_just)
        object.__setattr__(maybe, 'value', value)
        return maybe

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError('Maybe values are immutable')

    @property
    def is_nothing(self) -> bool:
        return not self.is_just

    def map(self, f: Callable[[Any], Any]) -> Maybe:
        return Just(f(self.value)) if self.is_just else self

    def chain(self, f: Callable[[Any], Maybe]) -> Maybe:
        return f(self.value) if self.is_just else self

    def get_or_else(self, default: object) -> Any:
        return self.value if self.is_just else default

    def __iter__(self) -> Iterator[Any]:
        if self.is_just:
            yield self.value

    def __eq__(self, other: object) -> bool:
        if type_identifier(other) != MAYBE_TYPE_IDENTIFIER:
            return NotImplemented
        if self.is_just != other.is_just:  # type: ignore
            return False
        return not self.is_just or self.value == other.value  # type: ignore

    def __hash__(self) -> int:
        return hash((MAYBE_TYPE_IDENTIFIER, self.is_just, self.value))

    def __repr__(self) -> str:
        if self.is_just:
            return f'Just({show(self.value)})'
        return 'Nothing'


Nothing = Maybe._make(False, None)


def Just(value: object) -> Maybe:
    return Maybe._make(True, value)
