"""Curried functions whose arguments are checked as they are supplied.

A CurriedFunction never changes once built. Applying it to some of its
arguments returns a new CurriedFunction holding a new tuple of pending
arguments, so a partial application can be shared and extended in several
ways at once:

    >>> add1 = add(1)
    >>> add1(2), add1(3)
    (3, 4)
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from haven.errors import ArityError
from haven.logging import get_logger
from haven.placeholder import __, is_placeholder
from haven.signature import Signature
from haven.validate import Validator

_logger = get_logger(__name__)


class CurriedFunction:
    """A function of fixed arity that can be applied an argument at a time.

    When validator is None, arguments are not checked against the
    signature, but the number of arguments still is."""

    __slots__ = ('_signature', '_implementation', '_validator', '_pending')

    def __init__(
        self,
        signature: Signature,
        implementation: Callable[..., object],
        validator: Optional[Validator] = None,
        pending: Optional[Sequence[object]] = None,
    ) -> None:
        self._signature = signature
        self._implementation = implementation
        self._validator = validator
        if pending is None:
            pending = (__,) * signature.arity
        self._pending: Tuple[object, ...] = tuple(pending)

    @property
    def signature(self) -> Signature:
        return self._signature

    @property
    def name(self) -> str:
        return self._signature.name

    @property
    def __name__(self) -> str:
        return self._signature.name

    @property
    def __wrapped__(self) -> Callable[..., object]:
        return self._implementation

    @property
    def pending(self) -> Tuple[object, ...]:
        return self._pending

    @property
    def arity(self) -> int:
        """The number of arguments still to be supplied."""
        return len(self._unfilled())

    @property
    def is_checked(self) -> bool:
        return self._validator is not None

    def _unfilled(self) -> list[int]:
        return [i for i, v in enumerate(self._pending) if is_placeholder(v)]

    def __call__(self, *args: object) -> object:
        unfilled = self._unfilled()
        if any(not is_placeholder(arg) for arg in args[len(unfilled) :]):
            filled = len(self._pending) - len(unfilled)
            raise ArityError(
                self.name, self._signature.arity, filled + len(args)
            )
        pending = list(self._pending)
        for index, arg in zip(unfilled, args):
            if is_placeholder(arg):
                continue
            if self._validator is not None:
                self._validator.check_argument(
                    self._signature, pending, index, arg
                )
            pending[index] = arg
        if any(map(is_placeholder, pending)):
            return CurriedFunction(
                self._signature,
                self._implementation,
                self._validator,
                pending,
            )
        result = self._implementation(*pending)
        if self._validator is not None:
            self._validator.check_result(self._signature, pending, result)
        return result

    def __get__(
        self, instance: object, owner: Optional[type] = None
    ) -> object:
        # accessed through an instance, the instance is the first argument
        if instance is None:
            return self
        return self(instance)

    def __repr__(self) -> str:
        if all(map(is_placeholder, self._pending)):
            return f'<CurriedFunction {self._signature}>'
        arguments = ', '.join(map(repr, self._pending))
        return f'<CurriedFunction {self._signature} ({arguments})>'


def curry(
    signature: Signature,
    implementation: Callable[..., object],
    validator: Optional[Validator] = None,
) -> CurriedFunction:
    _logger.debug(
        'currying {} ({} checking)',
        signature,
        'with' if validator is not None else 'without',
    )
    return CurriedFunction(signature, implementation, validator)
