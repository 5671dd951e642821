"""Modules: a checking mode, an environment and the functions bound to them.

Nothing here is global. Two modules made with different environments (or
with checking on and off) can be used side by side:

    >>> checked = create(check_types=True, env=env)
    >>> checked.add(1, 2)
    3
    >>> checked.unchecked.add(1, True)
    2
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from haven import prelude
from haven.curry import CurriedFunction, curry
from haven.logging import get_logger
from haven.set_once import SetOnce
from haven.signature import Requirements, Signature
from haven.types import Any, Type
from haven.validate import Validator

_logger = get_logger(__name__)


class Module:
    check_types: SetOnce[bool] = SetOnce()
    env: SetOnce[Tuple[Type, ...]] = SetOnce()

    def __init__(self, check_types: bool, env: Sequence[Type]) -> None:
        self.check_types = check_types
        self.env = tuple(env)
        self._validator: Optional[Validator] = (
            Validator(self.env) if check_types else None
        )
        self._functions: Dict[str, CurriedFunction] = {}
        for definition in prelude.DEFINITIONS:
            self._functions[definition.name] = self.define(
                definition.name,
                definition.parameters,
                definition.implementation,
                returns=definition.returns,
                requires=definition.requires,
            )
        _logger.debug(
            'created module with {} functions (checking {})',
            len(self._functions),
            'on' if check_types else 'off',
        )

    def define(
        self,
        name: str,
        constraints: Sequence[Type],
        implementation: Callable[..., object],
        *,
        returns: Type = Any,
        requires: Optional[Requirements] = None,
    ) -> CurriedFunction:
        """Curry implementation, checking its arguments against constraints.

        There must be one constraint for each parameter of implementation.
        Values bound to a type variable in requires must support each of the
        capabilities listed for it."""
        arity = _arity(implementation)
        if arity is not None and arity != len(constraints):
            raise ValueError(
                f'{name} takes {arity} arguments, but {len(constraints)} '
                'types were given for them'
            )
        return curry(
            Signature(name, constraints, returns, requires),
            implementation,
            self._validator,
        )

    @functools.cached_property
    def unchecked(self) -> Module:
        """This module with type checking turned off."""
        if not self.check_types:
            return self
        return Module(check_types=False, env=self.env)

    @property
    def functions(self) -> Dict[str, CurriedFunction]:
        return dict(self._functions)

    def __getattr__(self, name: str) -> CurriedFunction:
        # only called when normal lookup fails
        functions = self.__dict__.get('_functions', {})
        try:
            return functions[name]
        except KeyError:
            raise AttributeError(
                f'{type(self).__name__!r} object has no attribute {name!r}'
            ) from None

    def __dir__(self) -> List[str]:
        return [*super().__dir__(), *self._functions]

    def __repr__(self) -> str:
        mode = 'checked' if self.check_types else 'unchecked'
        return f'<Module ({mode}, {len(self.env)} types)>'


def create(check_types: bool, env: Sequence[Type]) -> Module:
    return Module(check_types=check_types, env=env)


def _arity(f: Callable[..., object]) -> Optional[int]:
    """Count the positional parameters of f that have no default.

    Returns None when f takes *args or can't be inspected."""
    try:
        parameters = inspect.signature(f).parameters.values()
    except (TypeError, ValueError):
        return None
    count = 0
    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if (
            parameter.kind
            in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
            )
            and parameter.default is inspect.Parameter.empty
        ):
            count += 1
    return count
