"""Checking the arguments and results of curried functions."""

from __future__ import annotations

from typing import Iterator, List, Sequence

from typing_extensions import Never

from haven.classify import observed_type
from haven.errors import (
    AccessibilityError,
    InvalidValueError,
    TypeClassError,
    TypeVariableError,
    format_entries,
    format_invalid_value_error,
    format_type_class_error,
    format_type_variable_error,
)
from haven.logging import get_logger
from haven.placeholder import is_placeholder
from haven.printing import show
from haven.signature import Signature
from haven.typeclasses import Capability
from haven.types import AccessibleType, Binding, Type, type_names

_logger = get_logger(__name__)


class Validator:
    """Checks values against the types of a signature.

    The environment names the types a rejected value is reported to be a
    member of."""

    def __init__(self, environment: Sequence[Type]) -> None:
        self.environment = tuple(environment)

    def check_argument(
        self,
        signature: Signature,
        pending: Sequence[object],
        index: int,
        value: object,
    ) -> None:
        """Check value as the argument at index.

        pending holds the arguments supplied so far, with placeholders in
        the unfilled slots; the filled ones take part in unification."""
        self._check(signature, index, value)
        self._require(signature, index, value)
        filled = [
            (i, v) for i, v in enumerate(pending) if not is_placeholder(v)
        ]
        self._unify(signature, filled, index, value)

    def check_result(
        self, signature: Signature, arguments: Sequence[object], result: object
    ) -> None:
        index = signature.arity
        self._check(signature, index, result)
        self._require(signature, index, result)
        self._unify(signature, list(enumerate(arguments)), index, result)

    def _check(self, signature: Signature, index: int, value: object) -> None:
        t = signature.types[index]
        failure = t.find_failure(value)
        if failure is None:
            return
        _logger.debug(
            'rejecting {} at position {} of {}', show(value), index, signature
        )
        if isinstance(failure.type, AccessibleType) and not failure.path:
            raise AccessibilityError(signature.name, index)
        message = format_invalid_value_error(
            signature.render_with_markers([(index, *failure.path)]),
            format_entries([[self._describe(failure.value)]]),
            failure.type.to_user_string(),
            getattr(failure.type, 'url', None),
        )
        raise InvalidValueError(message, signature.name, index, value)

    def _require(
        self, signature: Signature, index: int, value: object
    ) -> None:
        if not signature.requires:
            return
        for binding in _bindings_at(signature, index, value):
            for capability in signature.requires.get(binding.variable, ()):
                if not capability.supports(binding.value):
                    self._reject_unsupported(signature, binding, capability)

    def _reject_unsupported(
        self, signature: Signature, binding: Binding, capability: Capability
    ) -> Never:
        _logger.debug(
            '{} lacks {}, required by {}',
            show(binding.value),
            capability.name,
            signature,
        )
        lines = signature.render_with_markers(
            [binding.path],
            [signature.requirement_span(binding.variable, capability)],
        )
        message = format_type_class_error(
            lines,
            format_entries([[self._describe(binding.value)]]),
            signature.name,
            binding.variable.name,
            capability.name,
        )
        raise TypeClassError(
            message, signature.name, capability.name, binding.value
        )

    def _unify(
        self,
        signature: Signature,
        filled: Sequence[tuple[int, object]],
        index: int,
        value: object,
    ) -> None:
        new_bindings = list(_bindings_at(signature, index, value))
        if not new_bindings:
            return
        existing = [
            binding
            for i, v in filled
            if i != index
            for binding in _bindings_at(signature, i, v)
        ]
        checked: List[object] = []
        for binding in new_bindings:
            variable = binding.variable
            if any(variable is seen for seen in checked):
                continue
            checked.append(variable)
            group = [
                b
                for b in [*existing, *new_bindings]
                if b.variable is variable
            ]
            if len({observed_type(b.value) for b in group}) > 1:
                self._reject_group(signature, group)

    def _reject_group(
        self, signature: Signature, group: Sequence[Binding]
    ) -> Never:
        _logger.debug(
            'type variable {} of {} is bound to incompatible values',
            group[0].variable,
            signature,
        )
        paths = sorted({b.path for b in group})
        entries = [
            [self._describe(b.value) for b in group if b.path == path]
            for path in paths
        ]
        message = format_type_variable_error(
            signature.render_with_markers(paths), format_entries(entries)
        )
        raise TypeVariableError(
            message, signature.name, [b.value for b in group]
        )

    def _describe(self, value: object) -> tuple[str, List[str]]:
        return show(value), type_names(self.environment, value)


def _bindings_at(
    signature: Signature, index: int, value: object
) -> Iterator[Binding]:
    for binding in signature.types[index].bindings(value):
        yield binding._replace(path=(index, *binding.path))

