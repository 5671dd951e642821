"""Errors raised by curried functions, and the text of their messages.

The messages are part of the public interface: programs and their tests
match on them, so the format_* functions below fix their exact wording.
"""

from __future__ import annotations

import builtins
from typing import Optional, Sequence


class HavenError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ArityError(HavenError, builtins.TypeError):
    """A curried function received more arguments than it has parameters."""

    def __init__(self, name: str, required: int, received: int) -> None:
        super().__init__(format_arity_error(name, required, received))
        self.name = name
        self.required = required
        self.received = received


class InvalidValueError(HavenError, builtins.TypeError):
    """A value is not a member of the type of its parameter."""

    def __init__(
        self, message: str, name: str, index: int, value: object
    ) -> None:
        super().__init__(message)
        self.name = name
        self.index = index
        self.value = value


class TypeVariableError(HavenError, builtins.TypeError):
    """Values bound to one type variable have no type in common."""

    def __init__(
        self, message: str, name: str, values: Sequence[object]
    ) -> None:
        super().__init__(message)
        self.name = name
        self.values = tuple(values)


class AccessibilityError(HavenError, builtins.TypeError):
    def __init__(self, name: str, index: int) -> None:
        super().__init__(format_accessibility_error(name, index))
        self.name = name
        self.index = index


class CapabilityError(HavenError, builtins.TypeError):
    def __init__(self, shown_value: str, capability: str) -> None:
        super().__init__(format_capability_error(shown_value, capability))
        self.capability = capability


class TypeClassError(HavenError, builtins.TypeError):
    """A value bound to a type variable lacks a capability it requires."""

    def __init__(
        self, message: str, name: str, capability: str, value: object
    ) -> None:
        super().__init__(message)
        self.name = name
        self.capability = capability
        self.value = value


class RangeError(HavenError, builtins.ValueError):
    pass


class ConfigurationError(HavenError, builtins.ValueError):
    pass


_NUMBER_WORDS = (
    'zero',
    'one',
    'two',
    'three',
    'four',
    'five',
    'six',
    'seven',
    'eight',
    'nine',
    'ten',
)

_ORDINAL_WORDS = ('first', 'second', 'third')


def number_of(n: int, noun: str) -> str:
    """Spell out a count of things: 'one argument', 'three arguments'."""
    word = _NUMBER_WORDS[n] if n < len(_NUMBER_WORDS) else str(n)
    return f'{word} {noun}' if n == 1 else f'{word} {noun}s'


def ordinal(n: int) -> str:
    """Name a 1-based position: 'first', 'second', 'third', '4th', ..."""
    if 1 <= n <= len(_ORDINAL_WORDS):
        return _ORDINAL_WORDS[n - 1]
    if 10 <= n % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f'{n}{suffix}'


def quote(name: str) -> str:
    return f'‘{name}’'


def format_arity_error(name: str, required: int, received: int) -> str:
    return (
        f'{quote(name)} requires {number_of(required, "argument")}; '
        f'received {number_of(received, "argument")}'
    )


def format_accessibility_error(name: str, index: int) -> str:
    return (
        f'The {ordinal(index + 1)} argument to {quote(name)} '
        'cannot be None or undefined'
    )


def format_capability_error(shown_value: str, capability: str) -> str:
    return f'{shown_value} does not support {quote(capability)}'


def format_range_error(name: str, message: str) -> str:
    return f'{quote(name)}: {message}'


def format_invalid_value_error(
    signature_lines: Sequence[str],
    entries: Sequence[str],
    expected: str,
    url: Optional[str],
) -> str:
    closing = f'The value at position 1 is not a member of {quote(expected)}.'
    if url is not None:
        closing += (
            f'\n\nSee {url} for information about the {expected} type.'
        )
    return _format_report('Invalid value', signature_lines, entries, closing)


def format_type_variable_error(
    signature_lines: Sequence[str], entries: Sequence[str]
) -> str:
    return _format_report(
        'Type-variable constraint violation',
        signature_lines,
        entries,
        'Since there is no type of which all the above values are members, '
        'the type-variable constraint has been violated.',
    )


def format_type_class_error(
    signature_lines: Sequence[str],
    entries: Sequence[str],
    name: str,
    variable: str,
    capability: str,
) -> str:
    return _format_report(
        'Type-class constraint violation',
        signature_lines,
        entries,
        f'{quote(name)} requires {quote(variable)} to satisfy the '
        f'{capability} type-class constraint; the value at position 1 '
        'does not.',
    )


def format_entries(
    groups: Sequence[Sequence[tuple[str, Sequence[str]]]],
) -> list[str]:
    """Number groups of (shown value, type names) pairs.

    The first value of group k is written after 'k)  '; the rest of the
    group is indented to line up with it."""
    lines = []
    for number, group in enumerate(groups, start=1):
        label = f'{number})  '
        for i, (shown, names) in enumerate(group):
            prefix = label if i == 0 else ' ' * len(label)
            described = f'{shown} :: {", ".join(names)}' if names else shown
            lines.append(prefix + described)
    return lines


def _format_report(
    headline: str,
    signature_lines: Sequence[str],
    entries: Sequence[str],
    closing: str,
) -> str:
    return '\n'.join(
        [headline, '', *signature_lines, '', *entries, '', closing, '']
    )
