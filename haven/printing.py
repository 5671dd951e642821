"""Printed representations of values, as they appear in error messages."""

from __future__ import annotations

import collections.abc
import json
import math

from haven.classify import Kind, classify


def show(value: object) -> str:
    kind = classify(value)
    if kind is Kind.NULL:
        return 'None'
    if kind is Kind.UNDEFINED:
        return 'undefined'
    if kind is Kind.BOOLEAN:
        return 'True' if value else 'False'
    if kind is Kind.NUMBER:
        return _show_number(value)
    if kind is Kind.STRING:
        return _show_string(str(value))
    if kind is Kind.ARRAY:
        items = ', '.join(map(show, value))  # type: ignore
        if isinstance(value, tuple):
            return f'({items},)' if len(value) == 1 else f'({items})'
        return f'[{items}]'
    if kind is Kind.OBJECT and isinstance(value, collections.abc.Mapping):
        pairs = ', '.join(
            f'{_show_key(k)}: {show(v)}' for k, v in value.items()
        )
        return f'{{{pairs}}}'
    if kind is Kind.FUNCTION:
        return getattr(value, '__qualname__', None) or getattr(
            value, '__name__', repr(value)
        )
    if kind is Kind.REGEXP:
        return f're.compile({_show_string(value.pattern)})'  # type: ignore
    return repr(value)


def _show_number(n) -> str:
    if not isinstance(n, int):
        f = float(n)
        if math.isnan(f):
            return 'NaN'
        if math.isinf(f):
            return 'Infinity' if f > 0 else '-Infinity'
    return repr(n)


def _show_string(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def _show_key(key: object) -> str:
    if isinstance(key, str):
        return _show_string(key)
    return show(key)
