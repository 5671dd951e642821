"""Rendering of function signatures with markers under parts of them.

    add :: FiniteNumber -> FiniteNumber -> FiniteNumber
                           ^^^^^^^^^^^^
                                1
"""

from __future__ import annotations

import functools
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from haven.typeclasses import Capability
from haven.types import Path, Type, TypeVariable

type Requirements = Mapping[TypeVariable, Sequence[Capability]]


class Signature:
    """The name and types of a curried function.

    Paths into a signature start with the index of a parameter (the return
    type comes after the last parameter) followed by a path into that
    parameter's type.

    requires maps type variables to the capabilities every value bound to
    them must support. They are written before the types:

        and_ :: to_boolean a => a -> a -> a
    """

    def __init__(
        self,
        name: str,
        parameters: Sequence[Type],
        returns: Type,
        requires: Optional[Requirements] = None,
    ) -> None:
        self.name = name
        self.parameters = tuple(parameters)
        self.returns = returns
        self.requires: Dict[TypeVariable, Tuple[Capability, ...]] = {
            variable: tuple(capabilities)
            for variable, capabilities in (requires or {}).items()
            if capabilities
        }

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def types(self) -> Tuple[Type, ...]:
        return (*self.parameters, self.returns)

    @functools.cached_property
    def _layout(
        self,
    ) -> Tuple[
        str,
        Dict[Path, Tuple[int, int]],
        Dict[Tuple[TypeVariable, Capability], Tuple[int, int]],
    ]:
        text = f'{self.name} :: '
        requirement_spans = {}
        requirements = [
            (variable, capability)
            for variable, capabilities in self.requires.items()
            for capability in capabilities
        ]
        if len(requirements) > 1:
            text += '('
        for i, (variable, capability) in enumerate(requirements):
            if i > 0:
                text += ', '
            written = f'{capability.name} {variable}'
            requirement_spans[variable, capability] = (
                len(text),
                len(text) + len(written),
            )
            text += written
        if len(requirements) > 1:
            text += ')'
        if requirements:
            text += ' => '
        if not self.parameters:
            text += '() -> '
        spans: Dict[Path, Tuple[int, int]] = {}
        for i, t in enumerate(self.types):
            if i > 0:
                text += ' -> '
            offset = len(text)
            layout = t.layout()
            for path, (start, end) in layout.spans.items():
                spans[(i, *path)] = (start + offset, end + offset)
            text += layout.text
        return text, spans, requirement_spans

    def render(self) -> str:
        return self._layout[0]

    def span(self, path: Path) -> Tuple[int, int]:
        return self._layout[1][path]

    def requirement_span(
        self, variable: TypeVariable, capability: Capability
    ) -> Tuple[int, int]:
        return self._layout[2][variable, capability]

    def render_with_markers(
        self,
        paths: Sequence[Path],
        underlined: Sequence[Tuple[int, int]] = (),
    ) -> List[str]:
        """Render the signature, underlining the parts of it at paths.

        The parts are numbered from 1 in the order of paths, each number
        centred under its run of carets. The spans in underlined get carets
        but no number."""
        carets: List[str] = []
        labels: List[str] = []
        for start, end in underlined:
            _write_at(carets, start, '^' * (end - start))
        for number, path in enumerate(paths, start=1):
            start, end = self.span(path)
            _write_at(carets, start, '^' * (end - start))
            _write_at(labels, start + (end - start - 1) // 2, str(number))
        return [self.render(), ''.join(carets), ''.join(labels)]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f'Signature({self.render()!r})'


def _write_at(line: List[str], column: int, text: str) -> None:
    if len(line) < column + len(text):
        line.extend(' ' * (column + len(text) - len(line)))
    line[column : column + len(text)] = text
