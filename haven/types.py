"""Types that parameters of curried functions are checked against.

A type answers two questions about a value: is the value a member (and if
not, which part of the type rejected which part of the value), and which
values does the value bind to the type variables that appear in the type.
The second question is answered even for members, since unification across
parameters happens in haven.validate.
"""

from __future__ import annotations

import abc
import collections.abc
import itertools
import math
import numbers
from typing import (
    Callable,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
)

from haven.classify import (
    Kind,
    classify,
    is_nullish,
    observed_type,
    type_identifier,
)
from haven.adt.either import EITHER_TYPE_IDENTIFIER
from haven.adt.maybe import MAYBE_TYPE_IDENTIFIER

type Path = Tuple[int, ...]


class Failure(NamedTuple):
    """Where in a type a value was rejected.

    path indexes type parameters from the outermost type inwards; value is
    the (possibly nested) value that was rejected by type."""

    path: Path
    value: object
    type: 'Type'


class Binding(NamedTuple):
    variable: 'TypeVariable'
    path: Path
    value: object


class Layout(NamedTuple):
    text: str
    spans: dict[Path, tuple[int, int]]


class Type(abc.ABC):
    @abc.abstractmethod
    def test(self, value: object) -> bool:
        """Test the outermost structure of value, ignoring type parameters."""

    @property
    def parameters(self) -> Sequence[Type]:
        return ()

    def extract(self, value: object) -> Sequence[Iterable[object]]:
        """Return, for each type parameter, the values found for it."""
        return ()

    @abc.abstractmethod
    def to_user_string(self) -> str:
        pass

    def find_failure(self, value: object) -> Optional[Failure]:
        if not self.test(value):
            return Failure((), value, self)
        for i, (param, inner_values) in enumerate(
            zip(self.parameters, self.extract(value))
        ):
            for inner in inner_values:
                failure = param.find_failure(inner)
                if failure is not None:
                    return failure._replace(path=(i, *failure.path))
        return None

    def is_member(self, value: object) -> bool:
        return self.find_failure(value) is None

    def bindings(self, value: object) -> Iterator[Binding]:
        for i, (param, inner_values) in enumerate(
            zip(self.parameters, self.extract(value))
        ):
            for inner in inner_values:
                for binding in param.bindings(inner):
                    yield binding._replace(path=(i, *binding.path))

    def layout(self) -> Layout:
        text = self.to_user_string()
        return Layout(text, {(): (0, len(text))})

    def needs_parentheses(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.to_user_string()

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.to_user_string()}>'


class NullaryType(Type):
    def __init__(
        self,
        name: str,
        test: Callable[[object], bool],
        url: Optional[str] = None,
    ) -> None:
        self.name = name
        self.url = url
        self._test = test

    def test(self, value: object) -> bool:
        return self._test(value)

    def to_user_string(self) -> str:
        return self.name


class _PseudoType(Type):
    url: Optional[str] = None

    def __init__(self, name: str) -> None:
        self.name = name

    def to_user_string(self) -> str:
        return self.name


class AnyType(_PseudoType):
    def test(self, value: object) -> bool:
        return True


class AccessibleType(_PseudoType):
    """Values that support property access: everything but the nullish."""

    def test(self, value: object) -> bool:
        return not is_nullish(value)


class TypeRepType(Type):
    """Type representatives: classes, other callables and Haven types."""

    url: Optional[str] = None

    def __init__(self, param: Optional[Type] = None) -> None:
        self._param = param

    def __call__(self, param: Type) -> TypeRepType:
        return TypeRepType(param)

    def test(self, value: object) -> bool:
        return is_type_representative(value)

    def to_user_string(self) -> str:
        if self._param is None:
            return 'TypeRep'
        return f'TypeRep {_wrap(self._param)}'

    def needs_parentheses(self) -> bool:
        return self._param is not None


class TypeVariable(Type):
    """A type variable.

    Every type variable object is unique: two variables are the same only
    if they are the same object, whatever their names."""

    url: Optional[str] = None

    def __init__(self, name: str) -> None:
        self.name = name

    def test(self, value: object) -> bool:
        return True

    def bindings(self, value: object) -> Iterator[Binding]:
        yield Binding(self, (), value)

    def to_user_string(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(id(self))


class AppliedType(Type):
    """A type constructor applied to its parameter types."""

    def __init__(
        self, constructor: _TypeConstructor, params: Sequence[Type]
    ) -> None:
        self.constructor = constructor
        self._params = tuple(params)

    @property
    def name(self) -> str:
        return self.constructor.name

    @property
    def url(self) -> Optional[str]:
        return self.constructor.url

    @property
    def parameters(self) -> Sequence[Type]:
        return self._params

    def test(self, value: object) -> bool:
        return self.constructor.test(value)

    def extract(self, value: object) -> Sequence[Iterable[object]]:
        return [f(value) for f in self.constructor.extractors]

    def to_user_string(self) -> str:
        return self.layout().text

    def layout(self) -> Layout:
        text = self.name
        spans: dict[Path, tuple[int, int]] = {}
        for i, param in enumerate(self._params):
            inner = param.layout()
            wrap = param.needs_parentheses()
            text += ' (' if wrap else ' '
            offset = len(text)
            for path, (start, end) in inner.spans.items():
                spans[(i, *path)] = (start + offset, end + offset)
            text += inner.text + (')' if wrap else '')
        spans[()] = (0, len(text))
        return Layout(text, spans)

    def needs_parentheses(self) -> bool:
        return bool(self._params)


class _TypeConstructor:
    def __init__(
        self,
        name: str,
        test: Callable[[object], bool],
        extractors: Sequence[Callable[[object], Iterable[object]]],
        url: Optional[str] = None,
    ) -> None:
        self.name = name
        self.test = test
        self.extractors = tuple(extractors)
        self.url = url

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.name}>'


class UnaryType(_TypeConstructor):
    """A type constructor of one parameter, such as Array."""

    def __init__(
        self,
        name: str,
        test: Callable[[object], bool],
        extract: Callable[[object], Iterable[object]],
        url: Optional[str] = None,
    ) -> None:
        super().__init__(name, test, [extract], url)

    def __call__(self, param: Type) -> AppliedType:
        return AppliedType(self, [param])


class BinaryType(_TypeConstructor):
    """A type constructor of two parameters, such as Either."""

    def __init__(
        self,
        name: str,
        test: Callable[[object], bool],
        extract_first: Callable[[object], Iterable[object]],
        extract_second: Callable[[object], Iterable[object]],
        url: Optional[str] = None,
    ) -> None:
        super().__init__(name, test, [extract_first, extract_second], url)

    def __call__(self, first: Type, second: Type) -> AppliedType:
        return AppliedType(self, [first, second])


def _wrap(t: Type) -> str:
    if t.needs_parentheses():
        return f'({t.to_user_string()})'
    return t.to_user_string()


def is_type_representative(value: object) -> bool:
    return isinstance(value, (Type, _TypeConstructor)) or callable(value)


def _kind_is(kind: Kind) -> Callable[[object], bool]:
    return lambda value: classify(value) is kind


def _is_valid(value: object) -> bool:
    if classify(value) is not Kind.NUMBER:
        return False
    if isinstance(value, numbers.Integral):
        return True
    return not math.isnan(value)  # type: ignore


def _is_finite(value: object) -> bool:
    if classify(value) is not Kind.NUMBER:
        return False
    # ints can be too big to convert to float, but they're always finite
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)  # type: ignore


def _is_integer(value: object) -> bool:
    if not _is_finite(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return value == math.floor(value)  # type: ignore


def _is_str_map(value: object) -> bool:
    return (
        classify(value) is Kind.OBJECT
        and isinstance(value, collections.abc.Mapping)
        and all(isinstance(key, str) for key in value)
    )


Any = AnyType('Any')
Unknown = AnyType('???')
Accessible = AccessibleType('Accessible')
TypeRep = TypeRepType()

Null = NullaryType('Null', _kind_is(Kind.NULL))
Undefined = NullaryType('Undefined', _kind_is(Kind.UNDEFINED))
Boolean = NullaryType('Boolean', _kind_is(Kind.BOOLEAN))
Number = NullaryType('Number', _kind_is(Kind.NUMBER))
String = NullaryType('String', _kind_is(Kind.STRING))
Function = NullaryType('Function', _kind_is(Kind.FUNCTION))
Object = NullaryType('Object', _kind_is(Kind.OBJECT))
Date = NullaryType('Date', _kind_is(Kind.DATE))
RegExp = NullaryType('RegExp', _kind_is(Kind.REGEXP))
Error = NullaryType('Error', _kind_is(Kind.ERROR))

ValidNumber = NullaryType('ValidNumber', _is_valid)
FiniteNumber = NullaryType('FiniteNumber', _is_finite)
NonZeroFiniteNumber = NullaryType(
    'NonZeroFiniteNumber', lambda x: _is_finite(x) and x != 0
)
Integer = NullaryType('Integer', _is_integer)
NonNegativeInteger = NullaryType(
    'NonNegativeInteger', lambda x: _is_integer(x) and x >= 0  # type: ignore
)

Array = UnaryType('Array', _kind_is(Kind.ARRAY), lambda xs: xs)  # type: ignore
StrMap = UnaryType(
    'StrMap',
    _is_str_map,
    lambda m: m.values(),  # type: ignore
)
MaybeType = UnaryType(
    'Maybe',
    lambda x: type_identifier(x) == MAYBE_TYPE_IDENTIFIER,
    lambda m: [m.value] if m.is_just else [],  # type: ignore
)
EitherType = BinaryType(
    'Either',
    lambda x: type_identifier(x) == EITHER_TYPE_IDENTIFIER,
    lambda e: [] if e.is_right else [e.value],  # type: ignore
    lambda e: [e.value] if e.is_right else [],  # type: ignore
)

# The order matters: it's the order in which a value's types are listed in
# error messages.
env: Tuple[Type, ...] = (
    Function,
    Array(Unknown),
    Boolean,
    Date,
    Error,
    Null,
    Number,
    Object,
    RegExp,
    StrMap(Unknown),
    String,
    Undefined,
    FiniteNumber,
    NonZeroFiniteNumber,
    EitherType(Unknown, Unknown),
    Integer,
    MaybeType(Unknown),
    ValidNumber,
)


def is_(type_rep: object, value: object) -> bool:
    """Whether value is a member of the type that type_rep stands for.

    type_rep can be a Haven type, a class that declares a type identifier
    (compared by identifier, so copies of the class from elsewhere still
    match), or any other class."""
    if isinstance(type_rep, Type):
        return type_rep.is_member(value)
    if isinstance(type_rep, _TypeConstructor):
        return type_rep.test(value)
    identifier = getattr(type_rep, '__type_identifier__', None)
    if isinstance(identifier, str):
        return type_identifier(value) == identifier
    if isinstance(type_rep, type):
        if isinstance(value, bool) and not issubclass(type_rep, bool):
            return type_rep is object
        return isinstance(value, type_rep)
    return False


def type_names(environment: Sequence[Type], value: object) -> List[str]:
    """Name every type in the environment that value is a member of."""
    names: List[str] = []
    for t in environment:
        if isinstance(t, AppliedType):
            if not t.test(value):
                continue
            per_param = [
                _common_names(environment, list(inner))
                for inner in t.extract(value)
            ]
            for combination in itertools.product(*per_param):
                names.append(
                    ' '.join([t.name, *map(_wrap_name, combination)])
                )
        elif t.is_member(value):
            names.append(t.to_user_string())
    return names


def _common_names(
    environment: Sequence[Type], values: Sequence[object]
) -> List[str]:
    if not values:
        return ['???']
    common = type_names(environment, values[0])
    for value in values[1:]:
        if not common:
            break
        if observed_type(value) != observed_type(values[0]):
            return ['???']
        others = set(type_names(environment, value))
        common = [name for name in common if name in others]
    return common or ['???']


def _wrap_name(name: str) -> str:
    return f'({name})' if ' ' in name else name
