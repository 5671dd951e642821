from haven import (
    __,
    Array,
    Boolean,
    Integer,
    Just,
    Left,
    MaybeType,
    Nothing,
    NullaryType,
    Right,
    String,
    TypeVariable,
    create,
    env,
    undefined,
)
from haven import typeclasses
from haven.errors import (
    AccessibilityError,
    CapabilityError,
    HavenError,
    InvalidValueError,
    RangeError,
    TypeClassError,
    TypeVariableError,
    number_of,
    ordinal,
)
import unittest

S = create(check_types=True, env=env)

a = TypeVariable('a')

NUMBER_NAMES = 'Number, FiniteNumber, NonZeroFiniteNumber, ValidNumber'
INTEGER_NAMES = (
    'Number, FiniteNumber, NonZeroFiniteNumber, Integer, ValidNumber'
)


class TestWording(unittest.TestCase):
    def test_number_of(self) -> None:
        examples = {
            0: 'zero arguments',
            1: 'one argument',
            2: 'two arguments',
            10: 'ten arguments',
            11: '11 arguments',
            42: '42 arguments',
        }
        for n, expected in examples.items():
            with self.subTest(n=n):
                self.assertEqual(expected, number_of(n, 'argument'))

    def test_ordinal(self) -> None:
        examples = {
            1: 'first',
            2: 'second',
            3: 'third',
            4: '4th',
            11: '11th',
            12: '12th',
            13: '13th',
            21: '21st',
            22: '22nd',
            23: '23rd',
            101: '101st',
            111: '111th',
        }
        for n, expected in examples.items():
            with self.subTest(n=n):
                self.assertEqual(expected, ordinal(n))


class TestInvalidValueMessages(unittest.TestCase):
    def assertMessage(self, expected: str, f, *args) -> None:
        with self.assertRaises(InvalidValueError) as cm:
            f(*args)
        self.assertEqual(expected, str(cm.exception))

    def test_first_of_two(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'mult :: FiniteNumber -> FiniteNumber -> FiniteNumber\n'
            '        ^^^^^^^^^^^^\n'
            '             1\n'
            '\n'
            '1)  "xxx" :: String\n'
            '\n'
            'The value at position 1 is not a member of ‘FiniteNumber’.\n',
            S.mult,
            'xxx',
            2,
        )

    def test_second_of_two(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'mult :: FiniteNumber -> FiniteNumber -> FiniteNumber\n'
            '                        ^^^^^^^^^^^^\n'
            '                             1\n'
            '\n'
            '1)  -Infinity :: Number, ValidNumber\n'
            '\n'
            'The value at position 1 is not a member of ‘FiniteNumber’.\n',
            S.mult,
            2,
            float('-inf'),
        )

    def test_boolean_is_not_a_number(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'add :: FiniteNumber -> FiniteNumber -> FiniteNumber\n'
            '                       ^^^^^^^^^^^^\n'
            '                            1\n'
            '\n'
            '1)  True :: Boolean\n'
            '\n'
            'The value at position 1 is not a member of ‘FiniteNumber’.\n',
            S.add,
            2,
            True,
        )

    def test_infinity(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'inc :: FiniteNumber -> FiniteNumber\n'
            '       ^^^^^^^^^^^^\n'
            '            1\n'
            '\n'
            '1)  Infinity :: Number, ValidNumber\n'
            '\n'
            'The value at position 1 is not a member of ‘FiniteNumber’.\n',
            S.inc,
            float('inf'),
        )

    def test_not_an_integer(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'range :: Integer -> Integer -> Array Integer\n'
            '                    ^^^^^^^\n'
            '                       1\n'
            '\n'
            f'1)  0.5 :: {NUMBER_NAMES}\n'
            '\n'
            'The value at position 1 is not a member of ‘Integer’.\n',
            S.range,
            0,
            0.5,
        )

    def test_negative_fraction(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'odd :: Integer -> Boolean\n'
            '       ^^^^^^^\n'
            '          1\n'
            '\n'
            f'1)  -0.5 :: {NUMBER_NAMES}\n'
            '\n'
            'The value at position 1 is not a member of ‘Integer’.\n',
            S.odd,
            -0.5,
        )

    def test_string_expected(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'to_lower :: String -> String\n'
            '            ^^^^^^\n'
            '              1\n'
            '\n'
            '1)  True :: Boolean\n'
            '\n'
            'The value at position 1 is not a member of ‘String’.\n',
            S.to_lower,
            True,
        )

    def test_parameterised_type(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'keys :: StrMap a -> Array String\n'
            '        ^^^^^^^^\n'
            '           1\n'
            '\n'
            '1)  "xxx" :: String\n'
            '\n'
            'The value at position 1 is not a member of ‘StrMap a’.\n',
            S.keys,
            'xxx',
        )

    def test_array_of_numbers(self) -> None:
        names = ', '.join(
            f'Array {name}' for name in INTEGER_NAMES.split(', ')
        )
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'map_maybe :: Function -> Array a -> Array b\n'
            '             ^^^^^^^^\n'
            '                1\n'
            '\n'
            f'1)  [1, 2, 3] :: {names}\n'
            '\n'
            'The value at position 1 is not a member of ‘Function’.\n',
            S.map_maybe,
            [1, 2, 3],
        )

    def test_none(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'map_maybe :: Function -> Array a -> Array b\n'
            '                         ^^^^^^^\n'
            '                            1\n'
            '\n'
            '1)  None :: Null\n'
            '\n'
            'The value at position 1 is not a member of ‘Array a’.\n',
            S.map_maybe,
            S.head,
            None,
        )

    def test_second_function(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'encase_either :: Function -> Function -> a -> Either l r\n'
            '                             ^^^^^^^^\n'
            '                                1\n'
            '\n'
            '1)  None :: Null\n'
            '\n'
            'The value at position 1 is not a member of ‘Function’.\n',
            S.encase_either,
            S.I,
            None,
        )

    def test_nested_value(self) -> None:
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'parse_int :: Integer -> String -> Maybe Integer\n'
            '                                        ^^^^^^^\n'
            '                                           1\n'
            '\n'
            '1)  0.5 :: '
            'Number, FiniteNumber, NonZeroFiniteNumber, ValidNumber\n'
            '\n'
            'The value at position 1 is not a member of ‘Integer’.\n',
            S.define(
                'parse_int',
                [Integer, String],
                lambda radix, s: Just(0.5),
                returns=MaybeType(Integer),
            ),
            10,
            '0',
        )

    def test_url(self) -> None:
        Even = NullaryType(
            'Even',
            lambda x: isinstance(x, int) and x % 2 == 0,
            'https://example.com/Even',
        )
        self.assertMessage(
            'Invalid value\n'
            '\n'
            'half :: Even -> Integer\n'
            '        ^^^^\n'
            '         1\n'
            '\n'
            f'1)  3 :: {INTEGER_NAMES}\n'
            '\n'
            'The value at position 1 is not a member of ‘Even’.\n'
            '\n'
            'See https://example.com/Even for information about the Even '
            'type.\n',
            S.define('half', [Even], lambda x: x // 2, returns=Integer),
            3,
        )


class TestTypeVariableMessages(unittest.TestCase):
    def assertMessage(self, expected: str, f, *args) -> None:
        with self.assertRaises(TypeVariableError) as cm:
            f(*args)
        self.assertEqual(expected, str(cm.exception))

    def test_two_positions(self) -> None:
        self.assertMessage(
            'Type-variable constraint violation\n'
            '\n'
            'and_ :: to_boolean a => a -> a -> a\n'
            '                        ^    ^\n'
            '                        1    2\n'
            '\n'
            '1)  [] :: Array ???\n'
            '2)  False :: Boolean\n'
            '\n'
            'Since there is no type of which all the above values are '
            'members, the type-variable constraint has been violated.\n',
            S.and_,
            [],
            False,
        )

    def test_values_within_one_position(self) -> None:
        self.assertMessage(
            'Type-variable constraint violation\n'
            '\n'
            'keys :: StrMap a -> Array String\n'
            '               ^\n'
            '               1\n'
            '\n'
            '1)  "1" :: String\n'
            f'    2 :: {INTEGER_NAMES}\n'
            '    "3" :: String\n'
            '\n'
            'Since there is no type of which all the above values are '
            'members, the type-variable constraint has been violated.\n',
            S.keys,
            {'a': '1', 'b': 2, 'c': '3'},
        )

    def test_placeholder_order(self) -> None:
        # the earlier position is listed first, whichever was supplied first
        with self.assertRaises(TypeVariableError) as cm:
            S.and_(__, False)([])
        self.assertEqual(
            [
                '1)  [] :: Array ???',
                '2)  False :: Boolean',
            ],
            str(cm.exception).split('\n')[6:8],
        )

    def test_nested_and_top_level(self) -> None:
        self.assertMessage(
            'Type-variable constraint violation\n'
            '\n'
            'from_maybe :: a -> Maybe a -> a\n'
            '              ^          ^\n'
            '              1          2\n'
            '\n'
            '1)  0 :: Number, FiniteNumber, Integer, ValidNumber\n'
            '2)  "x" :: String\n'
            '\n'
            'Since there is no type of which all the above values are '
            'members, the type-variable constraint has been violated.\n',
            S.from_maybe,
            0,
            Just('x'),
        )

    def test_values_are_kept(self) -> None:
        with self.assertRaises(TypeVariableError) as cm:
            S.concat('a', ['b'])
        self.assertEqual(('a', ['b']), cm.exception.values)
        self.assertEqual('concat', cm.exception.name)

    def test_tagged_values_unify_by_identifier(self) -> None:
        self.assertEqual(Just(1), S.or_(Nothing, Just(1)))
        with self.assertRaises(TypeVariableError):
            S.or_(Nothing, Right(1))


class Thing:
    __type_identifier__ = 'example/Thing'


class TestTypeClassMessages(unittest.TestCase):
    def assertMessage(self, expected: str, f, *args) -> None:
        with self.assertRaises(TypeClassError) as cm:
            f(*args)
        self.assertEqual(expected, str(cm.exception))

    def test_first_argument(self) -> None:
        self.assertMessage(
            'Type-class constraint violation\n'
            '\n'
            'and_ :: to_boolean a => a -> a -> a\n'
            '        ^^^^^^^^^^^^    ^\n'
            '                        1\n'
            '\n'
            '1)  0 :: Number, FiniteNumber, Integer, ValidNumber\n'
            '\n'
            '‘and_’ requires ‘a’ to satisfy the to_boolean type-class '
            'constraint; the value at position 1 does not.\n',
            S.and_,
            0,
        )

    def test_second_argument(self) -> None:
        self.assertMessage(
            'Type-class constraint violation\n'
            '\n'
            'and_ :: to_boolean a => a -> a -> a\n'
            '        ^^^^^^^^^^^^         ^\n'
            '                             1\n'
            '\n'
            '1)  "x" :: String\n'
            '\n'
            '‘and_’ requires ‘a’ to satisfy the to_boolean type-class '
            'constraint; the value at position 1 does not.\n',
            S.and_(True),
            'x',
        )

    def test_rejected_before_the_implementation_runs(self) -> None:
        calls = []
        f = S.define(
            'both',
            [a, a],
            lambda x, y: calls.append((x, y)),
            requires={a: [typeclasses.to_boolean]},
        )
        with self.assertRaises(TypeClassError) as cm:
            f(0)
        self.assertEqual([], calls)
        self.assertEqual('both', cm.exception.name)
        self.assertEqual('to_boolean', cm.exception.capability)
        self.assertEqual(0, cm.exception.value)

    def test_one_of_several_requirements(self) -> None:
        with self.assertRaises(TypeClassError) as cm:
            S.xor(Left(1))
        self.assertEqual(
            [
                'xor :: (to_boolean a, empty a) => a -> a -> a',
                '                      ^^^^^^^     ^',
                '                                  1',
            ],
            str(cm.exception).split('\n')[2:5],
        )
        self.assertEqual('empty', cm.exception.capability)

    def test_nested_value(self) -> None:
        member = S.define(
            'member',
            [a, Array(a)],
            lambda x, xs: x in xs,
            returns=Boolean,
            requires={a: [typeclasses.equals]},
        )
        thing = Thing()
        with self.assertRaises(TypeClassError) as cm:
            member(1, [thing])
        self.assertEqual(
            [
                'member :: equals a => a -> Array a -> Boolean',
                '          ^^^^^^^^               ^',
                '                                 1',
            ],
            str(cm.exception).split('\n')[2:5],
        )
        self.assertIs(thing, cm.exception.value)

    def test_type_class_error_is_a_type_error(self) -> None:
        with self.assertRaises(TypeError):
            S.concat(1)

    def test_not_checked_when_checking_is_off(self) -> None:
        and_1 = create(check_types=False, env=env).and_(0)
        with self.assertRaises(CapabilityError) as cm:
            and_1(1)
        self.assertEqual(
            '0 does not support ‘to_boolean’', str(cm.exception)
        )


class TestOtherErrors(unittest.TestCase):
    def test_accessibility(self) -> None:
        for value in [None, undefined]:
            with self.subTest(value=value):
                with self.assertRaises(AccessibilityError) as cm:
                    S.get(int, 'x', value)
                self.assertEqual(
                    'The third argument to ‘get’ cannot be None or '
                    'undefined',
                    str(cm.exception),
                )
                self.assertEqual(2, cm.exception.index)

    def test_range(self) -> None:
        with self.assertRaises(RangeError) as cm:
            S.parse_int(37, '1')
        self.assertEqual(
            '‘parse_int’: Radix not in [2 .. 36]', str(cm.exception)
        )
        self.assertIsInstance(cm.exception, ValueError)

    def test_all_errors_share_a_base(self) -> None:
        for f, args in [
            (S.inc, ('x',)),
            (S.and_, ([], False)),
            (S.K, (1, 2, 3)),
            (S.parse_int, (1, '1')),
        ]:
            with self.subTest(f=f):
                with self.assertRaises(HavenError):
                    f(*args)
