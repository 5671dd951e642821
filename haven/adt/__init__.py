"""Tagged unions that the classifier recognises by their type identifiers."""

from haven.adt.either import EITHER_TYPE_IDENTIFIER, Either, Left, Right
from haven.adt.maybe import MAYBE_TYPE_IDENTIFIER, Just, Maybe, Nothing

__all__ = [
    'EITHER_TYPE_IDENTIFIER',
    'Either',
    'Left',
    'Right',
    'MAYBE_TYPE_IDENTIFIER',
    'Just',
    'Maybe',
    'Nothing',
]
