class Placeholder:
    """Stands for an argument that will be supplied later.

    f(__, y) leaves the first parameter of f unfilled and fills the second.
    Other placeholder objects are recognised too, as long as they have a
    __placeholder__ attribute set to True. A class with that attribute is an
    ordinary value."""

    __placeholder__ = True
    _instance = None

    def __new__(cls) -> 'Placeholder':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '__'

    def __reduce__(self) -> str:
        return '__'


__ = Placeholder()


def is_placeholder(value: object) -> bool:
    if value is __:
        return True
    # classes that declare the attribute are values, not placeholders
    return (
        not isinstance(value, type)
        and getattr(value, '__placeholder__', False) is True
    )
