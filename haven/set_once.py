class SetOnce[T]:
    """An attribute that can be assigned once and then only read.

    Module options are stored this way, so a module's configuration can't
    drift after the functions bound to it have been defined."""

    def __set_name__(self, owner, name: str) -> None:
        self._name = name
        self._storage_name = f'_SetOnce_{self._name}'

    def __get__(self, instance, owner=None) -> T:
        if instance is None:
            return self  # type: ignore
        try:
            return getattr(instance, self._storage_name)
        except AttributeError:
            raise AttributeError(
                f'Attribute "{self._name}" has not been set'
            ) from None

    def __set__(self, instance, value: T) -> None:
        if hasattr(instance, self._storage_name):
            raise AttributeError(
                f'Attribute "{self._name}" cannot be set more than once'
            )
        setattr(instance, self._storage_name, value)
