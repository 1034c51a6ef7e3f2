import typing


class ObjectDict(dict):
    # ObjectDict is a read-only dict whose keys are also reachable as attributes. Nested dicts are wrapped on access.

    def __getattr__(self, name: str) -> typing.Any:
        try:
            value = self[name]
            if type(value) == dict:
                value = ObjectDict(value)
                dict.__setitem__(self, name, value)
            return value
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise TypeError(f'{name} is read-only')

    def __setitem__(self, name: str, value: typing.Any) -> None:
        raise TypeError(f'{name} is read-only')

    def __delitem__(self, name: str) -> None:
        raise TypeError(f'{name} is read-only')

    def _readonly(self, *args: typing.Any, **kwargs: typing.Any) -> typing.NoReturn:
        raise TypeError('object dict is read-only')

    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly
    __ior__ = _readonly
