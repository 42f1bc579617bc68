from typing import Generic, Hashable, TypeVar

_KT = TypeVar("_KT", bound=Hashable)
_VT = TypeVar("_VT")


class Registry(dict, Generic[_KT, _VT]):
    """A dict filled by class decorators at import time and only read afterwards."""

    def __init__(self, name: str = ""):
        super().__init__()
        self.name: str = name

    def register(self, key: _KT | None = None, add_cls: bool = True):
        def decorator(cls):
            if add_cls:
                self[key if key is not None else cls.__name__] = cls
            return cls

        return decorator

    def lookup(self, key: _KT) -> _VT:
        try:
            return self[key]
        except KeyError:
            raise KeyError(f"{self.name or 'registry'} has no entry for {key!r}") from None
