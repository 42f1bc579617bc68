from .registry import Registry

CONVENTIONS = Registry(name="conventions")

__all__ = [
    "Registry",
    "CONVENTIONS",
]
