from enum import Enum


class NullHandling(str, Enum):
    """Policy deciding whether a property holding None is emitted."""
    DEFAULT = "default"
    INCLUDE = "include"
    IGNORE = "ignore"
