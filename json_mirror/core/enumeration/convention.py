"""Capitalization conventions supported by the convention engine."""

from enum import Enum


class Convention(str, Enum):
    """Target casing rule for identifier-like text."""
    NONE = "none"
    CAMEL = "camel"
    LOWER = "lower"
    PASCAL = "pascal"
    SNAKE = "snake"
    TITLE = "title"
    UPPER = "upper"
