"""Naming convention convertors.

Importing this package registers every convertor in `CONVENTIONS`.
"""

from .base_convention import BaseConvention, StrippedConvention
from .word_convention import WordConvention
from .camel_convention import CamelConvention
from .lower_convention import LowerConvention
from .none_convention import NoneConvention
from .pascal_convention import PascalConvention
from .snake_convention import SnakeConvention
from .title_convention import TitleConvention
from .upper_convention import UpperConvention
from .convention_dispatcher import (
    convert,
    get_convention,
    to_camel,
    to_lower,
    to_pascal,
    to_snake,
    to_title,
    to_upper,
)

__all__ = [
    "BaseConvention",
    "StrippedConvention",
    "WordConvention",
    "CamelConvention",
    "LowerConvention",
    "NoneConvention",
    "PascalConvention",
    "SnakeConvention",
    "TitleConvention",
    "UpperConvention",
    "convert",
    "get_convention",
    "to_camel",
    "to_lower",
    "to_pascal",
    "to_snake",
    "to_title",
    "to_upper",
]
