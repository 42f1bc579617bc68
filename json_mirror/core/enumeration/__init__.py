"""Enumeration module for json_mirror."""

from .char_class import CharClass
from .convention import Convention
from .formatting import DateFormatHandling, Formatting
from .null_handling import NullHandling

__all__ = [
    "CharClass",
    "Convention",
    "DateFormatHandling",
    "Formatting",
    "NullHandling",
]
