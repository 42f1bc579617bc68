"""Character classification and word segmentation for naming conventions."""

import re
from typing import List

from ..enumeration import CharClass

# Everything outside this class is stripped before word-based conversion.
_STRIP_PATTERN = re.compile(r"[^a-zA-Z0-9_ ]")
_SEPARATORS = frozenset("_ \t\n")
_SPLIT_PATTERN = re.compile(r"[_ \t\n]+")


def classify_char(char: str) -> CharClass:
    """Classify a single character.

    Args:
        char: A string of length one.

    Returns:
        The CharClass of the character. Separators win over everything else,
        so `_` is a separator rather than OTHER.

    Examples:
        >>> classify_char("A")
        <CharClass.UPPER: 'upper'>
        >>> classify_char("_")
        <CharClass.SEPARATOR: 'separator'>
    """
    if char in _SEPARATORS:
        return CharClass.SEPARATOR
    if char.isupper():
        return CharClass.UPPER
    if char.islower():
        return CharClass.LOWER
    if char.isdigit():
        return CharClass.DIGIT
    return CharClass.OTHER


def strip_text(content: str) -> str:
    """Remove every character outside `[A-Za-z0-9_ ]` in a single pass."""
    return _STRIP_PATTERN.sub("", content)


def split_words(content: str) -> List[str]:
    """Split on underscores and whitespace, dropping empty fragments.

    Examples:
        >>> split_words("__open ai_llm  client_")
        ['open', 'ai', 'llm', 'client']
    """
    return [word for word in _SPLIT_PATTERN.split(content) if word]
