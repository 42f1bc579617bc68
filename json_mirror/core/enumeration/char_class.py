from enum import Enum


class CharClass(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SEPARATOR = "separator"
    OTHER = "other"
