from enum import Enum


class Formatting(str, Enum):
    COMPACT = "compact"
    INDENTED = "indented"


class DateFormatHandling(str, Enum):
    """How datetime values are rendered when no explicit pattern is set."""
    EPOCH = "epoch"
    ISO = "iso"
    MICROSOFT_LONG = "microsoft_long"
