from .case_convert import classify_char, split_words, strip_text

__all__ = [
    "classify_char",
    "split_words",
    "strip_text",
]
