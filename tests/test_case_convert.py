import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from json_mirror.core.enumeration import CharClass
from json_mirror.core.utils import classify_char, split_words, strip_text


def test_classify_letters_and_digits():
    assert classify_char("A") is CharClass.UPPER
    assert classify_char("z") is CharClass.LOWER
    assert classify_char("7") is CharClass.DIGIT


def test_classify_separators():
    for char in ("_", " ", "\t", "\n"):
        assert classify_char(char) is CharClass.SEPARATOR


def test_classify_other():
    assert classify_char("-") is CharClass.OTHER
    assert classify_char("!") is CharClass.OTHER


def test_strip_text_keeps_ascii_word_characters():
    assert strip_text("Hello, World!") == "Hello World"
    assert strip_text("a-b_c d") == "ab_c d"
    assert strip_text("line\tbreak\n") == "linebreak"


def test_strip_text_drops_non_ascii_letters():
    assert strip_text("café") == "caf"


def test_strip_text_only_punctuation():
    assert strip_text("!?-.") == ""


def test_split_words():
    assert split_words("__open ai_llm  client_") == ["open", "ai", "llm", "client"]
    assert split_words("single") == ["single"]
    assert split_words("___") == []
