import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from json_mirror.core.context import CONVENTIONS
from json_mirror.core.convention import (
    CamelConvention,
    convert,
    get_convention,
    to_camel,
    to_lower,
    to_pascal,
    to_snake,
    to_title,
    to_upper,
)
from json_mirror.core.enumeration import Convention
from json_mirror.core.errors import EmptyResult, InvalidInput
from json_mirror.core.schema import Culture

INVARIANT = Culture.invariant()
TURKISH = Culture(name="tr-TR")


def test_every_convention_is_registered():
    assert set(CONVENTIONS) == set(Convention)


def test_reference_identifier():
    value = "NullableDateValueId"
    assert convert(value, Convention.CAMEL, INVARIANT) == "nullableDateValueId"
    assert convert(value, Convention.SNAKE, INVARIANT) == "nullable_date_value_id"
    assert convert(value, Convention.UPPER, INVARIANT) == "NULLABLEDATEVALUEID"
    assert convert(value, Convention.LOWER, INVARIANT) == "nullabledatevalueid"
    assert convert(value, Convention.TITLE, INVARIANT) == "Nullabledatevalueid"
    assert convert(value, Convention.NONE, INVARIANT) == value


def test_pascal_only_lowercases_first_character():
    # legacy behaviour, not TheQuickBrownFox style
    assert convert("NullableDateValueId", Convention.PASCAL, INVARIANT) == "nullableDateValueId"
    assert convert("Hello World", Convention.PASCAL, INVARIANT) == "hello World"
    assert convert("hello", Convention.PASCAL, INVARIANT) == "hello"
    assert convert("2Fast", Convention.PASCAL, INVARIANT) == "2Fast"


def test_none_value_raises():
    for convention in Convention:
        with pytest.raises(InvalidInput):
            convert(None, convention, INVARIANT)


def test_empty_value():
    for convention in Convention:
        assert convert("", convention, INVARIANT) == ""
        with pytest.raises(EmptyResult):
            convert("", convention, INVARIANT, strict=True)


def test_only_punctuation():
    assert convert("!!!", Convention.CAMEL, INVARIANT) == ""
    assert convert("!!!", Convention.SNAKE, INVARIANT) == ""
    assert convert("!!!", Convention.LOWER, INVARIANT) == "!!!"
    with pytest.raises(EmptyResult):
        convert("!!!", Convention.PASCAL, INVARIANT, strict=True)
    with pytest.raises(EmptyResult):
        convert("___", Convention.CAMEL, INVARIANT, strict=True)


def test_single_character():
    assert convert("A", Convention.CAMEL, INVARIANT) == "a"
    assert convert("A", Convention.SNAKE, INVARIANT) == "a"
    assert convert("B", Convention.PASCAL, INVARIANT) == "b"
    assert convert("a", Convention.TITLE, INVARIANT) == "A"
    assert convert("-A-", Convention.CAMEL, INVARIANT) == "a"


def test_camel_words():
    assert convert("Foo Bar", Convention.CAMEL, INVARIANT) == "fooBar"
    assert convert("foo bar", Convention.CAMEL, INVARIANT) == "foobar"
    assert convert("version 2 beta", Convention.CAMEL, INVARIANT) == "version2beta"
    assert convert("2Fast", Convention.CAMEL, INVARIANT) == "2Fast"


def test_camel_keeps_acronym_case():
    assert convert("HTTPServer", Convention.CAMEL, INVARIANT) == "hTTPServer"


def test_snake_words():
    assert convert("fooBarBaz", Convention.SNAKE, INVARIANT) == "foo_bar_baz"
    assert convert("Hello, World!", Convention.SNAKE, INVARIANT) == "hello_world"
    assert convert("__a__B__", Convention.SNAKE, INVARIANT) == "a_b"
    assert convert("version2Beta", Convention.SNAKE, INVARIANT) == "version2_beta"


def test_snake_collapses_acronyms():
    assert convert("HTTPServer", Convention.SNAKE, INVARIANT) == "httpserver"


def test_title():
    assert convert("hello big_world", Convention.TITLE, INVARIANT) == "Hello Big_world"
    assert convert("HELLO WORLD!", Convention.TITLE, INVARIANT) == "Hello World"


def test_title_skips_leading_digits():
    assert convert("2nd value", Convention.TITLE, INVARIANT) == "2Nd Value"
    assert convert("3RD 42", Convention.TITLE, INVARIANT) == "3Rd 42"
    assert Culture.invariant().title("_foo bar") == "_Foo Bar"


def test_lower_and_upper_keep_punctuation():
    assert convert("Hello, World!", Convention.LOWER, INVARIANT) == "hello, world!"
    assert convert("Hello, World!", Convention.UPPER, INVARIANT) == "HELLO, WORLD!"


def test_turkish_culture():
    assert convert("istanbul", Convention.UPPER, TURKISH) == "İSTANBUL"
    assert convert("ISTANBUL", Convention.LOWER, TURKISH) == "ıstanbul"
    assert convert("istanbul", Convention.UPPER, INVARIANT) == "ISTANBUL"
    assert convert("Id", Convention.CAMEL, TURKISH) == "ıd"


def test_idempotent_conventions():
    for value in ("NullableDateValueId", "Hello, World!", "some_snake value"):
        for convention in (Convention.LOWER, Convention.UPPER, Convention.TITLE):
            once = convert(value, convention, INVARIANT)
            assert convert(once, convention, INVARIANT) == once


def test_canonical_forms_are_stable():
    assert convert("nullableDateValueId", Convention.CAMEL, INVARIANT) == "nullableDateValueId"
    assert convert("nullable_date_value_id", Convention.SNAKE, INVARIANT) == "nullable_date_value_id"


def test_pascal_and_camel_differ_only_in_first_character():
    for value in ("NullableDateValueId", "HTTPServer", "xY", "abc", "A1b2", "URL", "someValue"):
        camel = convert(value, Convention.CAMEL, INVARIANT)
        pascal = convert(value, Convention.PASCAL, INVARIANT)
        assert camel[0].islower()
        assert camel[1:] == pascal[1:]
        assert camel[0] == pascal[0].lower()


def test_convention_by_name():
    assert convert("FooBar", "snake", INVARIANT) == "foo_bar"
    with pytest.raises(ValueError):
        convert("FooBar", "kebab", INVARIANT)


def test_get_convention():
    assert isinstance(get_convention(Convention.CAMEL), CamelConvention)


def test_shortcuts():
    assert to_camel("Foo Bar", INVARIANT) == "fooBar"
    assert to_lower("Foo", INVARIANT) == "foo"
    assert to_pascal("FooBar", INVARIANT) == "fooBar"
    assert to_snake("FooBar", INVARIANT) == "foo_bar"
    assert to_title("foo bar", INVARIANT) == "Foo Bar"
    assert to_upper("foo", INVARIANT) == "FOO"
