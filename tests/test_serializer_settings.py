import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).parent.parent))

from json_mirror.core.enumeration import DateFormatHandling, Formatting, NullHandling
from json_mirror.core.schema import Culture, SerializerSettings


def test_defaults():
    settings = SerializerSettings()
    assert settings.default_null_handling is NullHandling.INCLUDE
    assert settings.formatting is Formatting.COMPACT
    assert settings.date_format_handling is DateFormatHandling.EPOCH
    assert settings.date_format_string is None
    assert settings.escape_strings is False
    assert settings.is_indented is False


def test_values_by_name():
    settings = SerializerSettings(formatting="indented", default_null_handling="ignore", date_format_handling="iso")
    assert settings.is_indented is True
    assert settings.default_null_handling is NullHandling.IGNORE
    assert settings.date_format_handling is DateFormatHandling.ISO


def test_default_null_handling_is_normalised():
    assert SerializerSettings(default_null_handling="default").default_null_handling is NullHandling.INCLUDE


def test_culture_from_name():
    assert SerializerSettings(culture="tr-TR").culture == Culture(name="tr-TR")
    assert SerializerSettings(culture="az").culture.is_turkic
    assert SerializerSettings(culture=None).culture == Culture.current()


def test_unknown_values_are_rejected():
    with pytest.raises(ValidationError):
        SerializerSettings(formatting="pretty")
