import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from json_mirror.core.emitter import should_emit
from json_mirror.core.enumeration import NullHandling
from json_mirror.core.schema import PropertyMetadata, SerializerSettings

INCLUDE_NULLS = SerializerSettings(default_null_handling=NullHandling.INCLUDE)
IGNORE_NULLS = SerializerSettings(default_null_handling=NullHandling.IGNORE)


def _meta(**kwargs) -> PropertyMetadata:
    return PropertyMetadata(name="Value", **kwargs)


def test_ignored_always_wins():
    metadata = _meta(ignored=True, required=True, null_handling=NullHandling.INCLUDE)
    assert should_emit(metadata, "x", INCLUDE_NULLS) is False
    assert should_emit(metadata, None, INCLUDE_NULLS) is False


def test_required_beats_ignore_on_null():
    metadata = _meta(required=True, null_handling=NullHandling.IGNORE)
    assert should_emit(metadata, None, IGNORE_NULLS) is True


def test_property_include_beats_settings():
    metadata = _meta(null_handling=NullHandling.INCLUDE)
    assert should_emit(metadata, None, IGNORE_NULLS) is True


def test_property_ignore_drops_nulls_only():
    metadata = _meta(null_handling=NullHandling.IGNORE)
    assert should_emit(metadata, None, INCLUDE_NULLS) is False
    assert should_emit(metadata, 0, INCLUDE_NULLS) is True


def test_default_falls_through_to_settings():
    metadata = _meta()
    assert should_emit(metadata, None, INCLUDE_NULLS) is True
    assert should_emit(metadata, None, IGNORE_NULLS) is False
    assert should_emit(metadata, "", IGNORE_NULLS) is True


def test_default_settings_include_nulls():
    assert should_emit(_meta(), None) is True
