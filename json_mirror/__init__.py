"""Naming convention conversion and reference JSON serializer mirroring."""

__version__ = "0.1.0"

from .core.convention import convert, to_camel, to_lower, to_pascal, to_snake, to_title, to_upper
from .core.emitter import emit, emit_properties, format_value, read_properties, should_emit, verify
from .core.enumeration import Convention, DateFormatHandling, Formatting, NullHandling
from .core.errors import EmptyResult, InvalidInput, JsonMirrorError
from .core.schema import (
    Culture,
    JsonIgnore,
    JsonProperty,
    JsonRequired,
    PropertyEntry,
    PropertyMetadata,
    SerializerSettings,
)

__all__ = [
    "convert",
    "to_camel",
    "to_lower",
    "to_pascal",
    "to_snake",
    "to_title",
    "to_upper",
    "emit",
    "emit_properties",
    "format_value",
    "read_properties",
    "should_emit",
    "verify",
    "Convention",
    "DateFormatHandling",
    "Formatting",
    "NullHandling",
    "EmptyResult",
    "InvalidInput",
    "JsonMirrorError",
    "Culture",
    "JsonIgnore",
    "JsonProperty",
    "JsonRequired",
    "PropertyEntry",
    "PropertyMetadata",
    "SerializerSettings",
]
