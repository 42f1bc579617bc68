from .decision import should_emit
from .object_emitter import emit, emit_properties, property_definition, property_name, verify
from .property_reader import build_metadata, read_properties
from .value_formatter import epoch_milliseconds, format_date, format_iso, format_value

__all__ = [
    "should_emit",
    "emit",
    "emit_properties",
    "property_definition",
    "property_name",
    "verify",
    "build_metadata",
    "read_properties",
    "epoch_milliseconds",
    "format_date",
    "format_iso",
    "format_value",
]
