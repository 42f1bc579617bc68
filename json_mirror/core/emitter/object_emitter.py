from typing import Any, Iterable

from loguru import logger

from .decision import should_emit
from .property_reader import read_properties
from .value_formatter import format_value
from ..convention import convert
from ..enumeration import Convention
from ..errors import InvalidInput
from ..schema import Culture, PropertyEntry, PropertyMetadata, SerializerSettings

INDENT = "  "


def property_name(
    metadata: PropertyMetadata,
    convention: Convention = Convention.CAMEL,
    culture: Culture | None = None,
) -> str:
    """The emitted name: the explicit name when not blank, else the declared name in `convention`.

    Raises:
        EmptyResult: If the declared name has nothing convertible left.
    """
    if metadata.explicit_name and metadata.explicit_name.strip():
        return metadata.explicit_name
    return convert(metadata.name, convention, culture, strict=True)


def property_definition(
    entry: PropertyEntry,
    settings: SerializerSettings | None = None,
    convention: Convention = Convention.CAMEL,
) -> str | None:
    """Render `"name":value` for one property, or None when it is not emitted."""
    if settings is None:
        settings = SerializerSettings()

    if not should_emit(entry.metadata, entry.value, settings):
        logger.debug(f"skip property={entry.metadata.name}")
        return None

    name = property_name(entry.metadata, convention, settings.culture)
    value = format_value(entry.value, settings)
    if settings.is_indented:
        return f'{INDENT}"{name}": {value}'
    return f'"{name}":{value}'


def emit_properties(
    entries: Iterable[PropertyEntry],
    settings: SerializerSettings | None = None,
    convention: Convention = Convention.CAMEL,
) -> str:
    """Join the definitions of the emitted properties into one object literal."""
    if settings is None:
        settings = SerializerSettings()

    definitions = []
    for entry in entries:
        definition = property_definition(entry, settings, convention)
        if definition is not None:
            definitions.append(definition)

    if not definitions:
        return "{}"
    if settings.is_indented:
        return "{\n" + ",\n".join(definitions) + "\n}"
    return "{" + ",".join(definitions) + "}"


def emit(obj: Any, settings: SerializerSettings | None = None, convention: Convention = Convention.CAMEL) -> str:
    """Reconstruct the reference serializer output for a flat object.

    Args:
        obj: A pydantic model, a dataclass instance or a plain object with scalar properties.
        settings: Serializer settings to mirror, defaults to `SerializerSettings()`.
        convention: Convention for property names without an explicit name.

    Returns:
        A single level JSON object literal.

    Raises:
        InvalidInput: If `obj` is None.
        EmptyResult: If a property name has nothing convertible left.
    """
    if obj is None:
        raise InvalidInput("object to emit is None")

    entries = read_properties(obj)
    logger.debug(f"emit {type(obj).__name__} with {len(entries)} properties")
    return emit_properties(entries, settings, convention)


def verify(
    obj: Any,
    reference: str,
    settings: SerializerSettings | None = None,
    convention: Convention = Convention.CAMEL,
) -> bool:
    """Compare the reconstruction of `obj` with the text a reference serializer produced."""
    emitted = emit(obj, settings, convention)
    if emitted == reference:
        return True

    logger.warning(f"{type(obj).__name__} mismatch:\nemitted={emitted}\nreference={reference}")
    return False
