from typing import Any

from ..enumeration import NullHandling
from ..schema import PropertyMetadata, SerializerSettings


def should_emit(metadata: PropertyMetadata, value: Any, settings: SerializerSettings | None = None) -> bool:
    """Decide whether one property appears in the serialized output.

    The first matching rule wins:

    1. ignored properties are never emitted;
    2. required properties are always emitted, null or not;
    3. a property level `INCLUDE` always emits;
    4. a property level `IGNORE` drops null values;
    5. otherwise null values follow `settings.default_null_handling`.
    """
    if settings is None:
        settings = SerializerSettings()

    if metadata.ignored:
        return False
    if metadata.required:
        return True
    if metadata.null_handling is NullHandling.INCLUDE:
        return True
    if metadata.null_handling is NullHandling.IGNORE and value is None:
        return False
    return value is not None or settings.default_null_handling is not NullHandling.IGNORE
