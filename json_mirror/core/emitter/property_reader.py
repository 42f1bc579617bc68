"""Reads an object's readable properties and their declarative metadata in declaration order."""

import dataclasses
from typing import Annotated, Any, Iterable, List, get_args, get_origin, get_type_hints

from loguru import logger
from pydantic import BaseModel

from ..enumeration import NullHandling
from ..errors import InvalidInput
from ..schema import JsonIgnore, JsonProperty, JsonRequired, PropertyEntry, PropertyMetadata

DATACLASS_METADATA_KEY = "json"
_UNSET = object()


def build_metadata(
    name: str,
    markers: Iterable[Any] = (),
    explicit_name: str | None = None,
    ignored: bool = False,
) -> PropertyMetadata:
    """Fold JsonProperty / JsonIgnore / JsonRequired markers into one PropertyMetadata.

    Objects that are not markers are skipped, so pydantic constraint metadata
    can be passed through unfiltered.
    """
    required = False
    null_handling = NullHandling.DEFAULT

    for marker in markers:
        if isinstance(marker, JsonIgnore):
            ignored = True
        elif isinstance(marker, JsonRequired):
            required = True
        elif isinstance(marker, JsonProperty):
            if marker.name:
                explicit_name = marker.name
            required = required or marker.required
            if marker.null_handling is not NullHandling.DEFAULT:
                null_handling = marker.null_handling

    return PropertyMetadata(
        name=name,
        explicit_name=explicit_name,
        ignored=ignored,
        required=required,
        null_handling=null_handling,
    )


def _explicit_alias(field_info) -> str | None:
    # aliases from an alias_generator have priority 1, user supplied ones 2
    if field_info.alias_priority is None or field_info.alias_priority < 2:
        return None
    return getattr(field_info, "serialization_alias", None) or field_info.alias


def _read_pydantic(obj: BaseModel) -> List[PropertyEntry]:
    model_class = type(obj)
    entries = []

    for name, field_info in model_class.model_fields.items():
        metadata = build_metadata(
            name,
            field_info.metadata,
            explicit_name=_explicit_alias(field_info),
            ignored=bool(field_info.exclude),
        )
        entries.append(PropertyEntry(metadata=metadata, value=getattr(obj, name)))

    for name, computed_info in model_class.model_computed_fields.items():
        metadata = build_metadata(name, explicit_name=_explicit_alias(computed_info))
        entries.append(PropertyEntry(metadata=metadata, value=getattr(obj, name)))

    return entries


def _annotated_markers(annotation: Any) -> tuple:
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[1:]
    return ()


def _resolved_hints(klass: type) -> dict:
    # postponed annotations arrive as strings, resolve them to see Annotated markers
    try:
        return get_type_hints(klass, include_extras=True)
    except (NameError, TypeError) as e:
        logger.warning(f"cannot resolve annotations of {klass.__name__}: {e!r}, markers in Annotated are skipped")
        return {}


def _read_dataclass(obj: Any) -> List[PropertyEntry]:
    hints = _resolved_hints(type(obj))
    entries = []

    for field in dataclasses.fields(obj):
        markers = list(_annotated_markers(hints.get(field.name, field.type)))
        extra = field.metadata.get(DATACLASS_METADATA_KEY, ())
        markers.extend(extra if isinstance(extra, (list, tuple)) else [extra])
        metadata = build_metadata(field.name, markers)
        entries.append(PropertyEntry(metadata=metadata, value=getattr(obj, field.name)))

    return entries


def _public_slots(klass: type) -> List[str]:
    names = []
    for base in reversed(klass.__mro__):
        slots = vars(base).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not name.startswith("_") and name not in names:
                names.append(name)
    return names


def _read_plain(obj: Any) -> List[PropertyEntry]:
    names = _public_slots(type(obj))
    if hasattr(obj, "__dict__"):
        names.extend(name for name in vars(obj) if not name.startswith("_") and name not in names)
    for klass in reversed(type(obj).__mro__):
        for name, attribute in vars(klass).items():
            if isinstance(attribute, property) and not name.startswith("_") and name not in names:
                names.append(name)

    entries = []
    for name in names:
        value = getattr(obj, name, _UNSET)
        # unset slots are not readable
        if value is _UNSET:
            continue
        entries.append(PropertyEntry(metadata=build_metadata(name), value=value))
    return entries


def read_properties(obj: Any) -> List[PropertyEntry]:
    """Return the readable properties of `obj` with their metadata.

    Pydantic models yield their fields then their computed fields, dataclasses
    their fields, and other objects their set public slots, their public
    instance attributes and then their properties.

    Raises:
        InvalidInput: If `obj` is None.
    """
    if obj is None:
        raise InvalidInput("object to read is None")

    if isinstance(obj, BaseModel):
        return _read_pydantic(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _read_dataclass(obj)
    return _read_plain(obj)
