from .culture import Culture
from .json_attributes import JsonIgnore, JsonProperty, JsonRequired
from .property_metadata import PropertyEntry, PropertyMetadata
from .serializer_settings import SerializerSettings

__all__ = [
    "Culture",
    # Markers
    "JsonIgnore",
    "JsonProperty",
    "JsonRequired",
    # Properties
    "PropertyEntry",
    "PropertyMetadata",
    # Settings
    "SerializerSettings",
]
