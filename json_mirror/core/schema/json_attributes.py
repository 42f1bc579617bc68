"""Declarative per-property markers.

Attach them with `typing.Annotated` on pydantic or dataclass fields, or under the
`"json"` key of `dataclasses.field(metadata=...)`:

    class Order(BaseModel):
        order_id: Annotated[int | None, JsonProperty(name="id", required=True)] = None
        secret: Annotated[str, JsonIgnore()] = ""
"""

from dataclasses import dataclass

from ..enumeration import NullHandling


@dataclass(frozen=True)
class JsonProperty:
    name: str | None = None
    required: bool = False
    null_handling: NullHandling = NullHandling.DEFAULT


@dataclass(frozen=True)
class JsonIgnore:
    pass


@dataclass(frozen=True)
class JsonRequired:
    pass
