from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..enumeration import NullHandling


class PropertyMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="declared identifier")
    explicit_name: str | None = Field(default=None)
    ignored: bool = Field(default=False)
    required: bool = Field(default=False)
    null_handling: NullHandling = Field(default=NullHandling.DEFAULT)


class PropertyEntry(BaseModel):
    """One readable property: its metadata plus the current value."""

    model_config = ConfigDict(frozen=True)

    metadata: PropertyMetadata
    value: Any = Field(default=None)
