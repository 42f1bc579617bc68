from pydantic import BaseModel, Field, field_validator

from .culture import Culture
from ..enumeration import DateFormatHandling, Formatting, NullHandling


class SerializerSettings(BaseModel):
    """Global settings of the reference serializer being mirrored."""

    default_null_handling: NullHandling = Field(default=NullHandling.INCLUDE)
    formatting: Formatting = Field(default=Formatting.COMPACT)
    date_format_handling: DateFormatHandling = Field(default=DateFormatHandling.EPOCH)
    date_format_string: str | None = Field(default=None, description="strftime pattern, wins when not blank")
    culture: Culture = Field(default_factory=Culture.current)
    escape_strings: bool = Field(default=False, description="escape string values like a JSON encoder")

    @field_validator("default_null_handling")
    @classmethod
    def _no_default_null_handling(cls, value: NullHandling) -> NullHandling:
        # settings are the end of the fall-through chain
        if value is NullHandling.DEFAULT:
            return NullHandling.INCLUDE
        return value

    @field_validator("culture", mode="before")
    @classmethod
    def _culture_from_name(cls, value):
        if value is None:
            return Culture.current()
        if isinstance(value, str):
            return Culture(name=value)
        return value

    @property
    def is_indented(self) -> bool:
        return self.formatting is Formatting.INDENTED
