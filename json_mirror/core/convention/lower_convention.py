from .base_convention import BaseConvention
from ..context import CONVENTIONS
from ..enumeration import Convention
from ..schema import Culture


@CONVENTIONS.register(Convention.LOWER)
class LowerConvention(BaseConvention):
    """Culture lowercase of the original text, punctuation included."""

    def _convert(self, value: str, culture: Culture) -> str:
        return culture.lower(value)
