from .base_convention import StrippedConvention
from ..context import CONVENTIONS
from ..enumeration import Convention
from ..schema import Culture


@CONVENTIONS.register(Convention.TITLE)
class TitleConvention(StrippedConvention):

    def _convert_single(self, char: str, culture: Culture) -> str:
        return self._convert_stripped(char, culture)

    def _convert_stripped(self, value: str, culture: Culture) -> str:
        return culture.title(culture.lower(value))
