from .base_convention import StrippedConvention
from ..context import CONVENTIONS
from ..enumeration import CharClass, Convention
from ..schema import Culture
from ..utils import classify_char


@CONVENTIONS.register(Convention.PASCAL)
class PascalConvention(StrippedConvention):
    """Strips punctuation and lowercases the first character when it is an uppercase letter.

    Note: this is the legacy behaviour the mirrored serializer setups rely on,
    it does not produce `TheQuickBrownFox` style output.
    """

    def _convert_stripped(self, value: str, culture: Culture) -> str:
        if classify_char(value[0]) is not CharClass.UPPER:
            return value
        return culture.lower(value[0]) + value[1:]
