from .base_convention import BaseConvention
from ..context import CONVENTIONS
from ..enumeration import Convention
from ..schema import Culture


@CONVENTIONS.register(Convention.NONE)
class NoneConvention(BaseConvention):

    def _convert(self, value: str, culture: Culture) -> str:
        return value
