from .word_convention import WordConvention
from ..context import CONVENTIONS
from ..enumeration import Convention
from ..schema import Culture


@CONVENTIONS.register(Convention.CAMEL)
class CamelConvention(WordConvention):
    """Joins words without a separator and lowercases the first letter of the whole value.

    Every other letter keeps its case, so `NullableDateValueId` becomes
    `nullableDateValueId` and `HTTPServer` becomes `hTTPServer`.
    """

    def _start_run(self, char: str, culture: Culture, value_started: bool, word_started: bool) -> str:
        if not value_started and not word_started:
            return culture.lower(char)
        return char

    def _continue_run(self, char: str, culture: Culture) -> str:
        return char
