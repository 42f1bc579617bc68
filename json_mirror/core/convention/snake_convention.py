from .word_convention import WordConvention
from ..context import CONVENTIONS
from ..enumeration import Convention
from ..schema import Culture


@CONVENTIONS.register(Convention.SNAKE)
class SnakeConvention(WordConvention):
    """Lowercases everything and puts `_` between words and before each new uppercase run.

    Uppercase runs collapse into one segment: `HTTPServer` becomes `httpserver`,
    `NullableDateValueId` becomes `nullable_date_value_id`.
    """

    separator: str = "_"

    def _start_run(self, char: str, culture: Culture, value_started: bool, word_started: bool) -> str:
        if word_started:
            return self.separator + culture.lower(char)
        return culture.lower(char)

    def _continue_run(self, char: str, culture: Culture) -> str:
        return culture.lower(char)
